"""
Storing constants for the use in all xtbbatch modules.
Run modes, fixed xtb parameters, file names and return codes.
"""

import os
from enum import IntEnum, StrEnum

from .__version__ import __version__

ENVIRON = os.environ.copy()


class RunMode(StrEnum):
    """Operational modes, each requesting a different xtb calculation."""

    OPT = "opt"
    OHESS = "ohess"
    HESS = "hess"

    @property
    def prefix(self) -> str:
        """Prefix of the job directories created in this mode."""
        return f"{self.value}_"

    @property
    def flags(self) -> tuple[str, ...]:
        """xtb flags requesting the calculation of this mode."""
        return XTB_MODE_FLAGS[self]

    @property
    def description(self) -> str:
        return MODE_DESCRIPTIONS[self]


class JobState(StrEnum):
    PENDING = "pending"
    WORKSPACE_READY = "workspace_ready"
    COMMAND_BUILT = "command_built"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"


class Returncode(IntEnum):
    OK = 0
    ARGUMENT_ERROR = 1
    CONFIG_ERROR = 2


XTB_MODE_FLAGS: dict[RunMode, tuple[str, ...]] = {
    RunMode.OPT: ("--opt", "vtight"),
    RunMode.OHESS: ("--ohess", "vtight"),
    RunMode.HESS: ("--hess",),
}

MODE_DESCRIPTIONS: dict[RunMode, str] = {
    RunMode.OPT: "Geometry optimization",
    RunMode.OHESS: "Geometry optimization + Hessian",
    RunMode.HESS: "Hessian on optimized geometries",
}

# menu entries of the interactive mode selection
MODE_MENU: dict[str, RunMode] = {
    "1": RunMode.OPT,
    "2": RunMode.OHESS,
    "3": RunMode.HESS,
}

# fixed chemistry parameters passed to every xtb call
CHARGE = 0
UNPAIRED = 0
SOLVENT_MODEL = "alpb"
SOLVENT = "water"

# names under which xtb is searched in PATH
XTB_NAMES = ("xtb",)

STRUCTURE_SUFFIXES = (".xyz",)

# xtb writes the optimized geometry into this file
OPT_SENTINEL = "xtbopt.xyz"

SUMMARY_FILENAME = "xtb_summary_log.txt"
LOG_FILENAME = "xtbbatch.log"
STDOUT_SUFFIX = ".xtb.log"
STDERR_SUFFIX = ".xtb.err.log"

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

RCNAME = ".xtbbatchrc"
RCENV = "XTBBATCHRC_PATH"

OMP_DEFAULT = 4

DESCR = f"""
         ______________________________________________________________
        |                                                              |
        |                 xtbbatch - batch driver for xtb              |
        |{'v ' + __version__:^{62}}|
        |      optimizations and Hessians over structure folders       |
        |______________________________________________________________|

        This program is distributed in the hope that it will be useful,
        but WITHOUT ANY WARRANTY; without even the implied warranty of
        MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
"""

START_DESCR = "Run xtb optimizations and Hessian calculations over a folder tree."

PLENGTH = 100

WARNLEN = max(len(i) for i in ["WARNING:", "ERROR:", "INFORMATION:"]) + 1
