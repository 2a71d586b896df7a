"""
Runs xtb for a single job. Makes the external program call, redirects its output
into the job directory and classifies the result.
"""

import os
import shutil
import subprocess
import time
from pathlib import Path

from .command import JobCommand
from .results import (
    EXECUTABLE_NOT_FOUND,
    INPUT_NOT_FOUND,
    JobOutcome,
    Skipped,
    Succeeded,
    launch_failed,
    nonzero_exit,
)
from .workspace import JobWorkspace
from ..logging import setup_logger
from ..params import ENVIRON, WARNLEN, XTB_NAMES
from ..utilities import display_path, printf

logger = setup_logger(__name__)


class XtbRunner:
    """
    Launches xtb synchronously, one job at a time.
    """

    def __init__(self, xtb: str = "", env: dict[str, str] | None = None):
        """
        :param xtb: Configured path to the xtb binary, may be empty.
        :param env: Environment for the xtb process, defaults to a copy of the startup environment.
        """
        self._xtb: str = xtb
        self._env: dict[str, str] = env or ENVIRON

    @property
    def xtb(self) -> str:
        return self._xtb

    def resolve_executable(self) -> str | None:
        """
        Find the xtb binary: the configured path if it exists, otherwise the
        first recognized name found in PATH.

        The configured path is never replaced by the result of the search, so
        every job resolves the executable on its own.

        :return: Path to the executable or None if it cannot be found.
        """
        if self._xtb and Path(self._xtb).is_file():
            return self._xtb

        for name in XTB_NAMES:
            path = shutil.which(name, path=self._env.get("PATH"))
            if path:
                if self._xtb:
                    logger.debug(
                        f"xtb not found at {self._xtb}, using {path} from PATH."
                    )
                return path

        return None

    def run(self, command: JobCommand, workspace: JobWorkspace) -> JobOutcome:
        """
        Run xtb for a job and classify the result.

        Never raises for failures of the external program, these are always
        returned as Skipped outcomes.

        :param command: Arguments of the xtb call.
        :param workspace: Job directory and log files.
        :return: Succeeded if xtb returned 0, Skipped otherwise.
        """
        xtb = self.resolve_executable()
        if xtb is None:
            return self._skip(command.inp, EXECUTABLE_NOT_FOUND)

        # the file might have been removed since discovery
        if not command.inp.is_file():
            return self._skip(command.inp, INPUT_NOT_FOUND)

        start = time.perf_counter()
        try:
            printf(
                f"Running {command.mode.value} calculation for "
                f"{display_path(command.inp)} in {display_path(workspace.jobdir.name)}."
            )
            returncode = self._make_call([xtb, *command.args], workspace)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            return self._skip(
                command.inp, launch_failed(e), time.perf_counter() - start
            )
        runtime = time.perf_counter() - start

        if returncode != 0:
            return self._skip(command.inp, nonzero_exit(returncode), runtime)

        logger.info(
            f"{display_path(command.inp)} finished after {runtime:.2f} seconds."
        )
        return Succeeded(command.inp, runtime)

    def _make_call(self, call: list[str], workspace: JobWorkspace) -> int:
        """
        Make a call to xtb and write stdout and stderr into the workspace log files.

        Blocks until the process terminates, there is no timeout.

        :param call: List containing the call args to the external program.
        :param workspace: Job workspace, also used as working directory.
        :return: Returncode of the external program.
        """
        with (
            open(workspace.stdout_path, "w", newline=None) as outputfile,
            open(workspace.stderr_path, "w", newline=None) as errorfile,
        ):
            logger.debug(
                f"{f'pid{os.getpid()}:':{WARNLEN}}Running {[display_path(c) for c in call]}..."
            )

            sub = subprocess.Popen(
                call,
                shell=False,
                stdout=outputfile,
                stderr=errorfile,
                cwd=workspace.jobdir,
                env=self._env,
            )

            logger.debug(f"{f'pid{os.getpid()}:':{WARNLEN}}Started (PID: {sub.pid}).")

            returncode = sub.wait()

        logger.debug(
            f"{f'pid{os.getpid()}:':{WARNLEN}}Done (returncode {returncode})."
        )
        return returncode

    @staticmethod
    def _skip(inp: Path, reason: str, runtime: float = 0.0) -> Skipped:
        logger.warning(f"Skipping {display_path(inp)}: {reason}.")
        return Skipped(inp, reason, runtime)
