from dataclasses import dataclass
from pathlib import Path

from ..params import CHARGE, SOLVENT, SOLVENT_MODEL, UNPAIRED, RunMode


@dataclass(frozen=True)
class JobCommand:
    """
    Arguments of a single xtb call, without the executable itself.
    """

    mode: RunMode
    inp: Path
    args: tuple[str, ...]


def build_command(mode: RunMode, omp: int, inp: Path) -> JobCommand:
    """
    Build the xtb arguments for a job.

    Charge, number of unpaired electrons and the implicit solvation are fixed.
    The input file is always the last argument.

    :param mode: Run mode, selects the calculation flags.
    :param omp: Number of threads for xtb (--parallel).
    :param inp: Input structure file.
    :return: The job command.
    """
    args: list[str] = [
        "--chrg",
        f"{CHARGE}",
        "--uhf",
        f"{UNPAIRED}",
        "--" + SOLVENT_MODEL,
        SOLVENT,
        "--parallel",
        f"{omp}",
    ]
    args.extend(mode.flags)
    args.append(str(inp))

    return JobCommand(mode=mode, inp=inp, args=tuple(args))
