from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..logging import setup_logger
from ..params import STDERR_SUFFIX, STDOUT_SUFFIX, TIMESTAMP_FORMAT, RunMode

logger = setup_logger(__name__)


@dataclass(frozen=True)
class JobWorkspace:
    """
    Output directory of a single job and the two log files xtb writes into.
    """

    jobdir: Path
    stdout_path: Path
    stderr_path: Path


def workspace_name(inp: Path, mode: RunMode, now: datetime) -> str:
    """
    Name of the job directory, e.g. 'opt_benzene_20240131_120000'.

    :param inp: Input structure file.
    :param mode: Run mode.
    :param now: Creation time of the workspace.
    :return: Directory name.
    """
    return f"{mode.prefix}{inp.stem}_{now.strftime(TIMESTAMP_FORMAT)}"


def build_workspace(
    inp: Path, mode: RunMode, now: datetime | None = None
) -> JobWorkspace:
    """
    Create the job directory next to the input file.

    Directories are never removed. If the directory already exists (same input
    and mode within the same second) it is reused.

    :param inp: Input structure file.
    :param mode: Run mode.
    :param now: Timestamp to use, defaults to the current time.
    :return: The job workspace.
    """
    if now is None:
        now = datetime.now()

    jobdir = inp.parent / workspace_name(inp, mode, now)
    jobdir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created job directory {jobdir}.")

    return JobWorkspace(
        jobdir=jobdir,
        stdout_path=jobdir / f"{inp.stem}{STDOUT_SUFFIX}",
        stderr_path=jobdir / f"{inp.stem}{STDERR_SUFFIX}",
    )
