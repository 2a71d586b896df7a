from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Succeeded:
    """xtb terminated with exit code 0."""

    inp: Path
    runtime: float = 0.0


@dataclass(frozen=True)
class Skipped:
    """The job was not run or xtb did not terminate normally."""

    inp: Path
    reason: str
    runtime: float = 0.0


JobOutcome = Succeeded | Skipped


@dataclass(frozen=True)
class JobFailure:
    """Unexpected error while processing a job, settled into a Skipped outcome by the orchestrator."""

    inp: Path
    error: str


# Reasons for skipped jobs
EXECUTABLE_NOT_FOUND = "executable not found"
INPUT_NOT_FOUND = "input file not found"


def nonzero_exit(returncode: int) -> str:
    return f"non-zero exit code {returncode}"


def launch_failed(error: BaseException) -> str:
    return f"failed to start xtb: {error}"


def unexpected_error(error: str) -> str:
    return f"unexpected error: {error}"
