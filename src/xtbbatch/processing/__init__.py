from .command import JobCommand, build_command
from .results import JobFailure, JobOutcome, Skipped, Succeeded
from .runner import XtbRunner
from .workspace import JobWorkspace, build_workspace

__all__ = [
    "JobCommand",
    "build_command",
    "JobFailure",
    "JobOutcome",
    "Skipped",
    "Succeeded",
    "XtbRunner",
    "JobWorkspace",
    "build_workspace",
]
