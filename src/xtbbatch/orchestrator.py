"""
Sequential batch over all discovered structure files.

Every input is attempted exactly once:
PENDING -> WORKSPACE_READY -> COMMAND_BUILT -> RUNNING -> SUCCEEDED | SKIPPED
"""

from pathlib import Path

from .config import RunConfig
from .discovery import discover_inputs
from .logging import setup_logger
from .params import JobState
from .processing import (
    JobFailure,
    JobOutcome,
    Skipped,
    Succeeded,
    XtbRunner,
    build_command,
    build_workspace,
)
from .processing.results import unexpected_error
from .summary import RunSummary
from .utilities import display_path, printf

logger = setup_logger(__name__)


def _transition(inp: Path, state: JobState) -> None:
    logger.debug(f"{display_path(inp)}: {state.value}")


def process_job(
    inp: Path, config: RunConfig, runner: XtbRunner
) -> JobOutcome | JobFailure:
    """
    Run a single job.

    Errors of the external program are already Skipped outcomes, anything else
    that goes wrong while processing this input is returned as JobFailure.

    :param inp: Input structure file.
    :param config: Run configuration.
    :param runner: Runner used to launch xtb.
    :return: The outcome of the job or a JobFailure.
    """
    _transition(inp, JobState.PENDING)
    try:
        workspace = build_workspace(inp, config.mode)
        _transition(inp, JobState.WORKSPACE_READY)

        command = build_command(config.mode, config.omp, inp)
        _transition(inp, JobState.COMMAND_BUILT)

        _transition(inp, JobState.RUNNING)
        return runner.run(command, workspace)
    except Exception as e:
        logger.debug(f"Processing {display_path(inp)} raised {e!r}.", exc_info=True)
        return JobFailure(inp, str(e) or e.__class__.__name__)


def settle(result: JobOutcome | JobFailure) -> JobOutcome:
    """
    Turn a JobFailure into a Skipped outcome. Outcomes are returned as they are.

    :param result: Result of process_job.
    :return: The final outcome of the job.
    """
    match result:
        case JobFailure(inp=inp, error=error):
            logger.warning(f"Skipping {display_path(inp)}: {unexpected_error(error)}.")
            return Skipped(inp, unexpected_error(error))
        case _:
            return result


def run_batch(config: RunConfig, runner: XtbRunner | None = None) -> RunSummary:
    """
    Process all structure files below the root folder one after another and
    write the summary report.

    :param config: Run configuration.
    :param runner: Runner used to launch xtb, defaults to one using the configured xtb path.
    :raises ConfigurationError: If the root folder does not exist. No job is started in this case.
    :return: The summary of the batch.
    """
    inputs = discover_inputs(config.root, config.mode)
    runner = runner or XtbRunner(config.xtb)
    summary = RunSummary(config.mode)

    printf(f"Found {len(inputs)} input file(s) in {display_path(config.root)}.")

    for i, inp in enumerate(inputs, start=1):
        logger.info(f"Job {i}/{len(inputs)}: {display_path(inp)}")
        outcome = settle(process_job(inp, config, runner))
        _transition(
            inp,
            JobState.SUCCEEDED if isinstance(outcome, Succeeded) else JobState.SKIPPED,
        )
        summary.record(outcome)

    summary.write(config.root)

    return summary
