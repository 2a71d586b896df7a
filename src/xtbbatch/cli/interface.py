import sys
import time
from argparse import Namespace
from collections.abc import Callable
from pathlib import Path

from ..config import RunConfig, configure
from ..errors import ConfigurationError
from ..logging import set_filehandler, set_loglevel, setup_logger
from ..params import (
    DESCR,
    LOG_FILENAME,
    MODE_MENU,
    PLENGTH,
    SUMMARY_FILENAME,
    Returncode,
    __version__,
)
from ..utilities import (
    display_path,
    format_time,
    h1,
    print_validation_errors,
    printf,
)
from .cml_parser import parse

logger = setup_logger(__name__)


def console_entry_point() -> None:
    sys.exit(entry_point())


def entry_point(
    argv: list[str] | None = None, prompt: Callable[[str], str] = input
) -> Returncode:
    """
    Console entry point to run xtbbatch from the command line.

    :param argv: Command line arguments
    :param prompt: Function used to ask for missing settings
    :return: Return code, OK for every completed batch regardless of skipped jobs
    """
    try:
        args = parse(argv)
    except SystemExit as e:
        return Returncode.OK if not e.code else Returncode.ARGUMENT_ERROR

    if args.version:
        printf(__version__)
        return Returncode.OK

    if args.writeconfig:
        from ..config.setup import write_rcfile

        write_rcfile(Path() / "xtbbatchrc_NEW")
        return Returncode.OK

    print(DESCR + "\n")
    printf("CALL: " + " ".join(arg for arg in sys.argv))

    try:
        config = resolve_config(args, prompt)
    except ConfigurationError as e:
        print_configuration_error(e)
        return Returncode.CONFIG_ERROR

    # Set up logging
    set_loglevel(args.loglevel)
    logpath = Path(args.logpath or config.root / LOG_FILENAME).resolve()
    set_filehandler(logpath)

    for section in (config, config.general, config.paths):
        printf(section)
    printf("\n" + "".ljust(int(PLENGTH), "-") + "\n")

    from ..orchestrator import run_batch

    start = time.perf_counter()
    try:
        summary = run_batch(config)
    except ConfigurationError as e:
        print_configuration_error(e)
        return Returncode.CONFIG_ERROR
    runtime = time.perf_counter() - start

    printf(h1("SUMMARY"))
    printf(summary.table())
    printf(f"\n{'Total runtime':>19}: {format_time(runtime)}")
    printf(f"Summary written to {display_path(config.root / SUMMARY_FILENAME)}")
    printf("\nxtbbatch all done!")

    return Returncode.OK


def resolve_config(
    args: Namespace, prompt: Callable[[str], str] = input
) -> RunConfig:
    """
    Resolve the run configuration, asking for root folder and run mode if they
    were not given on the command line.

    :param args: Parsed command line arguments
    :param prompt: Function used to ask for missing settings
    :raises ConfigurationError: If any setting is invalid
    :return: The run configuration
    """
    root = args.root or ask_root(prompt)
    mode = args.mode or ask_mode(prompt)

    return configure(root, mode, rcpath=args.inprcpath, args=args)


def ask_root(prompt: Callable[[str], str] = input) -> str:
    """
    Ask for the root folder.

    :param prompt: Function used to ask
    :raises ConfigurationError: If no answer was given
    :return: The root folder as given by the user
    """
    try:
        answer = prompt("Please enter the root folder containing the *.xyz files: ")
    except EOFError:
        raise ConfigurationError("No root folder given.")

    answer = answer.strip().strip("\"'")
    if not answer:
        raise ConfigurationError("No root folder given.")
    return answer


def ask_mode(prompt: Callable[[str], str] = input) -> str:
    """
    Show the mode menu and ask for a choice.

    Accepts the menu number as well as the mode name.

    :param prompt: Function used to ask
    :raises ConfigurationError: If the answer is no valid run mode
    :return: The run mode value
    """
    printf("Available run modes:")
    for key, mode in MODE_MENU.items():
        printf(f"  {key}) {mode.value:<6} {mode.description}")

    try:
        answer = prompt("Please choose a run mode: ").strip().lower()
    except EOFError:
        raise ConfigurationError("No run mode given.")

    if answer in MODE_MENU:
        return MODE_MENU[answer].value
    if answer in (mode.value for mode in MODE_MENU.values()):
        return answer

    raise ConfigurationError(f"Invalid run mode '{answer}'.")


def print_configuration_error(e: ConfigurationError) -> None:
    printf(str(e))
    if e.validation_error is not None:
        print_validation_errors(e.validation_error)
    logger.debug(f"Aborting run: {e}")
