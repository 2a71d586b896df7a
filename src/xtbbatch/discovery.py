"""
Discovery of the structure files a batch run works on.
"""

from pathlib import Path

from .errors import ConfigurationError
from .logging import setup_logger
from .params import OPT_SENTINEL, STRUCTURE_SUFFIXES, RunMode

logger = setup_logger(__name__)


def is_selected(path: Path, mode: RunMode) -> bool:
    """
    Check whether a structure file is eligible input for the given mode.

    Hessian runs only work on geometries optimized by earlier runs, all other
    modes skip those to avoid optimizing a geometry twice.

    :param path: Path to the structure file.
    :param mode: Run mode.
    :return: True if the file should be processed.
    """
    if mode == RunMode.HESS:
        return path.name == OPT_SENTINEL
    return path.name != OPT_SENTINEL


def discover_inputs(root: str | Path, mode: RunMode) -> list[Path]:
    """
    Recursively collect all structure files below 'root' that are eligible for 'mode'.

    :param root: Root folder to search.
    :param mode: Run mode, determines the inclusion filter.
    :raises ConfigurationError: If the root folder does not exist.
    :return: Sorted list of absolute paths.
    """
    root = Path(root).expanduser().resolve()
    if not root.is_dir():
        raise ConfigurationError(f"Root folder {root} does not exist.")

    inputs = sorted(
        path
        for path in root.rglob("*")
        if path.suffix in STRUCTURE_SUFFIXES
        and path.is_file()
        and is_selected(path, mode)
    )

    logger.info(f"Found {len(inputs)} input file(s) for mode {mode.value} in {root}.")
    return inputs
