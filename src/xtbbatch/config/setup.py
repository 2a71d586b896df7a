import os
import shutil
from argparse import Namespace
from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .general import GeneralConfig
from .paths import PathsConfig
from .run_config import RunConfig
from ..errors import ConfigurationError
from ..params import RCENV, RCNAME, XTB_NAMES, RunMode
from ..logging import setup_logger

logger = setup_logger(__name__)


def configure(
    root: str | Path,
    mode: str | RunMode,
    rcpath: str | None = None,
    args: Namespace | None = None,
) -> RunConfig:
    """
    Resolve the configuration of a run from the configuration file and command line arguments.

    If no configuration file path is provided, the default locations are searched.
    Command line arguments take precedence over the configuration file, which in turn
    takes precedence over the defaults.
    An empty xtb path stays empty, the executable is looked up in PATH for each job.

    :param root: Root folder of the run.
    :param mode: Run mode.
    :param rcpath: Path to the configuration file.
    :param args: Parsed command line arguments. Defaults to None.
    :raises ConfigurationError: If the configuration file is missing or any setting is invalid.
    :return: Configuration instance.
    """
    # NOTE: order of priority for rcfile path:
    # - args.inprcpath
    # - home dir
    # - env variable
    if rcpath is None:
        rcfile = find_rcfile()
    else:
        rcfile = Path(rcpath).expanduser().resolve()
        if not rcfile.is_file():
            raise ConfigurationError(f"No configuration file found at {rcpath}.")

    settings: dict[str, dict[str, Any]] = {}
    if rcfile is not None:
        try:
            settings = read_rcfile(rcfile, silent=False)
        except ConfigParserError as e:
            raise ConfigurationError(f"Could not read configuration file {rcfile}: {e}")

    settings.setdefault("general", {})
    settings.setdefault("paths", {})

    # command line overrides
    for section, model in (("general", GeneralConfig), ("paths", PathsConfig)):
        for field in model.model_fields:
            setting = getattr(args, field, None)
            if setting is not None:
                settings[section][field] = setting

    try:
        return RunConfig.model_validate(
            {
                "root": Path(root),
                "mode": mode,
                "general": settings["general"],
                "paths": settings["paths"],
            }
        )
    except ValidationError as e:
        raise ConfigurationError("Invalid run configuration.", validation_error=e)


def read_rcfile(path: Path, silent: bool = True) -> dict[str, dict[str, Any]]:
    """
    Read the configuration file at 'path' and return the settings as a dictionary.

    :param path: Path to the configuration file.
    :param silent: If True, no messages will be printed.
    :return: Dictionary containing the settings read from the configuration file.
    """
    if not silent:
        print(f"Reading configuration file from {path}.")

    parser = ConfigParser()
    parser.read_string(path.read_text())

    return {section: dict(parser[section]) for section in parser.sections()}


def write_rcfile(path: Path) -> None:
    """
    Write new configuration file with default settings into file at 'path'.

    An existing file is renamed to '<name>_OLD'.

    :param path: Path to the new configuration file.
    :return: None
    """
    if path.is_file():
        print(
            f"An existing configuration file has been found at {path}.\n",
            f"Renaming existing file to {path.name}_OLD.\n",
        )
        path.rename(f"{path}_OLD")

    print("Trying to determine program paths automatically ...")
    paths = find_program_paths()

    parser = ConfigParser()
    parser.read_dict(
        {
            "general": GeneralConfig().model_dump(mode="json"),
            "paths": PathsConfig.model_validate(paths).model_dump(mode="json"),
        }
    )

    print(f"Writing new configuration file to {path} ...")
    with open(path, "w", newline=None) as rcfile:
        parser.write(rcfile)

    print(
        f"\nA new configuration file was written into {path}.\n"
        + "You should adjust the settings to your needs and set the xtb path.\n"
    )

    if RCNAME not in path.name:
        print(
            f"To load it automatically make sure that the file name is '{RCNAME}' and it's located in your home directory.\n"
            f"Current name: '{path.name}'.\n"
        )


def find_program_paths() -> dict[str, str]:
    """
    Try to determine program paths automatically.

    :return: Dictionary of found program paths.
    """
    paths: dict[str, str] = {}
    for name in XTB_NAMES:
        path = shutil.which(name)
        if path:
            paths["xtb"] = path
            break

    return paths


def find_rcfile() -> Path | None:
    """
    Check for existing rcfile in $home dir or rcfile path in environment variable.

    :return: Path to the configuration file if found, else None.
    """
    rcpath = None
    homepath = Path("~").expanduser() / RCNAME
    envpath = Path(os.environ[RCENV]) if os.environ.get(RCENV) else None

    if homepath.is_file():
        rcpath = homepath
    elif envpath is not None and envpath.is_file():
        rcpath = envpath

    return rcpath
