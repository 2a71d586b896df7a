from pathlib import Path

from pydantic import ConfigDict, Field, field_validator

from .generic import GenericConfig
from ..logging import setup_logger

logger = setup_logger(__name__)


class PathsConfig(GenericConfig):
    """
    Configuration for paths to external programs.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        use_attribute_docstrings=True,
        validate_assignment=True,
    )

    xtb: str = Field("")
    """Absolute path to the xtb binary. Searched in PATH if empty."""

    @field_validator("xtb")
    @classmethod
    def validate_xtb(cls, value: str):
        """
        Expand the xtb executable path. A missing binary is not an error here,
        every job is skipped later instead.

        :param value: The path to validate.
        :return: The expanded path.
        """
        if not value:
            return value
        expanded = str(Path(value).expanduser())
        if not Path(expanded).is_file():
            logger.warning(
                f"xtb executable not found at {expanded}, falling back to PATH."
            )
        return expanded
