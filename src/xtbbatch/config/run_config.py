from pathlib import Path

from pydantic import Field, field_validator

from .generic import GenericConfig
from .general import GeneralConfig
from .paths import PathsConfig
from ..params import RunMode


class RunConfig(GenericConfig):
    """
    Fully resolved configuration of a single batch run.
    """

    root: Path
    """Folder that is searched recursively for structure files."""

    mode: RunMode
    """Calculation requested for every selected structure file."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)

    paths: PathsConfig = Field(default_factory=PathsConfig)

    @field_validator("root")
    @classmethod
    def root_must_exist(cls, value: Path) -> Path:
        """
        Resolve the root folder and make sure it exists.

        :param value: The root folder.
        :return: The absolute root folder.
        """
        root = value.expanduser().resolve()
        if not root.is_dir():
            raise ValueError(f"Root folder {root} does not exist.")
        return root

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def omp(self) -> int:
        return self.general.omp

    @property
    def xtb(self) -> str:
        return self.paths.xtb
