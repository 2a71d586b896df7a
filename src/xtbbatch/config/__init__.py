"""
Contains configuration related classes and functions.
"""

from .generic import GenericConfig
from .general import GeneralConfig
from .paths import PathsConfig
from .run_config import RunConfig
from .setup import configure

__all__ = [
    "GenericConfig",
    "GeneralConfig",
    "PathsConfig",
    "RunConfig",
    "configure",
]
