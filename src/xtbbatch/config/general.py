from pydantic import Field

from .generic import GenericConfig
from ..params import OMP_DEFAULT


class GeneralConfig(GenericConfig):
    """Config class for general settings"""

    omp: int = Field(gt=0, default=OMP_DEFAULT)
    """Number of threads passed to every xtb call via --parallel."""
