from . import (
    config,
    discovery,
    errors,
    logging,
    orchestrator,
    params,
    processing,
    summary,
)
from .__version__ import __version__

__all__ = [
    "config",
    "discovery",
    "errors",
    "logging",
    "orchestrator",
    "params",
    "processing",
    "summary",
    "__version__",
]
