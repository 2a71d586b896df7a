"""
Contains custom error types
"""

from pydantic import ValidationError


class ConfigurationError(Exception):
    """
    Raised when the run cannot start, e.g. the root folder is missing or the
    run mode is unknown. Aborts the run before any job is started.
    """

    def __init__(self, message: str, validation_error: ValidationError | None = None):
        super().__init__(message)
        self.message = message
        # kept so that the cli can print the single field errors
        self.validation_error = validation_error

    def __str__(self) -> str:
        return f"ConfigurationError: {self.message}"
