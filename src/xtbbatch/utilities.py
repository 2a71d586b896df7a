"""
Utility functions which are used in the xtbbatch modules, mostly printout routines.
"""

import json
import os
from datetime import timedelta
from pathlib import Path

from pydantic import ValidationError

from .params import PLENGTH


def print_validation_errors(e: ValidationError) -> None:
    """
    Print Pydantic validation errors in a human-readable format.

    :param e: The ValidationError instance containing the errors.
    :return: None
    """
    printf(f"Found {e.error_count()} validation error(s):\n")
    for error in e.errors():
        field = " -> ".join(map(str, error["loc"]))
        message = error["msg"]
        user_input = error["input"]
        # Handle model-level validator errors differently
        if not error["loc"] or (
            len(error["loc"]) == 1 and error["loc"][0] == "__root__"
        ):
            printf("  - Model-level error:")
            printf(f"    Message: {message}")
        else:
            try:
                user_input_str = json.dumps(user_input)
            except TypeError:
                user_input_str = str(user_input)
            printf(f"  - Field: '{field}'")
            printf(f"    Message: {message}")
            printf(f"    Your input: {user_input_str}")
        printf("-" * 20)


def printf(*args, **kwargs):
    """
    patch print to always flush
    """
    print(*args, flush=True, **kwargs)


def display_path(path: Path | str) -> str:
    """
    Printable form of a path. Bytes of the file name that are not valid UTF-8
    are shown as backslash escapes.

    :param path: The path to display.
    :return: The path as a str without surrogate characters.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def get_time(time: float) -> tuple[int, int, int]:
    """
    Calculate seconds, minutes, hours from time in seconds.

    :param time: The time in seconds.
    :return: Tuple of seconds, minutes, hours.
    """
    time_taken = timedelta(seconds=int(time))
    hours, r = divmod(time_taken.seconds, 3600)
    minutes, seconds = divmod(r, 60)
    if time_taken.days:
        hours += time_taken.days * 24
    return seconds, minutes, hours


def format_time(time: float) -> str:
    seconds, minutes, hours = get_time(time)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def h1(text: str) -> str:
    """
    Create a formatted header of type 1.

    :param text: The text to be formatted.
    :return: The formatted header.
    """
    return "\n" + f" {text} ".center(PLENGTH, "-") + "\n"


def h2(text: str) -> str:
    """
    Create a formatted header of type 2.

    :param text: The text to be formatted.
    :return: The formatted header.
    """
    return f"""
{"-" * PLENGTH}
{text.center(PLENGTH, " ")}
{"-" * PLENGTH}
    """
