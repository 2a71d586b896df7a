import logging
import os
import sys
from pathlib import Path

__loglevel = logging.INFO
__filehandler_path: str | Path | None = None

FILE_FORMAT = "{asctime:24s}-{name:^28s}-{levelname:^10s}- {message}"


def setup_logger(name: str) -> logging.Logger:
    """
    Initializes and configures a logger with the specified name.

    If a file handler path has been configured via set_filehandler(),
    the logger will automatically receive a FileHandler in addition to
    the StreamHandler.

    :param name: The name of the logger.
    :return: The configured logger instance.
    """
    global __loglevel, __filehandler_path

    logger = logging.getLogger(name)
    logger.setLevel(__loglevel)

    # Only add handlers if the logger doesn't have any
    if not logger.handlers:
        # stdout only gets warnings, everything else goes to the log file
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setLevel(logging.WARNING)
        stream_formatter = logging.Formatter("{levelname:<10s}- {message}", style="{")
        stream_handler.setFormatter(stream_formatter)
        logger.addHandler(stream_handler)

        if __filehandler_path is not None:
            file_handler = logging.FileHandler(__filehandler_path)
            file_handler.setLevel(__loglevel)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, style="{"))
            logger.addHandler(file_handler)

    return logger


def _xtbbatch_loggers() -> list[logging.Logger]:
    return [
        logger
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger) and name.startswith("xtbbatch")
    ]


def set_filehandler(path: str | Path):
    """
    Set filehandler for all xtbbatch loggers, avoiding duplicates.

    Loggers created after this call receive the FileHandler in setup_logger,
    existing ones are updated here.

    :param path: Path to the log file.
    :return: None
    """
    global __loglevel, __filehandler_path
    __filehandler_path = path
    filehandler_path = os.path.abspath(path)
    formatter = logging.Formatter(FILE_FORMAT, style="{")
    for logger in _xtbbatch_loggers():
        filehandler_exists = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == filehandler_path
            for h in logger.handlers
        )
        if not filehandler_exists:
            handler = logging.FileHandler(path)
            handler.setLevel(__loglevel)
            handler.setFormatter(formatter)
            logger.addHandler(handler)


def set_loglevel(loglevel: str) -> None:
    """
    Set the log level for all xtbbatch loggers.

    :param loglevel: The log level to set, e.g. "DEBUG".
    :return: None
    """
    global __loglevel
    __loglevel = getattr(logging, loglevel)
    for logger in _xtbbatch_loggers():
        logger.setLevel(__loglevel)
