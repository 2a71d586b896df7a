"""
Unit tests for logging module.
"""

import logging
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset logging state between tests."""
    import xtbbatch.logging

    original_filehandler_path = xtbbatch.logging.__filehandler_path
    xtbbatch.logging.__filehandler_path = None

    yield

    xtbbatch.logging.__filehandler_path = original_filehandler_path

    # Clean up test loggers and file handlers attached to the package loggers
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger) or not name.startswith("xtbbatch"):
            continue
        for handler in logger.handlers[:]:
            if name.startswith("xtbbatch.test_") or isinstance(
                handler, logging.FileHandler
            ):
                handler.close()
                logger.removeHandler(handler)
        if name.startswith("xtbbatch.test_"):
            del logging.Logger.manager.loggerDict[name]


def test_logger_created_after_set_filehandler_receives_filehandler():
    """Test that logger created after set_filehandler() receives FileHandler."""
    from xtbbatch.logging import setup_logger, set_filehandler

    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "test.log"

        set_filehandler(log_path)
        logger = setup_logger("xtbbatch.test_after_filehandler")

        assert len(logger.handlers) == 2
        file_handler = next(
            h for h in logger.handlers if isinstance(h, logging.FileHandler)
        )
        assert file_handler.baseFilename == str(log_path)

        logger.info("Test message")
        assert "Test message" in log_path.read_text()


def test_logger_created_before_set_filehandler_receives_filehandler():
    """Test that logger created before set_filehandler() receives FileHandler via update."""
    from xtbbatch.logging import setup_logger, set_filehandler

    logger = setup_logger("xtbbatch.test_before_filehandler")

    # Should only have StreamHandler initially
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)

    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "test.log"
        set_filehandler(log_path)

        assert len(logger.handlers) == 2
        file_handler = next(
            h for h in logger.handlers if isinstance(h, logging.FileHandler)
        )
        assert file_handler.baseFilename == str(log_path)


def test_no_duplicate_filehandlers_for_same_path():
    """Test that no duplicate FileHandlers are created for the same path."""
    from xtbbatch.logging import setup_logger, set_filehandler

    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "test.log"

        set_filehandler(log_path)
        logger = setup_logger("xtbbatch.test_no_duplicates")
        set_filehandler(log_path)

        assert (
            sum(1 for h in logger.handlers if isinstance(h, logging.FileHandler)) == 1
        ), "Should not create duplicate FileHandlers for the same path"


def test_set_loglevel():
    from xtbbatch.logging import setup_logger, set_loglevel

    logger = setup_logger("xtbbatch.test_loglevel")
    set_loglevel("WARNING")
    assert logger.level == logging.WARNING

    set_loglevel("DEBUG")
    assert logger.level == logging.DEBUG


def test_other_loggers_untouched():
    from xtbbatch.logging import set_loglevel

    foreign = logging.getLogger("someotherpackage")
    foreign.setLevel(logging.ERROR)

    set_loglevel("DEBUG")

    assert foreign.level == logging.ERROR
