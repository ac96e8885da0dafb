import logging
import tempfile
from pathlib import Path

from newsreader.logging import get_logger, setup_logging


def test_setup_logging_default() -> None:
    logger = setup_logging()

    assert logger.name == "newsreader"
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_setup_logging_debug_level() -> None:
    logger = setup_logging(level="DEBUG")

    assert logger.level == logging.DEBUG


def test_setup_logging_replaces_handlers() -> None:
    setup_logging()
    logger = setup_logging()

    assert len(logger.handlers) == 1


def test_setup_logging_with_file() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        log_file = Path(temp_dir) / "logs" / "newsreader.log"

        logger = setup_logging(log_file=str(log_file))
        logger.info("hello")

        assert log_file.exists()
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()


def test_get_logger() -> None:
    logger = get_logger("viewmodel")

    assert logger.name == "newsreader.viewmodel"
    assert isinstance(logger, logging.Logger)
