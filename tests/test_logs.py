import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from ciphercraft.errors import InvalidArgument
from ciphercraft.logs import LOGGER_NAME, configure_logging, configure_logging_from_config


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = before[0]
    logger.setLevel(before[1])

def test_configure_logging_writes_to_console(package_logger):
    buf = io.StringIO()
    configure_logging("debug", console=Console(file=buf, width=200))
    assert package_logger.level == logging.DEBUG
    logging.getLogger("ciphercraft.evaluator").warning("word list unavailable")
    assert "word list unavailable" in buf.getvalue()

def test_configure_logging_replaces_handler(package_logger):
    configure_logging("INFO")
    configure_logging("WARNING")
    rich_handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert package_logger.level == logging.WARNING

def test_unknown_level(package_logger):
    with pytest.raises(InvalidArgument):
        configure_logging("LOUD")

def test_configure_from_config(package_logger):
    from ciphercraft.config import DEFAULTS

    configure_logging_from_config(dict(DEFAULTS, log_level="error"))
    assert package_logger.level == logging.ERROR
    configure_logging_from_config(DEFAULTS)
    assert package_logger.level == logging.WARNING
