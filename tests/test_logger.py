# File: tests/test_logger.py
import logging

import pytest
from site_walker.logger import LOGGER_NAME, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_init_logging_replaces_handlers():
    lg = init_logging(level="DEBUG")
    lg = init_logging(level="WARNING")

    assert lg.name == LOGGER_NAME
    assert lg.level == logging.WARNING
    assert len(lg.handlers) == 1
    assert lg.propagate is False


def test_init_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "walker.log"
    lg = init_logging(level="INFO", log_file=log_file, log_format="%(levelname)s %(message)s")
    lg.info("visited %s", "http://example.com/")
    lg.debug("hidden")
    for handler in lg.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO visited http://example.com/" in text
    assert "hidden" not in text
    assert len(lg.handlers) == 2
