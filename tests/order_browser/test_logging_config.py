import logging

import pytest
from pythonjsonlogger import jsonlogger

from order_browser.logging_config import LOG_FORMAT_ENV, configure_logging, resolve_log_format


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_resolve_log_format(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    assert resolve_log_format() == "json"

    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")
    assert resolve_log_format() == "plain"
    assert resolve_log_format("json") == "json"


def test_json_formatter_by_default(monkeypatch, root_logger):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)

    configure_logging(level=logging.DEBUG)

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_plain_formatter_replaces_handlers(root_logger):
    configure_logging(force_format="plain")
    configure_logging(force_format="plain")

    assert len(root_logger.handlers) == 1
    formatter = root_logger.handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)
    assert formatter._fmt == "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
