import logging

from pythonjsonlogger import jsonlogger

from store_browser.logging_config import configure_logging


def test_plain_format_replaces_handlers():
    configure_logging(force_format="plain")
    configure_logging(force_format="plain")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_json_format_from_env(monkeypatch):
    monkeypatch.setenv("STORE_BROWSER_LOG_FORMAT", "json")

    configure_logging(level=logging.DEBUG)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_argument_overrides_env(monkeypatch):
    monkeypatch.setenv("STORE_BROWSER_LOG_FORMAT", "json")

    configure_logging(force_format="PLAIN")

    assert not isinstance(logging.getLogger().handlers[0].formatter, jsonlogger.JsonFormatter)


def test_unknown_format_falls_back_to_json():
    configure_logging(force_format="xml")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
