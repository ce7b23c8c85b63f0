import logging

import pytest

from petlift import configure_from_env, enable_console_logging


@pytest.fixture
def restore_loggers():
    yield
    for name in ("petlift", "dispatch", "server"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_enable_console_logging_sets_level(restore_loggers):
    handler = enable_console_logging("debug")

    assert handler in logging.getLogger("petlift").handlers
    assert logging.getLogger("dispatch").level == logging.DEBUG


def test_unknown_level_rejected(restore_loggers):
    with pytest.raises(ValueError):
        enable_console_logging("LOUD")


def test_configure_from_env(monkeypatch, restore_loggers):
    monkeypatch.delenv("PETLIFT_LOGGING", raising=False)
    assert configure_from_env() is None

    monkeypatch.setenv("PETLIFT_LOGGING", "WARNING")
    assert configure_from_env() is not None
    assert logging.getLogger("petlift").level == logging.WARNING
