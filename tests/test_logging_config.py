import logging

import pytest

from product_catalog_api.app.core.logging_config import ACCESS_LOGGER_NAME, resolve_level, setup_logging


@pytest.fixture
def access_logger():
    """Access logger with its level restored after the test."""
    logger = logging.getLogger(ACCESS_LOGGER_NAME)
    saved_level = logger.level
    yield logger
    logger.setLevel(saved_level)


@pytest.fixture
def fresh_root():
    """A standalone logger standing in for the root logger."""
    logger = logging.Logger("catalog")
    yield logger
    for handler in logger.handlers:
        handler.close()


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO


def test_attaches_console_and_file_handlers_once(fresh_root, access_logger, tmp_path):
    logfile = tmp_path / "api.log"
    setup_logging("DEBUG", str(logfile), root=fresh_root)
    setup_logging("DEBUG", str(logfile), root=fresh_root)

    kinds = sorted(type(h).__name__ for h in fresh_root.handlers)
    assert kinds == ["FileHandler", "StreamHandler"]
    assert access_logger.level == logging.DEBUG

    fresh_root.info("Created product 42")
    for handler in fresh_root.handlers:
        handler.flush()
    assert "[INFO] catalog: Created product 42" in logfile.read_text(encoding="utf-8")


def test_level_applies_when_handlers_already_exist(fresh_root, access_logger):
    existing = logging.NullHandler()
    fresh_root.addHandler(existing)

    setup_logging("WARNING", root=fresh_root)

    assert fresh_root.handlers == [existing]
    assert fresh_root.level == logging.WARNING
    assert access_logger.level == logging.WARNING


def test_create_app_applies_configured_level(app):
    assert logging.getLogger().level == logging.WARNING
    assert not logging.getLogger(ACCESS_LOGGER_NAME).isEnabledFor(logging.INFO)
