"""
Module: test_logging.py

Author: Michael Economou
Date: 2025-05-31

Tests the logging helpers: cached loggers, Unicode-safe output, the dev-only
console filter, rotating file handlers and root logger setup.
"""

import logging

import pytest

from bulkrename import config
from bulkrename.utils.logging.init_logging import init_logging
from bulkrename.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from bulkrename.utils.logging.logger_file_helper import add_file_handler
from bulkrename.utils.logging.logger_helper import DevOnlyFilter, safe_text
from bulkrename.utils.logging.logger_setup import ConfigureLogger


@pytest.fixture
def isolated_root_logger():
    """Detach root handlers for the test and restore them afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def make_record(dev_only: bool) -> logging.LogRecord:
    record = logging.LogRecord("bulkrename.test", logging.DEBUG, __file__, 1, "msg", None, None)
    if dev_only:
        record.dev_only = True
    return record


def test_cached_logger_is_reused():
    assert get_cached_logger("bulkrename.test.a") is get_cached_logger("bulkrename.test.a")
    assert "bulkrename.test.a" in LoggerFactory.get_cached_names()


def test_cached_logger_propagates():
    logger = get_cached_logger("bulkrename.test.b")
    assert logger.propagate is True


def test_safe_text_replaces_unicode_punctuation():
    assert safe_text("a → b … c – d") == "a -> b ... c - d"


def test_dev_only_filter(monkeypatch):
    dev_filter = DevOnlyFilter()
    monkeypatch.setattr(config, "SHOW_DEV_ONLY_IN_CONSOLE", False)
    assert dev_filter.filter(make_record(dev_only=True)) is False
    assert dev_filter.filter(make_record(dev_only=False)) is True

    monkeypatch.setattr(config, "SHOW_DEV_ONLY_IN_CONSOLE", True)
    assert dev_filter.filter(make_record(dev_only=True)) is True


def test_add_file_handler_filters_by_name(tmp_path):
    rename_logger = logging.getLogger("bulkrename.test.rename")
    rename_logger.propagate = False
    rename_logger.setLevel(logging.DEBUG)
    log_path = tmp_path / "logs" / "rename.log"

    handler = add_file_handler(
        rename_logger, str(log_path), level=logging.INFO, filter_by_name="bulkrename.test.rename"
    )
    try:
        rename_logger.debug("hidden debug")
        rename_logger.info("rename info")
        logging.getLogger("bulkrename.test.rename.child").info("child info")
        handler.flush()
    finally:
        rename_logger.removeHandler(handler)
        rename_logger.propagate = True
        handler.close()

    content = log_path.read_text(encoding="utf-8")
    assert "rename info" in content
    assert "hidden debug" not in content
    assert "child info" not in content


def test_init_logging_writes_activity_and_error_files(tmp_path):
    logger = init_logging("testapp", log_dir=str(tmp_path))
    handlers = [h for h in logger.handlers if str(tmp_path) in getattr(h, "baseFilename", "")]
    try:
        logger.info("activity line")
        logger.error("error line")
        for handler in handlers:
            handler.flush()
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()

    activity = (tmp_path / "testapp_activity.log").read_text(encoding="utf-8")
    errors = (tmp_path / "testapp_errors.log").read_text(encoding="utf-8")
    assert "activity line" in activity and "error line" in activity
    assert "error line" in errors and "activity line" not in errors


def test_configure_logger_installs_handlers_once(tmp_path, isolated_root_logger):
    configured = ConfigureLogger(
        log_name="testapp", log_dir=str(tmp_path), console_enabled=True, file_enabled=True
    )
    handler_count = len(isolated_root_logger.handlers)
    assert handler_count >= 2
    assert configured.log_file_path is not None

    ConfigureLogger(log_name="testapp", log_dir=str(tmp_path))
    assert len(isolated_root_logger.handlers) == handler_count


def test_configure_logger_error_file(tmp_path, isolated_root_logger):
    configured = ConfigureLogger(
        log_name="testapp", log_dir=str(tmp_path), console_enabled=False, file_enabled=True
    )
    logging.getLogger("bulkrename.test.setup").error("boom")
    logging.getLogger("bulkrename.test.setup").info("quiet")
    for handler in isolated_root_logger.handlers:
        handler.flush()

    with open(configured.log_file_path, encoding="utf-8") as f:
        content = f.read()
    assert "boom" in content
    assert "quiet" not in content
