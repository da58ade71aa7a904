from __future__ import annotations

import logging

import pytest

from company_directory.app.core.logging_config import level_from_name, setup_logging


@pytest.fixture
def restore_levels():
    names = ["", "urllib3", "uvicorn.access", "company_directory"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_level_names_are_case_insensitive():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("Warning") == logging.WARNING
    assert level_from_name("nonsense") == logging.INFO


def test_library_loggers_are_quiet_by_default(restore_levels):
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_overrides_win_over_defaults(restore_levels):
    setup_logging("INFO", overrides={"urllib3": "DEBUG", "company_directory": "ERROR"})
    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert logging.getLogger("company_directory").level == logging.ERROR


def test_second_call_changes_level_without_new_handlers(restore_levels):
    setup_logging("INFO")
    handlers = list(logging.getLogger().handlers)
    setup_logging("ERROR")
    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger().handlers == handlers
