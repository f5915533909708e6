import logging

import pytest

from kanasort.logger import setup_logging


def test_setup_logging_level():
    logger = setup_logging('debug')
    assert logger.name == 'kanasort'
    assert logger.level == logging.DEBUG


def test_setup_logging_single_handler():
    setup_logging('info')
    logger = setup_logging('info')
    assert len(logger.handlers) == 1


def test_setup_logging_uses_env_var(monkeypatch):
    monkeypatch.setenv('KANASORT_LOG_LEVEL', 'warning')
    assert setup_logging().level == logging.WARNING


def test_setup_logging_default(monkeypatch):
    monkeypatch.delenv('KANASORT_LOG_LEVEL', raising=False)
    assert setup_logging().level == logging.INFO


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging('loud')


def test_resolver_logs_fallback(caplog):
    from kanasort.resolver import ReadingResolver

    with caplog.at_level(logging.DEBUG, logger='kanasort'):
        ReadingResolver({'王': 'おう'}).resolve('李')
    assert "no dictionary reading for '李'" in caplog.text
