import logging

from fpx import get_logger, setup_logger


def test_setup_logger_configures_once(monkeypatch):
    monkeypatch.setenv("FPX_LOG_LEVEL", "DEBUG")
    log = setup_logger("fpx.tests.configured")

    assert log.level == logging.DEBUG
    assert len(log.handlers) == 1

    again = setup_logger("fpx.tests.configured", level="ERROR")
    assert again is log
    assert len(again.handlers) == 1


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("FPX_LOG_LEVEL", "DEBUG")

    assert setup_logger("fpx.tests.explicit", level="error").level == logging.ERROR


def test_get_logger_returns_named_child():
    log = get_logger("fpx.react.simple_react")

    assert log.name == "fpx.react.simple_react"
    assert log.handlers == []


def test_unknown_level_falls_back_to_warning(monkeypatch, caplog):
    monkeypatch.setenv("FPX_LOG_LEVEL", "LOUD")

    with caplog.at_level(logging.WARNING):
        log = setup_logger("fpx.tests.unknown_level")

    assert log.level == logging.WARNING
    assert any("Unknown log level 'LOUD'" in r.getMessage() for r in caplog.records)
