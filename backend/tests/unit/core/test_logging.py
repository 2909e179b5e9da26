"""Unit tests for logging helpers."""

import logging

from beacon.core.logging import ContextualLogger, LoggerConfigurator


def test_configure_logger_returns_contextual_logger():
    log = LoggerConfigurator.configure_logger("beacon.test", dimensions={"engine": "fake"})

    assert isinstance(log, ContextualLogger)
    assert log.logger is logging.getLogger("beacon.test")
    assert log.dimensions == {"engine": "fake"}


def test_setup_installs_single_handler():
    LoggerConfigurator.setup(force=True)
    LoggerConfigurator.setup(force=True)
    LoggerConfigurator.setup()

    handlers = [
        h
        for h in logging.getLogger("beacon").handlers
        if getattr(h, "_beacon_handler", False)
    ]
    assert len(handlers) == 1


def test_contextual_logger_prefixes_dimensions(caplog):
    log = ContextualLogger(logging.getLogger("beacon.test.ctx"), {"environment": "test"})

    with caplog.at_level(logging.INFO, logger="beacon.test.ctx"):
        log.info("hello %s", "world")

    record = caplog.records[-1]
    assert record.getMessage() == "[environment=test] hello world"
    assert record.environment == "test"


def test_with_context_adds_dimensions(caplog):
    base = ContextualLogger(logging.getLogger("beacon.test.ctx2"), {"environment": "test"})
    child = base.with_context(backend="http")

    with caplog.at_level(logging.INFO, logger="beacon.test.ctx2"):
        child.info("ready", extra={"attempt": 1})

    record = caplog.records[-1]
    assert record.getMessage() == "[environment=test backend=http] ready"
    assert record.attempt == 1
    assert base.dimensions == {"environment": "test"}


def test_explicit_none_extra(caplog):
    log = ContextualLogger(logging.getLogger("beacon.test.ctx3"), {"environment": "test"})

    with caplog.at_level(logging.ERROR, logger="beacon.test.ctx3"):
        log.error("hello", extra=None)

    record = caplog.records[-1]
    assert record.getMessage() == "[environment=test] hello"
    assert record.environment == "test"
