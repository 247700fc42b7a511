"""Unit tests for logging setup and the access logger."""

import logging

from crud_backend.config import Settings
from crud_backend.infrastructure.logging.colored_logger import AccessLogger
from crud_backend.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("WARNING") == logging.WARNING
    assert _parse_level("loud") == logging.INFO


def test_setup_logging_applies_category_levels():
    applied = setup_logging(Settings(log_level_sql="ERROR", log_level_access="DEBUG"))
    assert applied["asyncpg"] == logging.ERROR
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("crud_backend.access").level == logging.DEBUG


def test_access_logger_plain_line(caplog):
    log = AccessLogger("test.access", colored=False)
    with caplog.at_level(logging.INFO, logger="test.access"):
        log.request_complete("GET", "/api/v1/roles", 200, 1.234)

    assert caplog.records[0].getMessage() == "GET    /api/v1/roles 200 1.2ms"
    assert caplog.records[0].levelno == logging.INFO


def test_access_logger_server_errors_are_warnings(caplog):
    log = AccessLogger("test.access", colored=True)
    with caplog.at_level(logging.INFO, logger="test.access"):
        log.request_complete("POST", "/api/v1/roles", 500, 3.0)

    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert "\033[91m" in record.getMessage()


def test_access_logger_failed_request(caplog):
    log = AccessLogger("test.access", colored=False)
    with caplog.at_level(logging.INFO, logger="test.access"):
        log.request_failed("DELETE", "/api/v1/roles/1", RuntimeError("boom"), 0.5)

    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert "RuntimeError" in record.getMessage()
