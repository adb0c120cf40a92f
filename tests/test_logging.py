"""Tests for logging configuration and request logging helpers."""

import json
import logging

import pytest
import structlog

from calculator_service.config import Settings
from calculator_service.logs import configure_logging, add_service_name
from calculator_service.logs.middleware import decode_body
from calculator_service.logs.setup import HANDLER_PREFIX, HandledServerErrorFilter


def _installed_handlers():
    return [
        handler for handler in logging.getLogger().handlers
        if (handler.get_name() or "").startswith(HANDLER_PREFIX)
    ]


@pytest.fixture
def file_logging(tmp_path):
    """Configure file sinks under a temporary directory, then restore."""
    settings = Settings(LOG_DIR=str(tmp_path / "logs"), LOG_TO_FILE=True)
    configure_logging(settings)
    yield tmp_path / "logs"
    configure_logging(Settings(LOG_TO_FILE=False))


def _read_json_lines(path):
    for handler in _installed_handlers():
        handler.flush()
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]


class TestConfigureLogging:
    """Tests for configure_logging."""
    
    def test_creates_log_files(self, file_logging):
        assert (file_logging / "error.log").exists()
        assert (file_logging / "combined.log").exists()
    
    def test_error_sink_only_receives_errors(self, file_logging):
        logger = structlog.get_logger("test")
        logger.info("routine_event", value=1)
        logger.error("failure_event", code="X")
        
        errors = _read_json_lines(file_logging / "error.log")
        combined = _read_json_lines(file_logging / "combined.log")
        
        assert [entry["event"] for entry in errors] == ["failure_event"]
        assert [entry["event"] for entry in combined] == ["routine_event", "failure_event"]
    
    def test_records_carry_service_and_level(self, file_logging):
        structlog.get_logger("test").error("failure_event")
        
        entry = _read_json_lines(file_logging / "error.log")[0]
        assert entry["service"] == "calculator-microservice"
        assert entry["level"] == "error"
        assert entry["logger"] == "test"
        assert "timestamp" in entry
    
    def test_stdlib_records_are_formatted(self, file_logging):
        logging.getLogger("calculator.stdlib").error("plain stdlib message")
        
        entry = _read_json_lines(file_logging / "error.log")[0]
        assert entry["event"] == "plain stdlib message"
        assert entry["service"] == "calculator-microservice"
    
    def test_uvicorn_asgi_traceback_dropped(self, file_logging):
        """A 500 already logged as unhandled_error is not logged again by uvicorn."""
        uvicorn_error = logging.getLogger("uvicorn.error")
        try:
            raise RuntimeError("kaboom")
        except RuntimeError as exc:
            uvicorn_error.error("Exception in ASGI application\n", exc_info=exc)
        uvicorn_error.error("other server error")
        
        events = [entry["event"] for entry in _read_json_lines(file_logging / "error.log")]
        assert events == ["other server error"]
    
    def test_uvicorn_filter_installed_once(self, file_logging):
        configure_logging(Settings(LOG_DIR=str(file_logging), LOG_TO_FILE=True))
        
        filters = logging.getLogger("uvicorn.error").filters
        assert sum(isinstance(f, HandledServerErrorFilter) for f in filters) == 1
    
    def test_exception_rendered(self, file_logging):
        try:
            raise ValueError("kaboom")
        except ValueError as exc:
            structlog.get_logger("test").error("unhandled_error", exc_info=exc)
        
        entry = _read_json_lines(file_logging / "error.log")[0]
        assert "ValueError: kaboom" in entry["exception"]
    
    def test_reconfigure_replaces_handlers(self, file_logging):
        configure_logging(Settings(LOG_DIR=str(file_logging), LOG_TO_FILE=True))
        
        assert len(_installed_handlers()) == 3
    
    def test_console_only(self, tmp_path):
        configure_logging(Settings(LOG_DIR=str(tmp_path / "unused"), LOG_TO_FILE=False))
        
        assert len(_installed_handlers()) == 1
        assert not (tmp_path / "unused").exists()
    
    def test_log_level(self):
        configure_logging(Settings(LOG_LEVEL="warning", LOG_TO_FILE=False))
        try:
            assert logging.getLogger().level == logging.WARNING
        finally:
            configure_logging(Settings(LOG_TO_FILE=False))


class TestAddServiceName:
    """Tests for the service name processor."""
    
    def test_sets_service(self):
        processor = add_service_name("calc")
        
        assert processor(None, "info", {"event": "x"}) == {"event": "x", "service": "calc"}
    
    def test_keeps_explicit_service(self):
        processor = add_service_name("calc")
        
        assert processor(None, "info", {"service": "other"})["service"] == "other"


class TestDecodeBody:
    """Tests for request body decoding."""
    
    def test_empty(self):
        assert decode_body(b"") == {}
    
    def test_json(self):
        assert decode_body(b'{"num1": 1}') == {"num1": 1}
    
    def test_text(self):
        assert decode_body(b"num1=1") == "num1=1"
