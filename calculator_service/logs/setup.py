"""structlog configuration over stdlib logging handlers."""

import logging
from pathlib import Path

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from calculator_service.config import Settings

HANDLER_PREFIX = "calculator_service."
ERROR_LOG_FILE = "error.log"
COMBINED_LOG_FILE = "combined.log"

# Logged by uvicorn after the app has already answered a 500 and logged
# it as unhandled_error.
ASGI_EXCEPTION_MESSAGE = "Exception in ASGI application"


class HandledServerErrorFilter(logging.Filter):
    """Drop uvicorn's re-raised traceback for errors the app already logged."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not record.getMessage().startswith(ASGI_EXCEPTION_MESSAGE)


def add_service_name(service_name: str) -> Processor:
    """Build a processor stamping every event with the service name.

    Args:
        service_name: Value for the ``service`` key.

    Returns:
        A structlog processor.
    """
    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _formatter(
    shared_processors: list[Processor],
    *processors: Processor,
) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
        ],
    )


def _named(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(HANDLER_PREFIX + name)
    return handler


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the root logger's sinks.

    Installs a console sink for every level and, when ``LOG_TO_FILE`` is
    set, ``error.log`` (error and above) and ``combined.log`` (everything)
    under ``LOG_DIR``, both as JSON lines. Calling it again replaces the
    handlers installed by the previous call. uvicorn's own traceback for a
    request that already produced a 500 is filtered out.

    Args:
        settings: Application settings.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name(settings.SERVICE_NAME),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Off so that reconfiguring (and capture_logs in tests) reaches
        # loggers that were already used.
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = []

    console = _named(logging.StreamHandler(), "console")
    console.setFormatter(_formatter(shared_processors, structlog.dev.ConsoleRenderer(colors=False)))
    handlers.append(console)

    if settings.LOG_TO_FILE:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        json_formatter = _formatter(
            shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        )

        error_file = _named(logging.FileHandler(log_dir / ERROR_LOG_FILE), "error_file")
        error_file.setLevel(logging.ERROR)
        error_file.setFormatter(json_formatter)
        handlers.append(error_file)

        combined_file = _named(logging.FileHandler(log_dir / COMBINED_LOG_FILE), "combined_file")
        combined_file.setFormatter(json_formatter)
        handlers.append(combined_file)

    root = logging.getLogger()
    for existing in list(root.handlers):
        name = existing.get_name()
        if name and name.startswith(HANDLER_PREFIX):
            root.removeHandler(existing)
            existing.close()

    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())

    uvicorn_error = logging.getLogger("uvicorn.error")
    if not any(isinstance(f, HandledServerErrorFilter) for f in uvicorn_error.filters):
        uvicorn_error.addFilter(HandledServerErrorFilter())
