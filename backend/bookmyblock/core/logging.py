"""
Structured logging configuration using structlog.

Every record carries the service name and environment, plus whatever the
request middleware bound into contextvars (request id, method, path,
dashboard). Production emits one JSON object per line with tracebacks as
structured dicts; other environments use the coloured console renderer.
Records from stdlib loggers (uvicorn, redis) go through the same pipeline.
"""

import logging
import sys
import structlog
from bookmyblock.core.config import get_settings


def _service_context(app_name: str, environment: str):
    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", app_name)
        event_dict.setdefault("env", environment)
        return event_dict
    return processor


def setup_logging() -> None:
    settings = get_settings()
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context(settings.APP_NAME, settings.ENVIRONMENT),
    ]

    if settings.ENVIRONMENT == "production":
        final = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        final = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    ))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    # Outbound calls are logged by the services that make them
    for noisy in ("uvicorn.access", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
