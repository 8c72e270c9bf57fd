"""Logging configuration for the checkout domain.

Standard library logging owns the handlers (console plus rotating files);
structlog sits on top. The deployment environment is resolved once from
``ENV``, ``ENVIRONMENT`` or ``PROTEAN_ENV`` and drives both the level and
the renderer: JSON in production and staging, rich console output elsewhere.
"""

import logging
import logging.handlers
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

ENVIRONMENT_VARIABLES = ("ENV", "ENVIRONMENT", "PROTEAN_ENV")

_LEVELS_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVIRONMENTS = {"production", "staging"}

_MAX_LOG_BYTES = 10 * 1024 * 1024


def get_environment() -> str:
    """Return the deployment environment, first match wins, ``development`` if unset."""
    for variable in ENVIRONMENT_VARIABLES:
        value = os.getenv(variable)
        if value:
            return value.lower()
    return "development"


def get_log_level(environment: str | None = None) -> str:
    """Log level for an environment; ``LOG_LEVEL`` overrides it."""
    environment = environment or get_environment()
    return os.getenv("LOG_LEVEL", _LEVELS_BY_ENVIRONMENT.get(environment, "INFO")).upper()


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str, log_dir: str = "logs", log_file_prefix: str = "checkout") -> None:
    """Route the root logger to stdout, ``<prefix>.log`` and ``<prefix>_error.log``."""
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        console_handler,
        _rotating_handler(log_path / f"{log_file_prefix}.log", level),
        _rotating_handler(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    logging.getLogger("protean").setLevel(logging.WARNING)


def build_processors(environment: str) -> list:
    """structlog processor chain for an environment, renderer last."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]

    if environment in _JSON_ENVIRONMENTS:
        # Tracebacks become a plain string field; locals never reach the log
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=True,
                    max_frames=2,
                ),
            )
        )
    return processors


def setup_structlog(environment: str | None = None) -> None:
    """Configure structlog for structured logging."""
    structlog.configure(
        processors=build_processors(environment or get_environment()),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs", log_file_prefix: str = "checkout") -> None:
    """Configure all logging for the application."""
    environment = get_environment()
    setup_stdlib_logging(get_log_level(environment), log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog(environment)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> Mapping[str, Any]:
    """Bind context variables onto every following log event in this task.

    Returns the tokens ``reset_context`` needs to restore the previous values.
    """
    return structlog.contextvars.bind_contextvars(**kwargs)


def reset_context(tokens: Mapping[str, Any]) -> None:
    """Undo an ``add_context`` call, leaving context bound by callers intact."""
    structlog.contextvars.reset_contextvars(**tokens)
