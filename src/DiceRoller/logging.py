# logging.py

import logging
import os
from logging.handlers import RotatingFileHandler

import structlog
from structlog.contextvars import merge_contextvars

from DiceRoller.config import Settings


def _level(name: str | None, default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    # Renders structlog events and plain stdlib records alike, one JSON object per line.
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
        foreign_pre_chain=[structlog.processors.add_log_level, merge_contextvars],
    )


def _file_handler(settings: Settings) -> logging.Handler:
    path = settings.logging_file_path
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=settings.logging_max_bytes,
        backupCount=settings.logging_backup_count,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging with JSON output.

    Console output goes to stderr. A rotating JSON file is added only when
    ``settings.logging_file`` names a level other than NONE.
    """
    level = _level(settings.logging_level if settings else "INFO", logging.INFO)
    formatter = _json_formatter()

    wanted: list[tuple[str, logging.Handler]] = []
    console_lvl = settings.logging_console if settings is not None else "INFO"
    if console_lvl.upper() != "NONE":
        wanted.append((console_lvl, logging.StreamHandler()))
    file_lvl = settings.logging_file if settings is not None else "NONE"
    if file_lvl.upper() != "NONE":
        wanted.append((file_lvl, _file_handler(settings)))

    handlers: list[logging.Handler] = []
    for lvl_name, handler in wanted:
        handler.setLevel(_level(lvl_name, level))
        handler.setFormatter(formatter)
        handlers.append(handler)

    # force=True replaces any prior configuration
    logging.basicConfig(level=level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
