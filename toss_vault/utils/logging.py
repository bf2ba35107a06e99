"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from toss_vault.utils.config import Settings, get_settings

# Path of the JSON-lines file opened by setup_logging(), if any.
_active_log_file: Path | None = None


def get_active_log_file() -> Path | None:
    """Return the path of the log file opened by the current process, if any."""
    return _active_log_file


def _open_file_handler(log_dir: Path, level: int) -> logging.FileHandler | None:
    """Open a timestamped JSON-lines log file, or return None if that is impossible."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(
            f"Warning: Could not create log directory '{log_dir}': {e}. "
            "Falling back to stdout-only logging.",
            file=sys.stderr,
        )
        return None

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"toss_vault_{timestamp}.log"
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        print(
            f"Warning: Could not open log file '{log_file}': {e}. File logging disabled.",
            file=sys.stderr,
        )
        return None

    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer())
    )
    handler.log_file = log_file  # type: ignore[attr-defined]
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the application.

    Output targets
    --------------
    1. **stderr** - console renderer (or JSON if ``log_format=json``).
    2. **logs/toss_vault_YYYYMMDD_HHMMSS.log** - JSON lines, always.
    """
    global _active_log_file  # noqa: PLW0603

    settings = settings or get_settings()
    numeric_level = getattr(logging, settings.log_level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Drop handlers from a previous call (pytest re-invocations, repeated CLI runs).
    for h in root.handlers[:]:
        root.removeHandler(h)

    console_renderer: Processor
    if settings.log_format == "json":
        console_renderer = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=console_renderer))
    root.addHandler(console_handler)

    file_handler = _open_file_handler(Path(settings.log_dir), numeric_level)
    if file_handler is not None:
        root.addHandler(file_handler)
        _active_log_file = file_handler.log_file  # type: ignore[attr-defined]
    else:
        _active_log_file = None

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.ExceptionRenderer(),
        structlog.processors.UnicodeDecoder(),
        # Bridge into the stdlib ProcessorFormatter on each handler.
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if _active_log_file is not None:
        structlog.get_logger(__name__).debug("logging_initialized", log_file=str(_active_log_file))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Configured bound logger.
    """
    return structlog.get_logger(name).bind(logger=name)


def log_context(**kwargs: Any) -> None:
    """
    Add contextual information to all log messages.

    Args:
        **kwargs: Key-value pairs to add to log context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context(*keys: str) -> None:
    """
    Clear contextual information from logs.

    Args:
        *keys: Keys to remove from context. If none provided, clears all.
    """
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()
