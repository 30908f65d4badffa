"""
Process-wide logger lifecycle.

The process logger is built at most once, either explicitly through
``init_global``/``init_from_settings`` or lazily by the first ``get()``.
Later initialization calls return the existing logger unchanged.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

from .config.logging import LogFormat, LoggingSettings
from .emoji import setup_logger
from .interceptors import install_stdlib_bridge
from .levels import Level
from .logger import Logger
from .pretty import setup_pretty_logger
from .pretty_json import setup_pretty_json_logger

# Frames between ``Logger._log`` and user code for the module-level level
# functions: ``_log`` and the function itself (``info``, ``error``...).
FUNCTION_SKIP = 2

logger = logging.getLogger(__name__)

# =============================================================================
# Global State
# =============================================================================

_global_logger: Logger | None = None
_init_lock = threading.Lock()


def _build_logger(
    level: int,
    fmt: LogFormat,
    add_source: bool,
    stream: Any,
    color: bool | None,
) -> Logger:
    match fmt:
        case LogFormat.JSON:
            # Regular JSON for machine processing
            return setup_logger(stream, level, "json", add_source, color=color)
        case LogFormat.PRETTY_JSON:
            # Pretty formatted JSON with colors
            return setup_pretty_json_logger(stream, level, add_source, color=color)
        case _:
            # Pretty text format
            return setup_pretty_logger(stream, level, add_source, color=color)


def init_global(
    level: int = Level.INFO,
    format: LogFormat | str = LogFormat.PRETTY,  # noqa: A002 - matches the settings field
    add_source: bool = False,
    *,
    stream: Any = None,
    color: bool | None = None,
    set_default: bool = True,
) -> Logger:
    """
    Initialize the process logger once; later calls are no-ops.

    Args:
        level: Minimum level
        format: "json", "pretty-json" or "pretty" (unknown names select "pretty")
        add_source: Include the call-site
        stream: Output stream (default: sys.stdout)
        color: Force colors on/off (default: detect a TTY)
        set_default: Route stdlib logging through the new logger
    """
    global _global_logger

    if _global_logger is not None:
        return _global_logger

    with _init_lock:
        if _global_logger is None:
            fmt = LogFormat.parse(format)
            built = _build_logger(level, fmt, add_source, stream if stream is not None else sys.stdout, color)
            if set_default:
                install_stdlib_bridge(level, built.handler)
            _global_logger = built
            if format != fmt.value:
                logger.warning("unknown log format %r, using %s", format, fmt.value)
            logger.debug("process logger initialized with %s format", fmt.value)
    return _global_logger


def init_from_settings(settings: LoggingSettings | None = None, *, stream: Any = None) -> Logger:
    """Initialize the process logger from ``MOJILOG_*`` settings."""
    s = settings or LoggingSettings()
    return init_global(
        s.level,
        s.format,
        s.add_source,
        stream=stream,
        color=s.color,
        set_default=s.capture_stdlib,
    )


def get() -> Logger:
    """Return the process logger, initializing it from settings on first use."""
    current = _global_logger
    if current is None:
        current = init_from_settings()
    return current


def bind(*args: Any, **kwargs: Any) -> Logger:
    """Process logger with additional attributes."""
    return get().bind(*args, **kwargs)


def with_group(name: str) -> Logger:
    return get().with_group(name)


def trace(msg: str, *args: Any, **kwargs: Any) -> None:
    get()._log(Level.TRACE, msg, args, kwargs, FUNCTION_SKIP)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    get()._log(Level.DEBUG, msg, args, kwargs, FUNCTION_SKIP)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    get()._log(Level.INFO, msg, args, kwargs, FUNCTION_SKIP)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    get()._log(Level.WARN, msg, args, kwargs, FUNCTION_SKIP)


warning = warn


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    get()._log(Level.ERROR, msg, args, kwargs, FUNCTION_SKIP)
