"""
Interceptors for capturing standard library logging.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from .handler import Handler
from .record import CallSite, Record

_EXC_FORMATTER = logging.Formatter()


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging events to a mojilog handler.
    Third-party logs then render exactly like direct mojilog calls.

    Args:
        target: Handler to dispatch to; defaults to the process logger's handler.
    """

    def __init__(self, target: Handler | None = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Skip if coming from structlog to avoid loops with its stdlib integration
            if "structlog" in record.name:
                return

            target = self._target or _process_handler()
            if not target.enabled(record.levelno):
                return

            converted = Record(
                datetime.fromtimestamp(record.created, timezone.utc),
                record.levelno,
                record.getMessage(),
                call_site=CallSite.resolved(record.pathname, record.funcName or "", record.lineno),
            )
            converted.add("logger", record.name)
            if record.exc_info:
                converted.add("exception", _EXC_FORMATTER.formatException(record.exc_info))
            target.handle(converted)
        except Exception:
            self.handleError(record)


def install_stdlib_bridge(level: int = logging.INFO, target: Handler | None = None) -> RedirectStdLibHandler:
    """Replace the root logger's handlers with a ``RedirectStdLibHandler``."""
    bridge = RedirectStdLibHandler(target)
    root_logger = logging.getLogger()
    root_logger.handlers = [bridge]
    root_logger.setLevel(level)
    return bridge


def _process_handler() -> Handler:
    from .core import get

    return get().handler
