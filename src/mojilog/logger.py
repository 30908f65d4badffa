"""
Logger front-end bound to a single handler.
"""

from __future__ import annotations

import sys
from typing import Any, Mapping, Sequence

from .handler import Handler
from .levels import Level, level_name
from .record import CallSite, Record, build_attrs

# Frames between ``Logger._log`` and user code when called from a level
# method: ``_log`` itself and the method (``info``, ``log``...).
METHOD_SKIP = 2


class Logger:
    """Structured logger. Derivations return new loggers; the receiver is untouched.

    Example:
        >>> log = Logger(PrettyHandler(sys.stdout))
        >>> log.bind("request_id", "abc").info("Server started", port=8080)
    """

    __slots__ = ("_handler",)

    def __init__(self, handler: Handler):
        self._handler = handler

    @property
    def handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def bind(self, *args: Any, **kwargs: Any) -> Logger:
        """New logger whose records carry the given attributes."""
        attrs = build_attrs(args, kwargs)
        if not attrs:
            return self
        return Logger(self._handler.with_attrs(attrs))

    def with_group(self, name: str) -> Logger:
        if not name:
            return self
        return Logger(self._handler.with_group(name))

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(level, msg, args, kwargs, METHOD_SKIP)

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.TRACE, msg, args, kwargs, METHOD_SKIP)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.DEBUG, msg, args, kwargs, METHOD_SKIP)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.INFO, msg, args, kwargs, METHOD_SKIP)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.WARN, msg, args, kwargs, METHOD_SKIP)

    warning = warn

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.ERROR, msg, args, kwargs, METHOD_SKIP)

    def _log(
        self,
        level: int,
        msg: str,
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
        skip: int,
    ) -> None:
        """Build and dispatch a record.

        ``skip`` counts the frames from this method up to (not including) the
        code that should be reported as the call-site.
        """
        if not self._handler.enabled(level):
            return
        record = Record.now(level, msg, CallSite.capture(skip))
        record.add(*args, **kwargs)
        try:
            self._handler.handle(record)
        except (OSError, ValueError) as exc:
            _report_failure(level, exc)


def _report_failure(level: int, exc: BaseException) -> None:
    """Last-resort notice when a handler cannot write."""
    stream = sys.__stderr__
    if stream is None:
        return
    try:
        stream.write(f"mojilog: dropped {level_name(level)} record: {exc!r}\n")
    except (OSError, ValueError):
        return
