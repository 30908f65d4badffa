"""
structlog integration.

``HandlerRenderer`` is a final structlog processor: it turns the event dict
into a ``Record`` and hands it to a mojilog handler, so structlog loggers
render exactly like direct mojilog calls.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .handler import Handler
from .levels import Level
from .logger import _report_failure
from .record import Attr, CallSite, Record

_METHOD_LEVELS = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": 50,
    "fatal": 50,
}

_INTERNAL_MODULES = ("structlog", "mojilog")


def _is_internal(module: str) -> bool:
    return any(module == m or module.startswith(m + ".") for m in _INTERNAL_MODULES)


def _infer_call_site() -> CallSite:
    """First frame outside structlog and mojilog."""
    frame = sys._getframe(1)
    while frame is not None:
        if not _is_internal(frame.f_globals.get("__name__", "")):
            return CallSite(frame.f_code, frame.f_lineno)
        frame = frame.f_back
    return CallSite()


class HandlerRenderer:
    """Dispatch structlog events to a handler. Returns ``""`` as the rendered value.

    Args:
        handler: Target handler; defaults to the process logger's handler.
    """

    def __init__(self, handler: Handler | None = None):
        self._handler = handler

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        handler = self._handler or _process_handler()
        level = _METHOD_LEVELS.get(method_name, Level.INFO)
        if not handler.enabled(level):
            return ""

        event_dict.pop("level", None)
        record = Record.now(level, str(event_dict.pop("event", "")), _infer_call_site())
        record.attrs.extend(Attr(str(k), v) for k, v in event_dict.items())
        try:
            handler.handle(record)
        except (OSError, ValueError) as exc:
            _report_failure(level, exc)
        return ""


def _filtering_level(level: int) -> int:
    """Nearest structlog level (0, 10 ... 50) at or below ``level``."""
    return max(0, min(50, int(level) // 10 * 10))


def configure_structlog(handler: Handler | None = None, level: int = Level.INFO) -> None:
    """Configure structlog to render through ``handler`` (default: the process logger)."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            HandlerRenderer(handler),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_filtering_level(level)),
        context_class=dict,
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger; ``name`` is bound as the ``logger`` attribute."""
    if name:
        # logger= would collide with wrap_logger's own first parameter
        return structlog.get_logger().bind(logger=name)
    return structlog.get_logger()


def _process_handler() -> Handler:
    from .core import get

    return get().handler
