"""
Emoji decoration: level/message lookup, display-width spacing and the
``EmojiHandler`` wrapper that prefixes messages for any other handler.
"""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, Sequence

from wcwidth import wcswidth

from .handler import Handler, HandlerOptions
from .levels import Level
from .logger import Logger
from .record import Attr, Record
from .structured import JSONHandler, TextHandler

_LEVEL_EMOJIS = (
    (Level.ERROR, "❌"),
    (Level.WARN, "⚠️"),
    (Level.INFO, "ℹ️"),
    (Level.DEBUG, "🔍"),
)
_BELOW_DEBUG_EMOJI = "📝"

# Health phrases only count when the message mentions "health".
_HEALTH_RULES = (
    ("excellent", "💚"),
    ("good", "🟡"),
    ("degraded", "🟠"),
    ("critical", "🔴"),
)

# First match wins: lifecycle phrases, then generic operations.
_MESSAGE_RULES = (
    (("shutdown", "stopping"), "🛑"),
    (("start", "parser is running"), "🚀"),
    (("success",), "🎉"),
    (("cleanup",), "🧹"),
    (("config", "setting"), "⚙️"),
    (("connect", "websocket"), "🔌"),
    (("failed",), "❌"),
    (("table", "game", "casino"), "🎰"),
    (("statistics", "metrics"), "📊"),
    (("loading", "processing"), "⏳"),
    (("creating",), "🆕"),
)


def emoji_for_level(level: int) -> str:
    for threshold, emoji in _LEVEL_EMOJIS:
        if level >= threshold:
            return emoji
    return _BELOW_DEBUG_EMOJI


def emoji_for_message(msg: str) -> str:
    """Context emoji for a message, or ``""`` when nothing matches."""
    lower = msg.lower()

    if "health" in lower:
        for phrase, emoji in _HEALTH_RULES:
            if phrase in lower:
                return emoji

    for phrases, emoji in _MESSAGE_RULES:
        if any(p in lower for p in phrases):
            return emoji
    return ""


def spacing_for(emoji: str) -> str:
    """Pad that keeps messages aligned after wide and narrow emojis."""
    if wcswidth(emoji) > 1:
        return " "
    return "  "


def resolve_emoji(msg: str, level: int) -> str:
    """Message context first, level fallback second."""
    return emoji_for_message(msg) or emoji_for_level(level)


def decorate(msg: str, level: int) -> str:
    """``emoji + spacing + msg``."""
    emoji = resolve_emoji(msg, level)
    if not emoji:
        return msg
    return emoji + spacing_for(emoji) + msg


class EmojiHandler(Handler):
    """Wraps another handler and prefixes each message with its emoji."""

    def __init__(self, wrapped: Handler):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Handler:
        return self._wrapped

    def enabled(self, level: int) -> bool:
        return self._wrapped.enabled(level)

    def handle(self, record: Record) -> None:
        decorated = dataclasses.replace(record, message=decorate(record.message, record.level))
        self._wrapped.handle(decorated)

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        return EmojiHandler(self._wrapped.with_attrs(attrs))

    def with_group(self, name: str) -> Handler:
        return EmojiHandler(self._wrapped.with_group(name))


def setup_logger(
    stream: Any = None,
    level: int = Level.INFO,
    format: str = "json",  # noqa: A002 - matches the format option name
    add_source: bool = False,
    *,
    color: bool | None = None,
) -> Logger:
    """Logger with emoji-prefixed messages over a plain JSON or logfmt backend."""
    opts = HandlerOptions(level=level, add_source=add_source, color=color)
    stream = stream if stream is not None else sys.stdout
    base: Handler = JSONHandler(stream, opts) if format == "json" else TextHandler(stream, opts)
    return Logger(EmojiHandler(base))
