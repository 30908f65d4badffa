"""
Colored single-line console renderer.

Format: ``HH:MM:SS.d LEVEL file:func():line emoji message key=value ...``
"""

from __future__ import annotations

import sys
from typing import Any

from .emoji import resolve_emoji, spacing_for
from .formatters import colorize, level_badge, short_time, source_parts
from .handler import HandlerOptions, StreamHandler
from .levels import Level
from .logger import Logger
from .record import Record


class PrettyHandler(StreamHandler):
    """Human-readable handler with level colors and emoji decoration.

    Args:
        stream: Output stream (default: stderr)
        options: Level threshold, call-site and color options
        show_emoji: Prefix messages with their context or level emoji
    """

    def __init__(
        self,
        stream: Any = None,
        options: HandlerOptions | None = None,
        *,
        show_emoji: bool = True,
    ):
        super().__init__(stream, options)
        self._show_emoji = show_emoji

    def render(self, record: Record) -> bytes:
        color = self._use_color
        parts = [
            colorize(short_time(record.time), "time", color),
            " ",
            level_badge(record.level, color),
            " ",
            self._format_source(record),
            " ",
            self._format_emoji(record),
            record.message,
        ]
        attrs = self._format_attrs(record)
        if attrs:
            parts += [" ", colorize(attrs, "attrs", color)]
        parts.append("\n")
        return "".join(parts).encode("utf-8")

    def _format_source(self, record: Record) -> str:
        if not self._opts.add_source:
            return ""
        source = record.source
        if source is None:
            return ""
        file, function, line = source_parts(source)
        color = self._use_color
        return f"{colorize(file, 'file', color)}:{colorize(function + '()', 'function', color)}:{line}"

    def _format_emoji(self, record: Record) -> str:
        if not self._show_emoji:
            return ""
        emoji = resolve_emoji(record.message, record.level)
        return emoji + spacing_for(emoji) if emoji else ""

    def _format_attrs(self, record: Record) -> str:
        return " ".join(
            f"{'.'.join((*groups, attr.key))}={attr.value}"
            for groups, attr in self._iter_attrs(record)
        )


def setup_pretty_logger(
    stream: Any = None,
    level: int = Level.INFO,
    add_source: bool = False,
    *,
    color: bool | None = None,
) -> Logger:
    """Logger bound to a ``PrettyHandler`` (defaults to stdout)."""
    opts = HandlerOptions(level=level, add_source=add_source, color=color)
    return Logger(PrettyHandler(stream if stream is not None else sys.stdout, opts))
