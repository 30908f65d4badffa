"""
ANSI color utilities and shared field formatting.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Any

from .levels import Level
from .record import Source

COLORS = {
    "reset": "\033[0m",
    # Levels
    "debug": "\033[36m",  # Cyan
    "info": "\033[32m",  # Green
    "warn": "\033[33m",  # Yellow
    "error": "\033[1;31m",  # Bold Red
    # Components
    "time": "\033[90m",  # Gray
    "file": "\033[34m",  # Blue
    "function": "\033[34m",  # Blue
    "attrs": "\033[35m",  # Magenta
    # Whole-block JSON colors
    "json_debug": "\033[36m",
    "json_info": "\033[32m",
    "json_warn": "\033[33m",
    "json_error": "\033[31m",
}

# (threshold, badge, color); badges are padded to five columns.
_BADGES = (
    (Level.ERROR, "ERROR", "error"),
    (Level.WARN, " WARN", "warn"),
    (Level.INFO, " INFO", "info"),
    (Level.DEBUG, "DEBUG", "debug"),
)

_JSON_COLORS = {
    Level.DEBUG: "json_debug",
    Level.INFO: "json_info",
    Level.WARN: "json_warn",
    Level.ERROR: "json_error",
}


def colorize(text: str, color: str | None, enabled: bool = True) -> str:
    """Apply ANSI color to text."""
    if not enabled or not color or color not in COLORS:
        return text
    return f"{COLORS[color]}{text}{COLORS['reset']}"


def color_enabled(stream: Any, option: bool | None) -> bool:
    """Resolve the color option; ``None`` means TTY detection honoring NO_COLOR."""
    if option is not None:
        return option
    if os.environ.get("NO_COLOR"):
        return False
    return bool(getattr(stream, "isatty", lambda: False)())


def level_badge(level: int, use_color: bool) -> str:
    """Fixed-width level token, e.g. ``" INFO"``."""
    for threshold, badge, color in _BADGES:
        if level >= threshold:
            return colorize(badge, color, use_color)
    return "TRACE"


def json_block_color(level: int) -> str | None:
    """Color for a whole JSON block; only exact tier levels are colored."""
    return _JSON_COLORS.get(level)


def short_time(record_time: Any) -> str:
    """``HH:MM:SS.d`` in local time (tenths of a second)."""
    local = record_time.astimezone()
    return f"{local:%H:%M:%S}.{local.microsecond // 100000}"


def millis_time(record_time: Any) -> str:
    """``YYYY-MM-DD HH:MM:SS.mmm`` in local time."""
    local = record_time.astimezone()
    return f"{local:%Y-%m-%d %H:%M:%S}.{local.microsecond // 1000:03d}"


def base_name(path: str) -> str:
    return PurePath(path).name


def source_parts(source: Source) -> tuple[str, str, int]:
    """File base name, unqualified function name and line of a call-site."""
    return base_name(source.file), source.short_function, source.line
