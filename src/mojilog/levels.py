"""
Log levels.

Values line up with the standard library ``logging`` numbers so that stdlib
records and structlog method levels map onto ``Level`` without translation.
"""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Ordered severity tiers: TRACE < DEBUG < INFO < WARN < ERROR."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_LEVELS_DESC = sorted(Level, reverse=True)

_NAMES = {
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
}


def level_name(level: int) -> str:
    """Return the display name, e.g. ``"INFO"`` or ``"ERROR+10"`` for 50."""
    for tier in _LEVELS_DESC:
        if level >= tier:
            offset = level - tier
            return tier.name if offset == 0 else f"{tier.name}+{offset}"
    return f"{Level.TRACE.name}{level - Level.TRACE}"


def parse_level(text: str | None) -> Level:
    """Convert a level name to ``Level``. Unknown names fall back to INFO."""
    if not text:
        return Level.INFO
    return _NAMES.get(text.strip().lower(), Level.INFO)
