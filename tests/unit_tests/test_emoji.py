"""
Emoji decoration tests.

Covers level and message lookup, display-width spacing and the
EmojiHandler wrapper.
"""

from __future__ import annotations

from typing import Sequence

import pytest
from wcwidth import wcswidth

from mojilog.emoji import (
    EmojiHandler,
    _MESSAGE_RULES,
    decorate,
    emoji_for_level,
    emoji_for_message,
    resolve_emoji,
    spacing_for,
)
from mojilog.handler import Handler
from mojilog.levels import Level
from mojilog.record import Attr, Record


class RecordingHandler(Handler):
    """Handler that keeps every record it receives."""

    def __init__(self, level: int = Level.DEBUG):
        self.level = level
        self.records: list[Record] = []
        self.attrs: list[Attr] = []
        self.groups: list[str] = []

    def enabled(self, level: int) -> bool:
        return level >= self.level

    def handle(self, record: Record) -> None:
        self.records.append(record)

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        derived = RecordingHandler(self.level)
        derived.records, derived.groups = self.records, self.groups
        derived.attrs = self.attrs + list(attrs)
        return derived

    def with_group(self, name: str) -> Handler:
        derived = RecordingHandler(self.level)
        derived.records, derived.attrs = self.records, self.attrs
        derived.groups = self.groups + [name]
        return derived


class TestLevelEmoji:
    """Level to emoji mapping"""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (Level.ERROR, "❌"),
            (50, "❌"),
            (Level.WARN, "⚠️"),
            (Level.INFO, "ℹ️"),
            (22, "ℹ️"),
            (Level.DEBUG, "🔍"),
            (Level.TRACE, "📝"),
            (0, "📝"),
        ],
    )
    def test_mapping(self, level, expected):
        assert emoji_for_level(level) == expected


class TestMessageEmoji:
    """Message content rules"""

    @pytest.mark.parametrize(
        ("msg", "expected"),
        [
            ("System health is EXCELLENT", "💚"),
            ("health check good", "🟡"),
            ("Health degraded on node-3", "🟠"),
            ("health: critical", "🔴"),
            ("Graceful shutdown requested", "🛑"),
            ("Stopping workers", "🛑"),
            ("Server started", "🚀"),
            ("Parser is running", "🚀"),
            ("Migration success", "🎉"),
            ("Cleanup finished", "🧹"),
            ("Loaded config file", "⚙️"),
            ("Applying setting", "⚙️"),
            ("WebSocket opened", "🔌"),
            ("Upload failed", "❌"),
            ("New table opened", "🎰"),
            ("Collected metrics", "📊"),
            ("Processing batch", "⏳"),
            ("Creating user", "🆕"),
        ],
    )
    def test_rules(self, msg, expected):
        assert emoji_for_message(msg) == expected

    def test_no_match_is_empty(self):
        assert emoji_for_message("hello world") == ""

    def test_health_without_qualifier_falls_through(self):
        assert emoji_for_message("health probe answered") == ""

    def test_health_outranks_lifecycle(self):
        assert emoji_for_message("health critical during shutdown") == "🔴"

    def test_lifecycle_order(self):
        # "shutdown" is checked before "start"
        assert emoji_for_message("start shutdown sequence") == "🛑"

    def test_connect_outranks_failed(self):
        assert emoji_for_message("Connection failed") == "🔌"

    @pytest.mark.parametrize("level", [Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR])
    def test_shutdown_regardless_of_level(self, level):
        assert resolve_emoji("database shutdown complete", level) == "🛑"

    def test_resolution_is_deterministic(self):
        results = {resolve_emoji("Cache miss detected", Level.WARN) for _ in range(100)}
        assert results == {"⚠️"}


class TestSpacing:
    """Display-width aware padding"""

    def test_wide_emoji_gets_single_space(self):
        assert spacing_for("🚀") == " "

    def test_narrow_symbol_gets_double_space(self):
        assert spacing_for("*") == "  "

    @pytest.mark.parametrize(
        "emoji",
        sorted({e for _, e in _MESSAGE_RULES} | {"❌", "⚠️", "ℹ️", "🔍", "📝", "💚", "🟡", "🟠", "🔴"}),
    )
    def test_wider_symbols_get_shorter_pad(self, emoji):
        expected = " " if wcswidth(emoji) > 1 else "  "
        assert spacing_for(emoji) == expected
        assert len(spacing_for(emoji)) <= len(spacing_for("*"))

    def test_decorate_prefixes_message(self):
        assert decorate("Server started", Level.INFO) == "🚀" + spacing_for("🚀") + "Server started"

    def test_decorate_falls_back_to_level(self):
        assert decorate("hello", Level.DEBUG) == "🔍" + spacing_for("🔍") + "hello"


class TestEmojiHandler:
    """Decoration wrapper around an arbitrary handler"""

    def test_prefixes_message_before_delegating(self):
        inner = RecordingHandler()
        record = Record.now(Level.WARN, "Disk almost full")
        EmojiHandler(inner).handle(record)

        assert inner.records[0].message == decorate("Disk almost full", Level.WARN)

    def test_does_not_touch_the_callers_record(self):
        inner = RecordingHandler()
        record = Record.now(Level.INFO, "hello")
        EmojiHandler(inner).handle(record)
        assert record.message == "hello"

    def test_enabled_delegates(self):
        handler = EmojiHandler(RecordingHandler(level=Level.WARN))
        assert handler.enabled(Level.ERROR)
        assert not handler.enabled(Level.INFO)

    def test_derivations_wrap_the_derived_handler(self):
        inner = RecordingHandler()
        derived = EmojiHandler(inner).with_attrs([Attr("user", "u1")]).with_group("req")

        assert isinstance(derived, EmojiHandler)
        assert derived.wrapped.attrs == [Attr("user", "u1")]
        assert derived.wrapped.groups == ["req"]
        assert inner.attrs == [] and inner.groups == []
