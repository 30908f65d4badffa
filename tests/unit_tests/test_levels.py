"""
Level naming and parsing tests.
"""

from __future__ import annotations

import pytest

from mojilog.levels import Level, level_name, parse_level


class TestLevelName:
    """Display names for exact and in-between levels"""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (Level.TRACE, "TRACE"),
            (Level.DEBUG, "DEBUG"),
            (Level.INFO, "INFO"),
            (Level.WARN, "WARN"),
            (Level.ERROR, "ERROR"),
        ],
    )
    def test_exact_tiers(self, level, expected):
        assert level_name(level) == expected

    def test_offsets_from_nearest_lower_tier(self):
        assert level_name(22) == "INFO+2"
        assert level_name(50) == "ERROR+10"

    def test_below_trace(self):
        assert level_name(4) == "TRACE-1"

    def test_levels_are_ordered(self):
        assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR


class TestParseLevel:
    """String to level conversion"""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("debug", Level.DEBUG),
            ("WARN", Level.WARN),
            ("warning", Level.WARN),
            (" Error ", Level.ERROR),
            ("trace", Level.TRACE),
        ],
    )
    def test_known_names(self, text, expected):
        assert parse_level(text) is expected

    @pytest.mark.parametrize("text", ["", None, "verbose", "5"])
    def test_unknown_falls_back_to_info(self, text):
        assert parse_level(text) is Level.INFO
