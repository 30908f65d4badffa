"""
Attribute suppression policy shared by every renderer.
"""

from __future__ import annotations

# Verbose identity/metric fields that add noise to every line.
SKIP_KEYS = frozenset(
    {
        "service",
        "version",
        "environment",
        "pid",
        "metric_name",
        "metric_value",
    }
)


def should_skip(key: str) -> bool:
    """True when an attribute must not appear in rendered output."""
    return not key or key in SKIP_KEYS
