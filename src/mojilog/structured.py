"""
Plain machine-oriented backends: one JSON object or one logfmt line per record.

These never decorate messages themselves; wrap them in ``EmojiHandler`` for
emoji-prefixed output.
"""

from __future__ import annotations

from typing import Any

import orjson

from .handler import StreamHandler, json_safe, orjson_dumps
from .levels import level_name
from .record import Record


def _suffixed(key: str, n: int) -> str:
    return key if n == 1 else f"{key}#{n}"


def _group_node(node: dict[str, Any], group: str) -> dict[str, Any]:
    """The object for ``group``, skipping past scalars already using the name."""
    n = 1
    while (name := _suffixed(group, n)) in node and not isinstance(node[name], dict):
        n += 1
    return node.setdefault(name, {})


def _place(node: dict[str, Any], groups: tuple[str, ...], key: str, value: Any) -> None:
    """Store an attribute without replacing anything already in the object.

    Repeated keys, including the record's own ``time``/``level``/``source``/``msg``,
    are kept as ``key#2``, ``key#3`` ...
    """
    for group in groups:
        node = _group_node(node, group)
    n = 1
    while _suffixed(key, n) in node:
        n += 1
    node[_suffixed(key, n)] = value


class JSONHandler(StreamHandler):
    """Single-line JSON. Groups become nested objects."""

    def render(self, record: Record) -> bytes:
        entry: dict[str, Any] = {
            "time": record.local_time.isoformat(timespec="milliseconds"),
            "level": level_name(record.level),
        }
        if self._opts.add_source and (source := record.source) is not None:
            entry["source"] = {
                "function": source.function,
                "file": source.file,
                "line": source.line,
            }
        entry["msg"] = record.message
        for groups, attr in self._iter_attrs(record):
            _place(entry, groups, attr.key, json_safe(attr.value))
        return orjson_dumps(entry) + b"\n"


_NEEDS_QUOTING = frozenset(' ="\\')


def _logfmt_value(value: Any) -> str:
    text = value.decode("utf-8", "replace") if isinstance(value, (bytes, bytearray)) else str(value)
    if not text or any(c in _NEEDS_QUOTING or not c.isprintable() for c in text):
        return orjson.dumps(text).decode()
    return text


class TextHandler(StreamHandler):
    """logfmt lines: ``time=... level=INFO msg="..." key=value``. Groups become dotted keys."""

    def render(self, record: Record) -> bytes:
        parts = [
            f"time={record.local_time.isoformat(timespec='milliseconds')}",
            f"level={level_name(record.level)}",
        ]
        if self._opts.add_source and (source := record.source) is not None:
            parts.append(f"source={_logfmt_value(f'{source.file}:{source.line}')}")
        parts.append(f"msg={_logfmt_value(record.message)}")
        for groups, attr in self._iter_attrs(record):
            key = ".".join((*groups, attr.key))
            parts.append(f"{key}={_logfmt_value(attr.value)}")
        return (" ".join(parts) + "\n").encode("utf-8")
