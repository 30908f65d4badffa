"""
Indented, color-wrapped JSON renderer.
"""

from __future__ import annotations

import sys
from typing import Any, Sequence

import orjson

from .emoji import resolve_emoji
from .filters import should_skip
from .formatters import colorize, json_block_color, millis_time, source_parts
from .handler import Handler, HandlerOptions, StreamHandler, json_safe, orjson_dumps
from .levels import Level, level_name
from .logger import Logger
from .record import Attr, Record


def _maybe_json(value: Any) -> Any:
    """Embed pre-serialized JSON as structure; keep anything else literal."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError:
            return raw.decode("utf-8", "replace")
    if isinstance(value, str):
        if value.startswith(("{", "[")):
            try:
                return orjson.loads(value)
            except orjson.JSONDecodeError:
                return value
        return value
    return json_safe(value)


class PrettyJSONHandler(StreamHandler):
    """Formats each record as an indented JSON block colored by level.

    ``with_attrs`` and ``with_group`` return the handler unchanged: context
    attached through derivation is not rendered by this handler.
    """

    def render(self, record: Record) -> bytes:
        entry: dict[str, Any] = {
            "time": millis_time(record.time),
            "level": level_name(record.level),
        }
        emoji = resolve_emoji(record.message, record.level)
        if emoji:
            entry["emoji"] = emoji
        entry["msg"] = record.message

        if self._opts.add_source and (source := record.source) is not None:
            file, function, line = source_parts(source)
            entry["source"] = {"file": file, "line": line, "function": function}

        attrs = {a.key: _maybe_json(a.value) for a in record.attrs if not should_skip(a.key)}
        if attrs:
            entry["attrs"] = attrs

        output = orjson_dumps(entry, indent=True).decode("utf-8")
        output = colorize(output, json_block_color(record.level), self._use_color)
        return (output + "\n").encode("utf-8")

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        return self

    def with_group(self, name: str) -> Handler:
        return self


def setup_pretty_json_logger(
    stream: Any = None,
    level: int = Level.INFO,
    add_source: bool = False,
    *,
    color: bool | None = None,
) -> Logger:
    """Logger bound to a ``PrettyJSONHandler`` (defaults to stdout)."""
    opts = HandlerOptions(level=level, add_source=add_source, color=color)
    return Logger(PrettyJSONHandler(stream if stream is not None else sys.stdout, opts))
