"""
Handler abstraction and the stream-owning base class.

Every renderer (and every wrapper around one) implements ``Handler``, so any
of them can be used wherever a handler is expected.
"""

from __future__ import annotations

import copy
import io
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

import orjson

from .filters import should_skip
from .formatters import color_enabled
from .levels import Level
from .record import Attr, Record

# An attribute together with the group path that was open when it was added.
GroupedAttr = tuple[tuple[str, ...], Attr]


def orjson_dumps(v: Any, *, indent: bool = False) -> bytes:
    """JSON serialization using orjson; unknown types are stringified."""
    option = orjson.OPT_NON_STR_KEYS | (orjson.OPT_INDENT_2 if indent else 0)
    return orjson.dumps(v, default=str, option=option)


def json_safe(value: Any) -> Any:
    """Return ``value`` if orjson can encode it, otherwise its string form."""
    try:
        orjson_dumps(value)
    except orjson.JSONEncodeError:
        return str(value)
    return value


@dataclass(frozen=True, slots=True)
class HandlerOptions:
    """Options shared by the stream handlers.

    Args:
        level: Minimum level; records below it are dropped before formatting.
        add_source: Resolve and render the call-site.
        color: Force colors on/off; ``None`` detects a TTY.
    """

    level: int = Level.INFO
    add_source: bool = False
    color: bool | None = None


class Handler(ABC):
    """Capability set implemented by all renderers and wrappers."""

    @abstractmethod
    def enabled(self, level: int) -> bool:
        """Whether records at ``level`` are processed."""
        ...

    @abstractmethod
    def handle(self, record: Record) -> None:
        """Render the record and write it. Write errors propagate."""
        ...

    @abstractmethod
    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        """New handler that adds ``attrs`` to every record."""
        ...

    @abstractmethod
    def with_group(self, name: str) -> Handler:
        """New handler that nests subsequent attributes under ``name``."""
        ...


class StreamHandler(Handler):
    """Base for handlers that render records onto an output stream.

    Derived handlers share the stream and its lock with their parent, so lines
    written through any of them never interleave.
    """

    def __init__(self, stream: Any = None, options: HandlerOptions | None = None):
        self._stream = stream if stream is not None else sys.stderr
        self._opts = options or HandlerOptions()
        self._lock = threading.Lock()
        self._attrs: tuple[GroupedAttr, ...] = ()
        self._groups: tuple[str, ...] = ()
        self._use_color = color_enabled(self._stream, self._opts.color)

    @property
    def options(self) -> HandlerOptions:
        return self._opts

    def enabled(self, level: int) -> bool:
        return level >= self._opts.level

    @abstractmethod
    def render(self, record: Record) -> bytes:
        """Format one record, including its trailing newline."""
        ...

    def handle(self, record: Record) -> None:
        with self._lock:
            self._write(self.render(record))

    def _write(self, data: bytes) -> None:
        if isinstance(self._stream, io.TextIOBase):
            self._stream.write(data.decode("utf-8"))
        else:
            self._stream.write(data)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        if not attrs:
            return self
        derived = copy.copy(self)
        derived._attrs = self._attrs + tuple((self._groups, a) for a in attrs)
        return derived

    def with_group(self, name: str) -> Handler:
        if not name:
            return self
        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def _iter_attrs(self, record: Record) -> Iterator[GroupedAttr]:
        """Handler attributes, then record attributes, minus skipped keys."""
        for groups, attr in self._attrs:
            if not should_skip(attr.key):
                yield groups, attr
        for attr in record.attrs:
            if not should_skip(attr.key):
                yield self._groups, attr
