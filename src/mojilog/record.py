"""
Log record types.

A ``Record`` is built once per log call and handed to a handler. The call-site
is captured as a lightweight token and only resolved to file/function/line
when a handler asks for it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import CodeType
from typing import Any, Iterable, Mapping

BAD_KEY = "!BADKEY"


@dataclass(frozen=True, slots=True)
class Attr:
    """A single key/value attribute."""

    key: str
    value: Any


@dataclass(frozen=True, slots=True)
class Source:
    """Resolved call-site location."""

    file: str
    function: str
    line: int

    @property
    def short_function(self) -> str:
        """Function name without its class or namespace qualifier."""
        return self.function.rsplit(".", 1)[-1]


class CallSite:
    """Opaque call-site token.

    Holds either a code object plus line number captured from a live frame, or
    an already-resolved location. Frames themselves are never retained.
    """

    __slots__ = ("_code", "_line", "_source")

    def __init__(
        self,
        code: CodeType | None = None,
        line: int = 0,
        source: Source | None = None,
    ) -> None:
        self._code = code
        self._line = line
        self._source = source

    @classmethod
    def capture(cls, skip: int = 0) -> CallSite:
        """Capture a caller's location after skipping ``skip`` frames.

        The function calling ``capture`` counts as the first skipped frame, so
        ``capture(0)`` points at that function and ``capture(1)`` at its caller.
        """
        try:
            frame = sys._getframe(skip + 1)
        except ValueError:
            return cls()
        return cls(frame.f_code, frame.f_lineno)

    @classmethod
    def resolved(cls, file: str, function: str, line: int) -> CallSite:
        return cls(source=Source(file, function, line))

    def __bool__(self) -> bool:
        return self._code is not None or self._source is not None

    def resolve(self) -> Source | None:
        if self._source is not None:
            return self._source
        if self._code is None or not self._code.co_filename:
            return None
        function = getattr(self._code, "co_qualname", self._code.co_name)
        return Source(self._code.co_filename, function, self._line)


def build_attrs(args: Iterable[Any], kwargs: Mapping[str, Any] | None = None) -> list[Attr]:
    """Turn variadic logging arguments into attributes.

    ``Attr`` instances are taken as is, a string followed by any value forms a
    pair, and a trailing value without a partner is stored under ``!BADKEY``.
    Keyword arguments follow the positional ones.
    """
    attrs: list[Attr] = []
    pending = list(args)
    i = 0
    while i < len(pending):
        item = pending[i]
        if isinstance(item, Attr):
            attrs.append(item)
            i += 1
        elif isinstance(item, str) and i + 1 < len(pending):
            attrs.append(Attr(item, pending[i + 1]))
            i += 2
        else:
            attrs.append(Attr(BAD_KEY, item))
            i += 1
    if kwargs:
        attrs.extend(Attr(k, v) for k, v in kwargs.items())
    return attrs


@dataclass(slots=True)
class Record:
    """One structured log event.

    Handlers must treat a record as read-only; a decorating wrapper derives a
    copy with ``dataclasses.replace`` instead of mutating the original.
    """

    time: datetime
    level: int
    message: str
    attrs: list[Attr] = field(default_factory=list)
    call_site: CallSite | None = None

    @classmethod
    def now(cls, level: int, message: str, call_site: CallSite | None = None) -> Record:
        return cls(datetime.now(timezone.utc), level, message, call_site=call_site)

    @property
    def local_time(self) -> datetime:
        return self.time.astimezone()

    @property
    def source(self) -> Source | None:
        return self.call_site.resolve() if self.call_site else None

    def add(self, *args: Any, **kwargs: Any) -> None:
        """Append attributes using the variadic argument convention."""
        self.attrs.extend(build_attrs(args, kwargs))
