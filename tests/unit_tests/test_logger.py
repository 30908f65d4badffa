"""
Logger front-end tests.
"""

from __future__ import annotations

import inspect
import io

import pytest

from mojilog.handler import HandlerOptions
from mojilog.levels import Level
from mojilog.logger import Logger
from mojilog.pretty import PrettyHandler
from mojilog.record import CallSite, Record


class BrokenStream(io.StringIO):
    def write(self, s: str) -> int:
        raise OSError("disk full")


@pytest.fixture
def buf() -> io.StringIO:
    return io.StringIO()


def make_logger(buf, **opts) -> Logger:
    opts.setdefault("level", Level.DEBUG)
    opts.setdefault("color", False)
    return Logger(PrettyHandler(buf, HandlerOptions(**opts)))


class TestDerivation:
    """bind/with_group return new loggers"""

    def test_bind_does_not_mutate_parent(self, buf):
        parent = make_logger(buf)
        child = parent.bind("user_id", "user-123", request_id="req-456")
        parent.info("parent")
        child.info("child")

        parent_line, child_line = buf.getvalue().splitlines()
        assert "user_id" not in parent_line
        assert child_line.endswith("user_id=user-123 request_id=req-456")

    def test_empty_derivations_return_self(self, buf):
        log = make_logger(buf)
        assert log.bind() is log
        assert log.with_group("") is log

    def test_with_group(self, buf):
        make_logger(buf).with_group("db").info("query", rows=3)
        assert buf.getvalue().endswith("db.rows=3\n")


class TestCallSite:
    """Call-site attribution through each entry point"""

    @pytest.mark.parametrize("method", ["debug", "info", "warn", "warning", "error", "trace"])
    def test_level_methods(self, buf, method):
        log = make_logger(buf, level=Level.TRACE, add_source=True)
        line = inspect.currentframe().f_lineno + 1
        getattr(log, method)("hello")
        assert f"test_logger.py:test_level_methods():{line}" in buf.getvalue()

    def test_log_method(self, buf):
        log = make_logger(buf, add_source=True)
        line = inspect.currentframe().f_lineno + 1
        log.log(Level.WARN, "hello")
        assert f"test_logger.py:test_log_method():{line}" in buf.getvalue()


class TestThreshold:
    """Records below the threshold never reach the handler"""

    def test_no_call_site_capture_below_threshold(self, buf, monkeypatch):
        def boom(cls, skip=0):
            raise AssertionError("call-site captured for a dropped record")

        monkeypatch.setattr(CallSite, "capture", classmethod(boom))
        make_logger(buf, level=Level.INFO).debug("hidden")
        assert buf.getvalue() == ""

    def test_handle_not_called_below_threshold(self, buf, monkeypatch):
        handler = PrettyHandler(buf, HandlerOptions(level=Level.ERROR))
        calls: list[Record] = []
        monkeypatch.setattr(handler, "handle", calls.append)
        Logger(handler).warn("hidden")
        assert calls == []


class TestWriteFailure:
    """Sink failures"""

    def test_handle_propagates(self):
        handler = PrettyHandler(BrokenStream(), HandlerOptions(color=False))
        with pytest.raises(OSError, match="disk full"):
            handler.handle(Record.now(Level.INFO, "hello"))

    def test_logger_does_not_raise(self):
        Logger(PrettyHandler(BrokenStream(), HandlerOptions(color=False))).info("hello")
