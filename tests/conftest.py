import logging

import pytest
import structlog

from mojilog import core


@pytest.fixture(scope="function", autouse=True)
def reset_process_logger(monkeypatch):
    """
    Gives every test an uninitialized process logger and restores the root
    logger afterwards, since init_global may install the stdlib bridge.
    """
    monkeypatch.setattr(core, "_global_logger", None)
    for name in ("MOJILOG_LEVEL", "MOJILOG_FORMAT", "MOJILOG_ADD_SOURCE", "MOJILOG_COLOR", "MOJILOG_CAPTURE_STDLIB"):
        monkeypatch.delenv(name, raising=False)

    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level

    yield

    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
