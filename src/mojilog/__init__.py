"""
Emoji-enhanced structured logging.

Renders structured records as colored console lines, indented JSON blocks,
or plain JSON/logfmt lines, with emoji decoration picked from the level or the
message text:
- pretty: colored single line with emoji (development)
- pretty-json: indented, level-colored JSON
- json: one JSON object per line, emoji-prefixed message (production)

Basic usage:

    import mojilog

    mojilog.init_global(mojilog.Level.INFO, "pretty", add_source=True)
    mojilog.info("Server started", "port", 8080)

    log = mojilog.bind(request_id="req-456")
    log.info("User logged in", ip="192.168.1.1")
"""

import logging

from .core import (
    bind,
    debug,
    error,
    get,
    info,
    init_from_settings,
    init_global,
    trace,
    warn,
    warning,
    with_group,
)
from .config.logging import LogFormat, LoggingSettings
from .emoji import (
    EmojiHandler,
    decorate,
    emoji_for_level,
    emoji_for_message,
    setup_logger,
    spacing_for,
)
from .filters import should_skip
from .handler import Handler, HandlerOptions, StreamHandler
from .interceptors import RedirectStdLibHandler, install_stdlib_bridge
from .levels import Level, level_name, parse_level
from .logger import Logger
from .pretty import PrettyHandler, setup_pretty_logger
from .pretty_json import PrettyJSONHandler, setup_pretty_json_logger
from .processors import HandlerRenderer, configure_structlog, get_logger
from .record import Attr, CallSite, Record, Source
from .structured import JSONHandler, TextHandler

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Attr",
    "CallSite",
    "EmojiHandler",
    "Handler",
    "HandlerOptions",
    "HandlerRenderer",
    "JSONHandler",
    "Level",
    "LogFormat",
    "Logger",
    "LoggingSettings",
    "PrettyHandler",
    "PrettyJSONHandler",
    "Record",
    "RedirectStdLibHandler",
    "Source",
    "StreamHandler",
    "TextHandler",
    "bind",
    "configure_structlog",
    "debug",
    "decorate",
    "emoji_for_level",
    "emoji_for_message",
    "error",
    "get",
    "get_logger",
    "info",
    "init_from_settings",
    "init_global",
    "install_stdlib_bridge",
    "level_name",
    "parse_level",
    "setup_logger",
    "setup_pretty_json_logger",
    "setup_pretty_logger",
    "should_skip",
    "spacing_for",
    "trace",
    "warn",
    "warning",
    "with_group",
]
