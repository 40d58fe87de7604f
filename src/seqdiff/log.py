"""Structured logging for seqdiff.

Library modules obtain loggers through get_logger(), which routes structlog
events into the stdlib logging tree. Nothing is printed until the embedding
application configures logging, either on its own or with configure_logging().
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_HANDLER_NAME = "seqdiff"


def get_logger(name: Optional[str] = None):
    return structlog.wrap_logger(logging.getLogger(name or "seqdiff"))


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: Optional[TextIO] = None
) -> None:
    """Configure structlog over stdlib logging with a single stream handler.

    Calling it again replaces the handler installed by the previous call.
    """
    default_level = _LEVEL_MAP.get(level.upper(), logging.INFO)
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        output = stream or sys.stderr
        renderer = structlog.dev.ConsoleRenderer(colors=output.isatty())
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(default_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger("seqdiff")
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(default_level)
