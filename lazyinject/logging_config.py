"""Structured logging for lazyinject.

The injector only emits debug events about registrations and cell
lifecycle. Applications route them through structlog with
``configure_logging``; without arguments the settings come from the
``LAZYINJECT_*`` environment variables.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from lazyinject.settings import InjectorSettings


def configure_logging(settings: InjectorSettings | None = None) -> None:
    """Route injector events through structlog.

    May be called again at any time; loggers created before the call,
    including module-level ones, pick up the new renderer and level.

    Args:
        settings: Level, output format and destination (defaults to
            ``InjectorSettings.from_env()``)
    """
    if settings is None:
        settings = InjectorSettings.from_env()

    stream: TextIO = sys.stderr
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        stream = open(settings.log_file, "a")  # noqa: SIM115

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=settings.log_level,
        force=True,
    )

    if settings.json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers bound before a reconfiguration follow it.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger (typically ``get_logger(__name__)``)."""
    return structlog.get_logger(name)
