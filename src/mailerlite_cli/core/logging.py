"""
structlog setup.

CLI commands log human-readable lines to stderr.  The dashboard owns the
terminal while it runs, so it logs JSON lines to a file instead.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog

# File opened by the previous configure_logging call, closed on reconfigure.
_log_stream: TextIO | None = None


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    global _log_stream
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    stream: TextIO
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        stream = log_file.open("a", encoding="utf-8")
        new_file: TextIO | None = stream
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        stream = sys.stderr
        new_file = None
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    if _log_stream is not None and _log_stream is not stream:
        _log_stream.close()
    _log_stream = new_file
