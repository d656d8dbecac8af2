"""Logging setup and base error for smsuri.

Human-readable output goes to stderr through structlog's console renderer.
A JSON-lines copy of every event can be written to a file (or stdout) for
later inspection.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

from .paths import LOG_FILE


class SmsUriError(Exception):
    """User-facing error; the CLI prints the message and exits with status 1."""


SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _route_to_stdlib() -> None:
    """Send structlog events through the stdlib logging tree."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# Library use without configure_logging stays quiet below WARNING
_route_to_stdlib()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


def _json_log_handler(json_log: str) -> logging.Handler | None:
    """Resolve the --json-log option to a logging handler."""
    if json_log == "-":
        return logging.StreamHandler(sys.stdout)
    path = LOG_FILE if json_log == "auto" else Path(json_log)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Unwritable log destination: keep stderr logging only
        return None


def configure_logging(verbose: bool = False, json_log: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        verbose: Emit DEBUG events to stderr instead of WARNING and above
        json_log: JSON log destination: a file path, "-" for stdout,
            "auto" for the default log file, or None to disable
    """
    level = logging.DEBUG if verbose else logging.WARNING
    _route_to_stdlib()

    # Replace handlers from an earlier call; leave the host application's alone
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    root.addHandler(console)

    if json_log is not None:
        json_handler = _json_log_handler(json_log)
        if json_handler is not None:
            json_handler.setLevel(logging.DEBUG)
            json_handler.setFormatter(
                structlog.stdlib.ProcessorFormatter(
                    processor=structlog.processors.JSONRenderer(),
                    foreign_pre_chain=SHARED_PROCESSORS,
                )
            )
            root.addHandler(json_handler)
