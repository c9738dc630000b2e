"""Structured logging configuration.

Configures the root logger with a structured format including timestamp,
level, and module name.  Context passed through ``extra={...}`` is appended
to the line as ``key=value`` pairs.  The log level is controlled by
``settings.LOG_LEVEL``.
"""

import logging
import sys

from app.core.config import settings

# Attributes every LogRecord carries; anything else came from ``extra``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

# pymongo logs server selection, pool and heartbeat events under these
_QUIET_LOGGERS = (
    "pymongo",
    "pymongo.serverSelection",
    "pymongo.connection",
    "pymongo.topology",
    "uvicorn.access",
)


class ContextFormatter(logging.Formatter):
    """Formatter that renders ``extra`` context after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} | {pairs}{sep}{tail}"


def setup_logging() -> None:
    """Configure structured logging for the application.

    Sets the root logger level from ``settings.LOG_LEVEL`` and installs a
    single ``StreamHandler`` writing to *stdout*; calling it again replaces
    the handler instead of adding a second one.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    formatter = ContextFormatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Reduce noise from the driver and the access log
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
