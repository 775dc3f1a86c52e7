"""Logging setup.

Development gets human-readable lines, production gets one JSON object per
line. Anything passed through ``extra=`` is rendered alongside the message.
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from app.core.config import settings

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter that appends ``extra`` fields as key=value."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if extra:
            line += " | " + " ".join(f"{k}={v}" for k, v in extra.items())
        return line


def build_formatter(production: bool) -> logging.Formatter:
    if production:
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger", "asctime": "timestamp"},
        )
    return ConsoleFormatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the whole process."""
    numeric_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(settings.is_production))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    # SQL echo is controlled by DEBUG on the engine, keep the logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
