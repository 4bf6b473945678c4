"""Logging setup for the registry and the loader script.

Two output formats are supported: ``standard`` renders one human-readable
line per record, ``json`` renders one JSON object per line. Registry code
attaches entity ids to records with ``extra={"extra": {...}}``; the JSON
format lifts them to top-level keys so log pipelines can filter on them.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

LOG_FORMATS = ("standard", "json")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("psycopg", "faker")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """Route all log records to a single stream handler.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    level : str
        Level name, case-insensitive. Unknown names fall back to INFO.
    format_type : str
        One of :data:`LOG_FORMATS`.
    stream : IO[str] | None
        Destination stream (default: stdout).

    Raises
    ------
    ValueError
        If ``format_type`` is not a known format.
    """
    if format_type not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {format_type!r}, expected one of {', '.join(LOG_FORMATS)}")

    log_level = getattr(logging, level.upper(), logging.INFO)
    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("property_registry").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object.

    Keys from a record's ``extra`` mapping (entity ids such as
    ``apartment_id``) are merged into the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra", None) or {})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
