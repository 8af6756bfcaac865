"""Logging setup for coop-core.

Package modules attach cooperative context to their records through
``extra=`` using the names in ``CONTEXT_FIELDS``; the JSON formatter lifts
those attributes into top-level keys so account activity can be filtered
downstream.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# Record attributes carried into JSON output when a log call sets them
CONTEXT_FIELDS = (
    "cooperative",
    "member_id",
    "account_number",
    "transaction_type",
    "amount",
    "balance_before",
    "balance_after",
    "count",
)

QUIET_LOGGERS = ("confluent_kafka", "faker")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single handler on the root logger.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" for one text line per record, "json" for JSON lines.
    stream : TextIO | None
        Destination, stdout when omitted.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers[:] = [handler]

    logging.getLogger("coop_core").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with cooperative context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Decimal amounts are written as strings to keep their exact value
        return json.dumps(log_data, ensure_ascii=False, default=str)
