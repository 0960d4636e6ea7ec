"""Logging setup for the console session.

Log records go to stderr so they never interleave with the prompts and
tables written to stdout. Records can be emitted as plain text or as one
JSON object per line.
"""

import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAME = "salesdesk"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def configure_logging(level: str = "WARNING", json_format: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler, so repeated sessions in
    one process do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)
    return logger
