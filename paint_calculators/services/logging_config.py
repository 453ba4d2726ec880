"""Structured logging setup for applications embedding the calculators."""
import logging
import json
import sys
from datetime import datetime, timezone

# Loggers owned by this package
CALCULATOR_LOGGERS = (
    "paintcalc-coverage",
    "paintcalc-environmental",
    "paintcalc-cost",
    "paintcalc-technical",
    "paintcalc-numeric",
)


class JSONFormatter(logging.Formatter):
    """JSON structured log formatter for production."""
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "calculation"):
            log_entry["calculation"] = record.calculation
        if hasattr(record, "project_id"):
            log_entry["project_id"] = record.project_id
        return json.dumps(log_entry)


def setup_logging(level: str = "INFO", json_output: bool = True, stream=None):
    """
    Route the calculator loggers to one stream handler.

    Only the package's own loggers are touched; the host application's root
    logger is left alone. Importing the package never calls this.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
        ))

    resolved_level = getattr(logging, level.upper(), logging.INFO)
    for name in CALCULATOR_LOGGERS:
        calc_logger = logging.getLogger(name)
        calc_logger.setLevel(resolved_level)
        calc_logger.handlers = [handler]
        calc_logger.propagate = False
