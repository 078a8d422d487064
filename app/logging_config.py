# =============================================================================
# app/logging_config.py - Logging Setup
# =============================================================================
# Builds the application logger: one JSON object per line, written to the
# console and appended to LOG_FILE.
#
# The returned logger is an explicit handle. main.py and server.py pass it
# into every component instead of having components reach for a global.
#
# Usage:
#   from app.logging_config import configure_logging
#   logger = configure_logging(settings)
#   logger.info("Server running", extra={"port": 3000})
# =============================================================================

import json
import logging
import re
import sys
from pathlib import Path

from app.config import Settings

APP_LOGGER_NAME = "starter_server"

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "exc_info",
    "exc_text", "stack_info", "taskName", "asctime",
})


class SensitiveDataFilter(logging.Filter):
    """Mask passwords, secrets and bearer tokens in log messages."""

    SENSITIVE_PATTERNS = [
        (re.compile(r'(password|pass|secret)(["\']?\s*[:=]\s*["\']?)([^"\'\s&,}]+)', re.IGNORECASE), r"\1\2***"),
        (re.compile(r"Bearer\s+[^\s\"]+", re.IGNORECASE), "Bearer ***"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)
        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self._mask(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True

    def _mask(self, text: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text


class JsonFormatter(logging.Formatter):
    """Format each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Fields passed with extra={...}
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_dict[key] = value
            except (TypeError, ValueError):
                log_dict[key] = str(value)

        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_dict, ensure_ascii=False, default=str)


def configure_logging(settings: Settings, name: str = APP_LOGGER_NAME) -> logging.Logger:
    """
    Build the application logger from settings.

    Calling this twice replaces the handlers from the first call, so tests
    and reloads don't end up writing every line twice.

    Args:
        settings: Application settings (LOG_LEVEL, DEBUG, LOG_FILE)
        name: Logger name; child loggers (name.component) share its handlers

    Returns:
        logging.Logger: The configured logger handle
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    return logger
