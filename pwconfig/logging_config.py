"""
Logging Configuration

Provides:
- CustomJsonFormatter: one JSON object per line for CI log collectors
- setup_logging: YAML dictConfig loader with ${LOG_LEVEL} and ${LOG_FORMAT} substitution
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import string
import sys
from datetime import datetime, timezone
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).with_name("logging.yml")
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT_PLAIN = "plain"
LOG_FORMAT_JSON = "json"
LOG_FORMATS = (LOG_FORMAT_PLAIN, LOG_FORMAT_JSON)

_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON formatter for configuration diagnostics.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. pwconfig.projects)
      - message: Log message
    Extra record attributes are copied as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _normalize_level(value: str | None) -> str:
    """Return a level name logging accepts; anything unknown becomes DEFAULT_LOG_LEVEL."""
    if not value:
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def _normalize_format(value: str | None) -> str:
    name = (value or "").strip().lower()
    if name in LOG_FORMATS:
        return name
    return LOG_FORMAT_PLAIN


def setup_logging(
    config_path: str | os.PathLike | None = None,
    level: str | None = None,
    fmt: str | None = None,
):
    """
    Load the YAML config, substitute environment variables, and initialize logging.

    ${LOG_LEVEL} and ${LOG_FORMAT} come from the arguments, then the environment.
    Unknown values fall back to INFO and plain text instead of failing.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    mapping = os.environ.copy()
    mapping["LOG_LEVEL"] = _normalize_level(level or mapping.get("LOG_LEVEL"))
    mapping["LOG_FORMAT"] = _normalize_format(fmt or mapping.get("LOG_FORMAT"))

    if not path.exists():
        logging.basicConfig(level=mapping["LOG_LEVEL"], stream=sys.stderr)
        return

    with open(path, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    content = template.safe_substitute(mapping)
    config = yaml.safe_load(content)
    logging.config.dictConfig(config)
