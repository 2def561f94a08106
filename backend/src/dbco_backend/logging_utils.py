"""Logging helpers that keep contact details out of the logs."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any

from .config import get_settings
from .privacy import scrub_text

_CONFIG_LOCK = Lock()
_CONFIGURED = False

OBSERVABILITY_LOGGER = "dbco.observability"


class PIIScrubberFilter(logging.Filter):
    """Scrubs e-mail addresses, phone numbers and BSNs from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub_text(record.msg)

        if record.args:
            if isinstance(record.args, tuple):
                record.args = tuple(_scrub_value(arg) for arg in record.args)
            elif isinstance(record.args, dict):
                record.args = _scrub_value(record.args)

        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``event`` and ``payload`` come from :func:`log_event`."""

    def __init__(self, env: str | None = None) -> None:
        super().__init__()
        self.env = env

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.env:
            entry["env"] = self.env
        for key in ("event", "payload"):
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Configure the root logger once, with PII scrubbing and a consistent format."""

    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED:
            return

        settings = get_settings()
        level = level if level is not None else settings.log_level
        if settings.log_format == "json":
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter(env=settings.env))
            logging.basicConfig(level=level, handlers=[handler])
        else:
            logging.basicConfig(level=level, format="[%(levelname)s] %(name)s - %(message)s")

        scrubber = PIIScrubberFilter()
        root_logger = logging.getLogger()
        root_logger.addFilter(scrubber)
        # Root logger filters do not apply to records propagated from child loggers.
        for handler in root_logger.handlers:
            handler.addFilter(scrubber)
        _CONFIGURED = True


def _scrub_value(value: Any) -> Any:
    if isinstance(value, str):
        return scrub_text(value)
    if isinstance(value, dict):
        return {key: _scrub_value(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return tuple(_scrub_value(item) for item in value)
    if isinstance(value, list):
        return [_scrub_value(item) for item in value]
    return value


def log_event(event: str, payload: dict | None = None, level: int = logging.INFO) -> None:
    logger = logging.getLogger(OBSERVABILITY_LOGGER)
    scrubbed = _scrub_value(payload or {})
    logger.log(
        level,
        json.dumps(scrubbed, ensure_ascii=False),
        extra={"event": event, "payload": scrubbed},
    )


__all__ = ["JSONFormatter", "PIIScrubberFilter", "configure_logging", "log_event"]
