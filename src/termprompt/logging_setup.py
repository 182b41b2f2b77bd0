"""Diagnostic logging for termprompt itself.

Prompts own the terminal while they run, so log records never go to the
console: they are dropped by default and can be sent to a JSON-lines file.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union

from .config import get_settings, normalize_level


_LOGGER_NAME = "termprompt"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    '''One JSON object per record. `event`, `prompt` and `theme` come from `extra`.'''

    context_fields = ("event", "prompt", "theme")

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for field in self.context_fields:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        return json.dumps(payload, ensure_ascii=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[str] = None, path: Union[str, Path, None] = None) -> logging.Logger:
    '''
    Sends termprompt's records to `path` (or $TERMPROMPT_LOG_FILE).
    Does nothing when no file is given. Calling it twice keeps the first handler.
    An unknown `level` falls back to WARNING, as it does from the environment.
    '''
    settings = get_settings()
    logger = get_logger()
    logger.setLevel(normalize_level(level) if level else settings.log_level)

    path = path or settings.log_file
    if not path:
        return logger
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger
