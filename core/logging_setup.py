"""stdlib logging wiring driven by `LoggingConfig`.

Only the project loggers (``core`` and ``modelhub``) get a handler so the
hosting server's own logging (uvicorn) is left untouched.
"""
from __future__ import annotations

import json
import logging

from core.config.schemas.observability import LoggingConfig

PROJECT_LOGGERS = ("core", "modelhub")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data = {
            "ts": record.created,
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _make_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")


def configure_logging(cfg: LoggingConfig | None = None) -> None:
    """Install (or replace) the project handler with configured level/format.

    Idempotent: repeated calls swap the previously installed handler.
    """
    cfg = cfg or LoggingConfig()
    level = _LEVELS[cfg.level]
    for name in PROJECT_LOGGERS:
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            if getattr(h, "_modelhub_handler", False):
                lg.removeHandler(h)
        handler = logging.StreamHandler()
        handler.setFormatter(_make_formatter(cfg.format))
        handler._modelhub_handler = True  # type: ignore[attr-defined]
        lg.addHandler(handler)
        lg.setLevel(level)


__all__ = ["configure_logging", "JsonFormatter", "PROJECT_LOGGERS"]
