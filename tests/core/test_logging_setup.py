import json
import logging

from core.config.schemas.observability import LoggingConfig
from core.logging_setup import JsonFormatter, configure_logging


def _installed(name):
    return [
        h for h in logging.getLogger(name).handlers
        if getattr(h, "_modelhub_handler", False)
    ]


def test_configure_logging_idempotent_and_level():
    configure_logging(LoggingConfig(level="debug", format="text"))
    configure_logging(LoggingConfig(level="warn", format="json"))
    for name in ("core", "modelhub"):
        handlers = _installed(name)
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)
        assert logging.getLogger(name).level == logging.WARNING
    configure_logging(LoggingConfig())
    assert logging.getLogger("core").level == logging.INFO


def test_json_formatter_fields():
    record = logging.LogRecord(
        "modelhub.client", logging.ERROR, __file__, 1,
        "fetch failed: %s", ("boom",), None,
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "error"
    assert data["logger"] == "modelhub.client"
    assert data["message"] == "fetch failed: boom"
