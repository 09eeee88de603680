"""EventBus (sync in-process).

Features:
  - subscribe(event_name, handler) -> unsubscribe callable
  - emit(event_name, payload) adds ts if missing
  - handler isolation (exceptions logged + counted, not propagated)
    - metrics counters:
            events_emitted_total{event}, handler_exceptions_total{event,error_type}
"""
from __future__ import annotations

import logging
from threading import RLock
from time import time
from typing import Any, Callable, Dict, List

from core import metrics
from core.errors import map_exception

Handler = Callable[[Dict[str, Any]], None]

logger = logging.getLogger("core.eventbus")


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Handler]] = {}
        self._lock = RLock()

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        with self._lock:
            self._subs.setdefault(event, []).append(handler)

        def _unsub() -> None:
            with self._lock:
                handlers = self._subs.get(event, [])
                if handler in handlers:
                    handlers.remove(handler)
        return _unsub

    def emit(self, event: str, payload: Dict[str, Any]) -> None:
        if "ts" not in payload:
            payload["ts"] = time()
        with self._lock:
            subs = list(self._subs.get(event, ()))
        metrics.inc("events_emitted_total", {"event": event})
        for h in subs:
            try:
                h(dict(payload))  # shallow copy per handler
            except Exception as e:  # noqa: BLE001
                error_type = map_exception(e, "event")
                logger.exception(
                    "event handler failed: event=%s error_type=%s",
                    event,
                    error_type,
                )
                metrics.inc(
                    "handler_exceptions_total",
                    {"event": event, "error_type": error_type},
                )

    def reset_for_tests(self) -> None:  # pragma: no cover
        with self._lock:
            self._subs.clear()


_BUS = EventBus()


def subscribe(event: str, handler: Handler) -> Callable[[], None]:
    return _BUS.subscribe(event, handler)


def emit(event: str, payload: Dict[str, Any]) -> None:
    _BUS.emit(event, payload)


__all__ = ["emit", "subscribe", "EventBus"]
