"""Event dataclasses + any-subscriber bridge.

Per-event subscriptions go through `core.eventbus`; `subscribe(handler)`
here receives every event as handler(name, payload). A built-in collector
turns events into metrics counters.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from time import time
from typing import Any, Callable, Dict, List, Protocol

from core import metrics as _metrics
from core.errors import map_exception, validate_error_type
from core.eventbus import emit as _emit_bus

EventHandler = Callable[[str, Dict[str, Any]], None]


class SupportsEvent(Protocol):  # pragma: no cover
    def to_event(self) -> Dict[str, Any]:  # noqa: D401
        ...


@dataclass(slots=True)
class BaseEvent:
    def to_event(self) -> Dict[str, Any]:  # noqa: D401
        data = asdict(self)
        data["ts"] = data.get("ts") or time()
        return data


@dataclass(slots=True)
class ModelLookupMissed(BaseEvent):
    model_id: str
    route: str
    error_type: str = "model-not-found"

    def __post_init__(self) -> None:
        validate_error_type(self.error_type)


@dataclass(slots=True)
class ModelCacheLoaded(BaseEvent):
    base_url: str
    count: int


@dataclass(slots=True)
class ModelCacheFetchFailed(BaseEvent):
    base_url: str
    error_type: str
    message: str | None = None


_ANY_SUBS: List[EventHandler] = []


def _metrics_collector(
    name: str, payload: Dict[str, Any]
) -> None:  # noqa: D401
    if name == "ModelLookupMissed":
        _metrics.inc_model_lookup_miss(payload.get("route", "unknown"))
    elif name == "ModelCacheLoaded":
        _metrics.inc_model_cache_fetch("ok")
    elif name == "ModelCacheFetchFailed":
        _metrics.inc_model_cache_fetch(
            payload.get("error_type") or "fetch-failed"
        )


_ANY_SUBS.append(_metrics_collector)


def emit(ev: BaseEvent | SupportsEvent) -> None:
    name = ev.__class__.__name__
    payload = ev.to_event()
    _emit_bus(name, payload)
    for h in list(_ANY_SUBS):  # copy for isolation
        try:
            h(name, dict(payload))
        except Exception as e:  # noqa: BLE001
            _metrics.inc(
                "handler_exceptions_total",
                {"event": name, "error_type": map_exception(e, "event")},
            )


def on(handler: EventHandler) -> None:
    _ANY_SUBS.append(handler)


def subscribe(handler: EventHandler):
    on(handler)

    def _unsub() -> None:  # noqa: D401
        try:
            _ANY_SUBS.remove(handler)
        except ValueError:
            pass
    return _unsub


def reset_listeners_for_tests() -> None:  # pragma: no cover
    _ANY_SUBS.clear()
    _ANY_SUBS.append(_metrics_collector)


__all__ = [
    "emit",
    "on",
    "subscribe",
    "ModelLookupMissed",
    "ModelCacheLoaded",
    "ModelCacheFetchFailed",
    "reset_listeners_for_tests",
]
