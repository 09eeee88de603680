"""Central error taxonomy enforcement."""
from __future__ import annotations

_ALLOWED_ERROR_TYPES = {
    # registry
    "model-not-found",
    "registry-duplicate-id",
    # config
    "config-invalid",
    "config-out-of-range",
    # client cache
    "fetch-failed",
    "fetch-timeout",
    "fetch-invalid-payload",
    # infra
    "event-handler-error",
}


def validate_error_type(code: str) -> str:
    assert (
        code in _ALLOWED_ERROR_TYPES
    ), f"Unknown error_type '{code}' (not in taxonomy)"
    return code


def map_exception(e: Exception, phase: str) -> str:
    name = e.__class__.__name__.lower()
    msg = str(e).lower()
    if phase == "fetch":
        if "timeout" in name or "timeout" in msg:
            return "fetch-timeout"
        if "json" in name or "validation" in name:
            return "fetch-invalid-payload"
        return "fetch-failed"
    return "event-handler-error"


__all__ = ["validate_error_type", "map_exception"]
