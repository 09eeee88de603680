"""Configuration loading & validation.

Precedence (last wins): base.yaml → overrides.local.yaml → ENV (MODELHUB__*).

Each top-level section is validated by its own schema
(`core.config.schemas.*`); unknown sections and unknown keys inside a
section are rejected.
"""
from __future__ import annotations

import logging
import os
import pathlib
import threading
from functools import lru_cache
from typing import Any, Dict, Type

import yaml
from core import metrics
from core.errors import validate_error_type
from pydantic import BaseModel, ConfigDict

from .schemas.api import ApiConfig, ClientConfig
from .schemas.observability import LoggingConfig, MetricsConfig

logger = logging.getLogger("core.config")


class AggregatedConfig(BaseModel):
    schema_version: int = 1
    api: ApiConfig = ApiConfig()
    client: ClientConfig = ClientConfig()
    logging: LoggingConfig = LoggingConfig()
    metrics: MetricsConfig = MetricsConfig()

    model_config = ConfigDict(extra="forbid")


DEFAULT_CONFIG_DIR = "configs"
ENV_PREFIX = "MODELHUB__"

SUB_SCHEMA_CLASSES: Dict[str, Type[BaseModel]] = {
    "api": ApiConfig,
    "client": ClientConfig,
    "logging": LoggingConfig,
    "metrics": MetricsConfig,
}


class ConfigError(Exception):
    pass


def _load_yaml_if_exists(path: pathlib.Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _merge_dict(
    base: Dict[str, Any], override: Dict[str, Any]
) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _merge_dict(base[k], v)
        else:
            base[k] = v
    return base


def _cast_env_value(value: str) -> Any:
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return value


def _apply_env(cfg: Dict[str, Any]) -> None:
    prefix_len = len(ENV_PREFIX)
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        path_parts = env_key[prefix_len:].lower().split("__")
        target = cfg
        for part in path_parts[:-1]:
            if part not in target or not isinstance(target[part], dict):
                target[part] = {}
            target = target[part]
        target[path_parts[-1]] = _cast_env_value(value)
        dotted_path = ".".join(path_parts)
        metrics.inc("env_override_total", {"path": dotted_path})
        logger.info(
            "[config-env-override] path=%s value=*** source=env", dotted_path
        )


_lock = threading.Lock()


def _resolve_config_dir() -> pathlib.Path:
    """Resolve config directory each call honoring env var changes."""
    return pathlib.Path(os.getenv("MODELHUB_CONFIG_DIR", DEFAULT_CONFIG_DIR))


def _validate_sub_schemas(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Validate each known section via its schema class."""
    validated: Dict[str, Any] = {}
    for name, cls in SUB_SCHEMA_CLASSES.items():
        if name in raw:
            try:
                validated[name] = cls.model_validate(raw[name] or {})
            except Exception as e:  # noqa: BLE001
                metrics.inc(
                    "config_validation_errors_total",
                    {"path": name, "code": validate_error_type(
                        "config-invalid"
                    )},
                )
                raise ConfigError(
                    f"Validation failed for section '{name}': {e}"
                ) from e
    return validated


def _validate_bounds(raw: Dict[str, Any]) -> None:
    """Cross-field checks the schemas cannot express on their own.

    Validations (error → raise):
      - client.timeout_s > 0
      - client.base_url is an http(s) URL
    """
    errors: list[tuple[str, str, str]] = []  # (path, code, msg)
    client = raw.get("client") or {}
    timeout_s = client.get("timeout_s")
    if isinstance(timeout_s, (int, float)) and timeout_s <= 0:
        errors.append(("client.timeout_s", "config-out-of-range", ">0 required"))
    base_url = client.get("base_url")
    if isinstance(base_url, str) and not base_url.startswith(
        ("http://", "https://")
    ):
        errors.append(
            ("client.base_url", "config-invalid", "http(s) URL required")
        )

    if errors:
        for path, code, _ in errors:
            metrics.inc(
                "config_validation_errors_total",
                {"path": path, "code": validate_error_type(code)},
            )
        details = ", ".join(f"{p}:{c}:{m}" for p, c, m in errors)
        raise ConfigError(f"config validation failed: {details}")


@lru_cache(maxsize=1)
def get_config() -> AggregatedConfig:  # noqa: D401
    with _lock:
        cfg_dir = _resolve_config_dir()
        base_cfg = _load_yaml_if_exists(cfg_dir / "base.yaml")
        overrides_cfg = _load_yaml_if_exists(cfg_dir / "overrides.local.yaml")
        merged = _merge_dict(base_cfg, overrides_cfg)
        _apply_env(merged)
        _validate_bounds(merged)
        validated_sub = _validate_sub_schemas(merged)
        try:
            return AggregatedConfig.model_validate(
                {**merged, **validated_sub}
            )
        except Exception as e:  # noqa: BLE001
            raise ConfigError(str(e)) from e


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    get_config.cache_clear()


def as_dict() -> Dict[str, Any]:
    return get_config().model_dump()
