"""Client-side mirror of the model registry.

Fetches ``GET /api/models`` once and answers every filtered view from the
stored list, reusing the registry's own query functions so client and
server filtering cannot drift apart.

Failures never propagate to the caller: the error is logged, stored on the
cache and ``loading`` is cleared, leaving the previous (possibly empty) list
as the degraded view.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

import httpx
from pydantic import ValidationError

from core.config import get_config
from core.errors import map_exception
from core.events import ModelCacheFetchFailed, ModelCacheLoaded, emit
from core.registry import ModelDefinition, queries

logger = logging.getLogger("modelhub.client")

MODELS_PATH = "/api/models"

Listener = Callable[["ModelRegistryCache"], None]


class ModelFetchError(Exception):
    """Raised internally when the model list cannot be fetched or parsed."""

    def __init__(self, message: str, error_type: str = "fetch-failed") -> None:
        super().__init__(message)
        self.error_type = error_type


class ModelRegistryCache:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        client: Optional[httpx.Client] = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._timeout_s = timeout_s
        self._listeners: List[Listener] = []
        self.models: List[ModelDefinition] = []
        self.loading = False
        self.error: Optional[Exception] = None

    # State ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(cache)`` after every state change."""
        self._listeners.append(listener)

        def _unsub() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return _unsub

    def _set(self, **changes) -> None:
        for key, value in changes.items():
            setattr(self, key, value)
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # noqa: BLE001
                logger.exception("model cache listener failed")

    # Fetch ------------------------------------------------------------

    def _get_models_json(self) -> dict:
        if self._client is not None:
            response = self._client.get(MODELS_PATH)
        else:
            with httpx.Client(
                base_url=self.base_url, timeout=self._timeout_s
            ) as client:
                response = client.get(MODELS_PATH)
        if not response.is_success:
            raise ModelFetchError(
                f"Failed to fetch models: {response.reason_phrase}"
            )
        return response.json()

    def _fail(self, error: ModelFetchError) -> None:
        logger.error("Failed to fetch models from %s: %s", self.base_url, error)
        self._set(error=error, loading=False)
        emit(
            ModelCacheFetchFailed(
                base_url=self.base_url,
                error_type=error.error_type,
                message=str(error),
            )
        )

    def fetch_models(self) -> None:
        self._set(loading=True, error=None)
        try:
            data = self._get_models_json()
            try:
                models = [
                    ModelDefinition.model_validate(m) for m in data["models"]
                ]
            except (KeyError, TypeError, ValidationError) as e:
                raise ModelFetchError(
                    f"Failed to fetch models: invalid payload ({e})",
                    "fetch-invalid-payload",
                ) from e
        except ModelFetchError as e:
            self._fail(e)
            return
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            self._fail(
                ModelFetchError(
                    f"Failed to fetch models: {e}", map_exception(e, "fetch")
                )
            )
            return
        self._set(models=models, loading=False)
        logger.debug("model cache loaded: %d models", len(models))
        emit(ModelCacheLoaded(base_url=self.base_url, count=len(models)))

    # Queries (same semantics as core.registry) ------------------------

    def get_model_by_id(self, model_id: str) -> Optional[ModelDefinition]:
        return queries.get_model_definition(model_id, self.models)

    def get_models_by_provider(self, provider: str) -> List[ModelDefinition]:
        return queries.get_models_by_provider(provider, self.models)

    def get_user_selectable_models(self) -> List[ModelDefinition]:
        return queries.get_user_selectable_models(self.models)

    def get_tool_calling_models(self) -> List[ModelDefinition]:
        return queries.get_tool_calling_models(self.models)

    def get_non_tool_calling_models(self) -> List[ModelDefinition]:
        return queries.get_non_tool_calling_models(self.models)

    def model_supports_tool_calls(self, model_id: str) -> bool:
        return queries.model_supports_tool_calls(model_id, self.models)


def create_model_cache(
    base_url: Optional[str] = None,
    *,
    client: Optional[httpx.Client] = None,
    fetch: bool = True,
) -> ModelRegistryCache:
    """Build a cache from config and (by default) run the initial fetch."""
    cfg = get_config().client
    cache = ModelRegistryCache(
        base_url or cfg.base_url,
        client=client,
        timeout_s=cfg.timeout_s,
    )
    if fetch:
        cache.fetch_models()
    return cache


__all__ = ["ModelRegistryCache", "ModelFetchError", "create_model_cache"]
