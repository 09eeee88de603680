"""/api/models routes: read-only queries over the compiled model registry.

Static paths are declared before ``/{model_id}`` so names such as
``tool-calling`` are never matched as ids. Only the single-model lookup
returns 404; every other route answers with an empty list or ``false``.
"""
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.events import ModelLookupMissed, emit
from core.registry import (
    ModelDefinition,
    all_models,
    get_model_definition,
    get_models_by_provider,
    get_non_tool_calling_models,
    get_tool_calling_models,
    get_user_selectable_models,
    model_supports_tool_calls,
)

router = APIRouter(prefix="/api/models", tags=["Models"])

MODEL_NOT_FOUND = {"error": "Model not found"}


def _models_payload(models: list[ModelDefinition]) -> dict:
    return {"models": [m.to_wire() for m in models]}


@router.get(
    "",
    operation_id="getAllModels",
    description="Get all available models with capabilities",
)
def list_all_models():  # noqa: D401
    return _models_payload(all_models())


@router.get(
    "/user-selectable",
    operation_id="getUserSelectableModels",
    description="Get all user-selectable models (excludes system models)",
)
def list_user_selectable_models():  # noqa: D401
    return _models_payload(get_user_selectable_models())


@router.get(
    "/provider/{provider}",
    operation_id="getModelsByProvider",
    description="Get models by provider",
)
def list_models_by_provider(provider: str):  # noqa: D401
    # Plain str on purpose: unknown providers yield an empty list, not 422.
    return _models_payload(get_models_by_provider(provider))


@router.get(
    "/tool-calling",
    operation_id="getToolCallingModels",
    description="Get all models that support tool calling",
)
def list_tool_calling_models():  # noqa: D401
    return _models_payload(get_tool_calling_models())


@router.get(
    "/non-tool-calling",
    operation_id="getNonToolCallingModels",
    description="Get all models that do not support tool calling",
)
def list_non_tool_calling_models():  # noqa: D401
    return _models_payload(get_non_tool_calling_models())


@router.get(
    "/{model_id}",
    operation_id="getModelById",
    description="Get specific model by ID",
    responses={404: {"description": "Model not found"}},
)
def get_model(model_id: str):  # noqa: D401
    model = get_model_definition(model_id)
    if model is None:
        emit(ModelLookupMissed(model_id=model_id, route="model"))
        return JSONResponse(status_code=404, content=MODEL_NOT_FOUND)
    return {"model": model.to_wire()}


@router.get(
    "/{model_id}/supports-tool-calls",
    operation_id="checkModelToolCallSupport",
    description="Check if a model supports tool calls",
)
def check_tool_call_support(model_id: str):  # noqa: D401
    return {
        "modelId": model_id,
        "supportsToolCalls": model_supports_tool_calls(model_id),
    }


__all__ = ["router", "MODEL_NOT_FOUND"]
