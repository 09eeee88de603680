"""Read-only queries over a model sequence.

Every function defaults to the compiled ``MODEL_REGISTRY`` but accepts an
explicit ``models`` sequence so the client cache filters its fetched copy
with the exact same predicates. Results keep declaration order; unknown
inputs yield empty results or ``False``, never an error.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .catalog import MODEL_REGISTRY
from .model import ModelDefinition, Provider

Models = Sequence[ModelDefinition]


# Predicates -----------------------------------------------------------

def matches_id(model: ModelDefinition, model_id: str) -> bool:
    return model.id == model_id


def matches_provider(model: ModelDefinition, provider: str) -> bool:
    # Provider is a str enum, so plain strings compare by value.
    return model.provider == provider


def is_user_selectable(model: ModelDefinition) -> bool:
    return not model.is_system_model


def supports_tool_calls(model: ModelDefinition) -> bool:
    return model.capabilities.supports_tool_calls


# Queries --------------------------------------------------------------

def all_models(models: Optional[Models] = None) -> List[ModelDefinition]:
    return list(MODEL_REGISTRY if models is None else models)


def get_model_definition(
    model_id: str, models: Optional[Models] = None
) -> Optional[ModelDefinition]:
    for m in all_models(models):
        if matches_id(m, model_id):
            return m
    return None


def get_models_by_provider(
    provider: str, models: Optional[Models] = None
) -> List[ModelDefinition]:
    return [m for m in all_models(models) if matches_provider(m, provider)]


def get_user_selectable_models(
    models: Optional[Models] = None,
) -> List[ModelDefinition]:
    return [m for m in all_models(models) if is_user_selectable(m)]


def get_tool_calling_models(
    models: Optional[Models] = None,
) -> List[ModelDefinition]:
    return [m for m in all_models(models) if supports_tool_calls(m)]


def get_non_tool_calling_models(
    models: Optional[Models] = None,
) -> List[ModelDefinition]:
    return [m for m in all_models(models) if not supports_tool_calls(m)]


def model_supports_tool_calls(
    model_id: str, models: Optional[Models] = None
) -> bool:
    model = get_model_definition(model_id, models)
    return model is not None and supports_tool_calls(model)


def list_providers() -> List[str]:
    return [p.value for p in Provider]


__all__ = [
    "matches_id",
    "matches_provider",
    "is_user_selectable",
    "supports_tool_calls",
    "all_models",
    "get_model_definition",
    "get_models_by_provider",
    "get_user_selectable_models",
    "get_tool_calling_models",
    "get_non_tool_calling_models",
    "model_supports_tool_calls",
    "list_providers",
]
