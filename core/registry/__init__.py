"""Model registry (compiled catalog + pure queries).

Responsibilities:
- Declare the closed provider set and the model record schema
- Build the immutable catalog once at import (duplicate ids rejected)
- Provide lookup by id / provider / capability / selectability

No mutation API: the catalog lives for the process lifetime.
"""
from .model import (  # noqa: F401
    CapabilityFlags,
    ModelCapabilities,
    ModelDefinition,
    Provider,
)
from .catalog import MODEL_REGISTRY, RegistryError, build_registry  # noqa: F401
from .queries import (  # noqa: F401
    all_models,
    get_model_definition,
    get_models_by_provider,
    get_non_tool_calling_models,
    get_tool_calling_models,
    get_user_selectable_models,
    is_user_selectable,
    list_providers,
    matches_id,
    matches_provider,
    model_supports_tool_calls,
    supports_tool_calls,
)

__all__ = [
    "CapabilityFlags",
    "ModelCapabilities",
    "ModelDefinition",
    "Provider",
    "MODEL_REGISTRY",
    "RegistryError",
    "build_registry",
    "all_models",
    "get_model_definition",
    "get_models_by_provider",
    "get_non_tool_calling_models",
    "get_tool_calling_models",
    "get_user_selectable_models",
    "is_user_selectable",
    "list_providers",
    "matches_id",
    "matches_provider",
    "model_supports_tool_calls",
    "supports_tool_calls",
]
