"""Model definition schema (wire format is camelCase)."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Provider(str, Enum):
    OLLAMA = "ollama"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class CapabilityFlags(_Record):
    """Sparse secondary capabilities; unset flags stay ``None``."""

    reasoning: Optional[bool] = None
    thinking: Optional[bool] = None
    multilingual: Optional[bool] = None
    moe: Optional[bool] = None  # mixture of experts


class ModelCapabilities(_Record):
    supports_tool_calls: bool
    capabilities: Optional[CapabilityFlags] = None


class ModelDefinition(_Record):
    id: str
    provider: Provider
    name: str
    description: Optional[str] = None
    capabilities: ModelCapabilities
    context: Optional[str] = None
    size: Optional[str] = None
    # System models are hidden from user selection but still queryable.
    is_system_model: Optional[bool] = None

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
