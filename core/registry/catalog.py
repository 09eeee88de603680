"""Compiled model catalog.

Ollama entries carry context/size metadata from the local library; cloud
entries only carry capabilities. Tool-calling flags reflect what each
variant handles reliably (small Qwen3 variants and system models do not).
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from core.errors import validate_error_type

from .model import (
    CapabilityFlags,
    ModelCapabilities,
    ModelDefinition,
    Provider,
)


class RegistryError(Exception):
    """Raised when the catalog cannot be assembled (e.g. duplicate id)."""

    def __init__(
        self, message: str, error_type: str = "registry-duplicate-id"
    ) -> None:
        super().__init__(message)
        self.error_type = validate_error_type(error_type)


def _model(
    model_id: str,
    provider: Provider,
    name: str,
    description: str,
    *,
    tools: bool,
    flags: Optional[Dict[str, bool]] = None,
    context: Optional[str] = None,
    size: Optional[str] = None,
    system: bool = False,
) -> ModelDefinition:
    return ModelDefinition(
        id=model_id,
        provider=provider,
        name=name,
        description=description,
        capabilities=ModelCapabilities(
            supports_tool_calls=tools,
            capabilities=CapabilityFlags(**flags) if flags else None,
        ),
        context=context,
        size=size,
        is_system_model=True if system else None,
    )


def build_registry(
    definitions: Sequence[ModelDefinition],
) -> Tuple[ModelDefinition, ...]:
    """Freeze definitions into a registry, rejecting duplicate ids."""
    seen: set[str] = set()
    for d in definitions:
        if d.id in seen:
            raise RegistryError(f"Duplicate model id in registry: {d.id}")
        seen.add(d.id)
    return tuple(definitions)


_OLLAMA = Provider.OLLAMA
_MULTI = {"multilingual": True}
_MULTI_REASON = {"multilingual": True, "reasoning": True}
_MULTI_THINK = {"multilingual": True, "reasoning": True, "thinking": True}
_THINK = {"reasoning": True, "thinking": True}
_REASON = {"reasoning": True}
_REASON_MULTI = {"reasoning": True, "multilingual": True}

_DEFINITIONS = [
    # Ollama
    _model(
        "qwen3:0.6b", _OLLAMA, "Qwen3 0.6B",
        "Qwen3 0.6B - Lightweight model with basic capabilities",
        tools=False, flags=_MULTI, context="40K", size="523MB",
    ),
    _model(
        "qwen3:1.7b", _OLLAMA, "Qwen3 1.7B",
        "Qwen3 1.7B - Small model with limited tool calling",
        tools=False, flags=_MULTI, context="40K", size="1.4GB",
    ),
    _model(
        "qwen3:4b", _OLLAMA, "Qwen3 4B",
        "Qwen3 4B - Medium model with basic tool calling",
        tools=True, flags=_MULTI, context="40K", size="2.6GB",
    ),
    _model(
        "qwen3:8b", _OLLAMA, "Qwen3 8B",
        "Qwen3 8B - Good balance of performance and tool calling",
        tools=True, flags=_MULTI_REASON, context="40K", size="5.2GB",
    ),
    _model(
        "qwen3:14b", _OLLAMA, "Qwen3 14B",
        "Qwen3 14B - High performance with excellent tool calling",
        tools=True, flags=_MULTI_THINK, context="40K", size="9.3GB",
    ),
    _model(
        "qwen3:30b", _OLLAMA, "Qwen3 30B",
        "Qwen3 30B - High-end model with advanced capabilities",
        tools=True, flags=_MULTI_THINK, context="40K", size="19GB",
    ),
    _model(
        "qwen3:32b", _OLLAMA, "Qwen3 32B",
        "Qwen3 32B - High-end model with advanced capabilities",
        tools=True, flags=_MULTI_THINK, context="40K", size="20GB",
    ),
    _model(
        "qwen3:235b", _OLLAMA, "Qwen3 235B",
        "Qwen3 235B - Ultra-large model with MoE architecture",
        tools=True, flags={**_MULTI_THINK, "moe": True},
        context="40K", size="142GB",
    ),
    _model(
        "deepseek-r1:1.5b", _OLLAMA, "DeepSeek-R1 1.5B",
        "DeepSeek-R1 1.5B - Reasoning model with basic tool calling",
        tools=True, flags=_THINK, context="128K", size="1.1GB",
    ),
    _model(
        "deepseek-r1:7b", _OLLAMA, "DeepSeek-R1 7B",
        "DeepSeek-R1 7B - Reasoning model with good tool calling",
        tools=True, flags=_THINK, context="128K", size="4.7GB",
    ),
    _model(
        "deepseek-r1:8b", _OLLAMA, "DeepSeek-R1 8B",
        "DeepSeek-R1 8B - Reasoning model with excellent tool calling",
        tools=True, flags=_THINK, context="128K", size="5.2GB",
    ),
    _model(
        "deepseek-r1:14b", _OLLAMA, "DeepSeek-R1 14B",
        "DeepSeek-R1 14B - High-performance reasoning model",
        tools=True, flags=_THINK, context="128K", size="9.0GB",
    ),
    _model(
        "gpt-oss:20b", _OLLAMA, "GPT-OSS 20B",
        "GPT-OSS 20B - OpenAI open-weight model with function calling",
        tools=True, flags=_REASON, context="128K", size="12GB",
    ),
    _model(
        "gpt-oss:120b", _OLLAMA, "GPT-OSS 120B",
        "GPT-OSS 120B - Large OpenAI open-weight model",
        tools=True, flags=_REASON, context="128K", size="70GB",
    ),
    # System models (hidden from user selection)
    _model(
        "llama-guard3:1b", _OLLAMA, "Llama Guard 3 1B",
        "Guard model for safety checks",
        tools=False, context="8K", size="1.1GB", system=True,
    ),
    _model(
        "phi3:3.8b", _OLLAMA, "Phi-3 3.8B",
        "General purpose model for system tasks",
        tools=False, context="128K", size="2.3GB", system=True,
    ),
    # Cloud providers
    _model(
        "claude-3-5-sonnet-20241022", Provider.ANTHROPIC, "Claude 3.5 Sonnet",
        "Anthropic's most capable model with excellent tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "claude-3-5-haiku-20241022", Provider.ANTHROPIC, "Claude 3.5 Haiku",
        "Fast and efficient model with good tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "claude-3-opus-20240229", Provider.ANTHROPIC, "Claude 3 Opus",
        "Most capable Claude 3 model with excellent tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "gpt-4o", Provider.OPENAI, "GPT-4o",
        "OpenAI's flagship model with excellent tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "gpt-4-turbo", Provider.OPENAI, "GPT-4 Turbo",
        "Fast GPT-4 variant with excellent tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "gpt-3.5-turbo", Provider.OPENAI, "GPT-3.5 Turbo",
        "Efficient model with good tool calling",
        tools=True, flags=_MULTI,
    ),
    _model(
        "deepseek-chat", Provider.DEEPSEEK, "DeepSeek Chat",
        "DeepSeek's chat model with good tool calling",
        tools=True, flags=_REASON,
    ),
    _model(
        "deepseek-reasoner", Provider.DEEPSEEK, "DeepSeek Reasoner",
        "DeepSeek's reasoning model with excellent tool calling",
        tools=True, flags=_THINK,
    ),
    _model(
        "gemini-2.5-pro", Provider.GEMINI, "Gemini 2.5 Pro",
        "Google's most capable model with excellent tool calling",
        tools=True, flags=_REASON_MULTI,
    ),
    _model(
        "gemini-2.5-flash", Provider.GEMINI, "Gemini 2.5 Flash",
        "Fast Gemini model with good tool calling",
        tools=True, flags=_MULTI,
    ),
    _model(
        "gemini-1.5-pro", Provider.GEMINI, "Gemini 1.5 Pro",
        "Google's previous generation model with good tool calling",
        tools=True, flags=_MULTI,
    ),
]

MODEL_REGISTRY: Tuple[ModelDefinition, ...] = build_registry(_DEFINITIONS)

__all__ = ["MODEL_REGISTRY", "RegistryError", "build_registry"]
