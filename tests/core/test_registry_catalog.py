import pytest
from pydantic import ValidationError

from core.registry import (
    MODEL_REGISTRY,
    ModelCapabilities,
    ModelDefinition,
    Provider,
    RegistryError,
    build_registry,
)


def _record(model_id: str, provider: str = "ollama", tools: bool = True):
    return ModelDefinition(
        id=model_id,
        provider=provider,
        name=model_id.upper(),
        capabilities=ModelCapabilities(supports_tool_calls=tools),
    )


def test_catalog_ids_unique():
    ids = [m.id for m in MODEL_REGISTRY]
    assert len(ids) == len(set(ids))


def test_catalog_shape():
    assert len(MODEL_REGISTRY) == 27
    by_provider = {}
    for m in MODEL_REGISTRY:
        by_provider[m.provider] = by_provider.get(m.provider, 0) + 1
    assert by_provider == {
        Provider.OLLAMA: 16,
        Provider.ANTHROPIC: 3,
        Provider.OPENAI: 3,
        Provider.DEEPSEEK: 2,
        Provider.GEMINI: 3,
    }
    system_ids = [m.id for m in MODEL_REGISTRY if m.is_system_model]
    assert system_ids == ["llama-guard3:1b", "phi3:3.8b"]


def test_catalog_providers_closed_set():
    assert {m.provider for m in MODEL_REGISTRY} <= set(Provider)


def test_build_registry_rejects_duplicate_ids():
    with pytest.raises(RegistryError) as ei:
        build_registry([_record("a"), _record("b"), _record("a")])
    assert "Duplicate model id" in str(ei.value)
    assert ei.value.error_type == "registry-duplicate-id"


def test_build_registry_is_immutable_tuple():
    reg = build_registry([_record("a"), _record("b")])
    assert isinstance(reg, tuple)
    with pytest.raises(ValidationError):
        reg[0].name = "changed"


def test_unknown_provider_rejected():
    with pytest.raises(ValidationError):
        _record("x", provider="mistral")


def test_wire_format_camel_case_and_sparse():
    qwen = next(m for m in MODEL_REGISTRY if m.id == "qwen3:8b")
    wire = qwen.to_wire()
    assert wire["provider"] == "ollama"
    assert wire["capabilities"] == {
        "supportsToolCalls": True,
        "capabilities": {"multilingual": True, "reasoning": True},
    }
    assert wire["context"] == "40K"
    assert wire["size"] == "5.2GB"
    assert "isSystemModel" not in wire

    guard = next(m for m in MODEL_REGISTRY if m.id == "llama-guard3:1b")
    gwire = guard.to_wire()
    assert gwire["isSystemModel"] is True
    assert gwire["capabilities"] == {"supportsToolCalls": False}


def test_wire_round_trip_by_alias():
    src = next(m for m in MODEL_REGISTRY if m.id == "qwen3:235b")
    parsed = ModelDefinition.model_validate(src.to_wire())
    assert parsed == src
    assert parsed.capabilities.capabilities.moe is True
