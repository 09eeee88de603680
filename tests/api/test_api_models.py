from core.registry import MODEL_REGISTRY


def _ids(resp):
    return [m["id"] for m in resp.json()["models"]]


def test_all_models_unfiltered(api_client):
    r = api_client.get("/api/models")
    assert r.status_code == 200
    models = r.json()["models"]
    assert [m["id"] for m in models] == [m.id for m in MODEL_REGISTRY]
    assert models == [m.to_wire() for m in MODEL_REGISTRY]


def test_user_selectable(api_client):
    r = api_client.get("/api/models/user-selectable")
    assert r.status_code == 200
    ids = _ids(r)
    assert len(ids) == len(MODEL_REGISTRY) - 2
    assert "llama-guard3:1b" not in ids
    assert "phi3:3.8b" not in ids
    assert all("isSystemModel" not in m for m in r.json()["models"])


def test_provider_ollama(api_client):
    r = api_client.get("/api/models/provider/ollama")
    assert r.status_code == 200
    models = r.json()["models"]
    assert {m["provider"] for m in models} == {"ollama"}
    assert len(models) == sum(
        1 for m in MODEL_REGISTRY if m.provider == "ollama"
    )


def test_provider_cloud_order(api_client):
    r = api_client.get("/api/models/provider/gemini")
    assert _ids(r) == ["gemini-2.5-pro", "gemini-2.5-flash", "gemini-1.5-pro"]


def test_provider_unknown_is_empty_not_error(api_client):
    r = api_client.get("/api/models/provider/mistral")
    assert r.status_code == 200
    assert r.json() == {"models": []}


def test_tool_calling_partition(api_client):
    tools = _ids(api_client.get("/api/models/tool-calling"))
    no_tools = _ids(api_client.get("/api/models/non-tool-calling"))
    assert set(tools).isdisjoint(no_tools)
    assert sorted(tools + no_tools) == sorted(m.id for m in MODEL_REGISTRY)
    assert no_tools == ["qwen3:0.6b", "qwen3:1.7b", "llama-guard3:1b", "phi3:3.8b"]


def test_routes_are_read_only(api_client):
    assert api_client.post("/api/models", json={}).status_code == 405
    assert api_client.delete("/api/models/qwen3:8b").status_code == 405


def test_openapi_operation_ids(api_client):
    schema = api_client.get("/openapi.json").json()
    op_ids = {
        op["operationId"]
        for path in schema["paths"].values()
        for op in path.values()
        if "operationId" in op
    }
    assert {
        "getAllModels",
        "getUserSelectableModels",
        "getModelsByProvider",
        "getToolCallingModels",
        "getNonToolCallingModels",
        "getModelById",
        "checkModelToolCallSupport",
    } <= op_ids
