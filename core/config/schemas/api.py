"""HTTP surface schemas: server binding and client cache target."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    )
    ui_mode: str = Field("user", pattern="^(user|admin)$")

    model_config = ConfigDict(extra="forbid")


class ClientConfig(BaseModel):
    base_url: str = "http://127.0.0.1:8000"
    timeout_s: float = 10.0

    model_config = ConfigDict(extra="forbid")
