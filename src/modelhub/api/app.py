"""FastAPI application factory for the model catalog API.

Endpoints: /health, /config and the read-only /api/models router.
"""
from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core import metrics
from core.config import get_config
from core.config.schemas.api import ApiConfig
from core.logging_setup import configure_logging
from core.registry import MODEL_REGISTRY, list_providers
from modelhub.api.routes.models import router as models_router

logger = logging.getLogger("modelhub.api")

UNMATCHED_ROUTE = "unmatched"


def create_app() -> FastAPI:
    cfg = get_config()
    configure_logging(cfg.logging)

    app = FastAPI(
        title="modelhub API",
        version="0.1.0",
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.api.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():  # noqa: D401
        return {"status": "ok"}

    @app.get("/config")
    def config():  # noqa: D401
        """Expose UI-relevant settings (read-only, best-effort)."""
        try:
            ui_mode = get_config().api.ui_mode
        except Exception:  # noqa: BLE001
            logger.warning("config unavailable, using defaults", exc_info=True)
            ui_mode = ApiConfig().ui_mode
        return {
            "ui_mode": ui_mode,
            "providers": list_providers(),
            "registry_size": len(MODEL_REGISTRY),
        }

    app.include_router(models_router)

    if cfg.metrics.enabled:
        @app.middleware("http")
        async def _metrics_mw(request: Request, call_next):  # noqa: D401
            start = time.time()
            status = 500
            try:
                response = await call_next(request)
                status = response.status_code
                return response
            finally:
                duration_ms = (time.time() - start) * 1000.0
                # Label by route template; the router sets scope["route"]
                # only once a route has matched.
                route = getattr(
                    request.scope.get("route"), "path", UNMATCHED_ROUTE
                )
                labels = {"route": route, "method": request.method}
                metrics.inc("api_request_total", labels)
                metrics.observe("api_request_latency_ms", duration_ms, labels)
                if status >= 400:
                    metrics.inc(
                        "api_request_errors_total", labels | {"status": status}
                    )

    logger.info(
        "model catalog ready: %d models, providers=%s",
        len(MODEL_REGISTRY),
        ",".join(list_providers()),
    )
    return app


app = create_app()


def main() -> None:  # pragma: no cover
    import uvicorn

    cfg = get_config()
    uvicorn.run(
        "modelhub.api.app:app",
        host=cfg.api.host,
        port=cfg.api.port,
        reload=False,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
