from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitchenking.shared.config.settings import settings
from kitchenking.shared.logging.logger import setup_logging

from kitchenking.shared.api.health import router as health_router
from kitchenking.shared.eventbus.api import router as stream_router
from kitchenking.features.kitchen.api.routes import router as kitchen_router
from kitchenking.features.kitchen.app.orchestrator import ChefOrchestrator
from kitchenking.features.kitchen.app.state import KitchenState

log = logging.getLogger("app")


def _split(value: Optional[str]) -> list:
    if not value or value == "*":
        return ["*"]
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app(orchestrator: Optional[ChefOrchestrator] = None) -> FastAPI:
    setup_logging()
    app = FastAPI(title="KitchenKing", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split(settings.CORS_ALLOW_METHODS),
        allow_headers=_split(settings.CORS_ALLOW_HEADERS),
    )

    # One kitchen per process; the state store and its orchestrator are shared by all routes.
    app.state.orchestrator = orchestrator if orchestrator is not None else ChefOrchestrator(KitchenState())

    # Routers
    app.include_router(health_router)
    app.include_router(kitchen_router, prefix="/v1")
    app.include_router(stream_router,  prefix="/v1")

    log.info("KitchenKing ready: model=%s max_chefs=%d", settings.CHAT_MODEL, settings.MAX_CHEFS)
    return app

# Uvicorn/Gunicorn entry point
app = create_app()
