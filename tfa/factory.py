"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer, ensure_tfa_home
from .logging_config import configure_logging
from .settings import Settings, get_settings
from tfa.modules.artifactfetch import artifactfetch_router


def create_app(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.tfa_log_level)
    ensure_tfa_home(settings)
    services = container or ServiceContainer(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:  # pragma: no cover - invoked by FastAPI
        yield
        services.close()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(artifactfetch_router)
    app.state.container = services
    app.state.settings = settings
    return app
