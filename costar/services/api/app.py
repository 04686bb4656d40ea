from __future__ import annotations

from fastapi import FastAPI

from costar.common.settings import get_settings
from costar.services.api.routers import health, paths, people

cfg = get_settings()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Costar API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # Routers
    app.include_router(health.router)
    app.include_router(paths.router)
    app.include_router(people.router)
    return app

app = create_app()
