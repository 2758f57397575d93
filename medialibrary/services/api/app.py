# medialibrary/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medialibrary.common.settings import get_settings
from medialibrary.services.api.routers import catalog, companies, health, home, media, people

cfg = get_settings()
dev = cfg.app_env.lower() == "development"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Media-Library API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.methods,
        allow_headers=cfg.api.headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(home.router)
    app.include_router(catalog.router)
    for r in media.routers:
        app.include_router(r)
    app.include_router(people.router)
    app.include_router(companies.router)
    return app


app = create_app()
