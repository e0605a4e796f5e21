"""
storefront_admin.api.app

FastAPI app factory for the storefront admin service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own shared infrastructure for the process lifetime (DB engine, identity-provider
  HTTP client) and dispose it on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront_admin import __version__
from storefront_admin.api.cors import PreflightMiddleware
from storefront_admin.api.routers.delete_user import router as delete_user_router
from storefront_admin.api.routers.dev_auth import router as dev_auth_router
from storefront_admin.api.routers.health import router as health_router
from storefront_admin.api.routers.roles import router as roles_router
from storefront_admin.auth.verifier import build_verifier
from storefront_admin.db.init_db import init_db
from storefront_admin.db.session import create_engine, create_sessionmaker
from storefront_admin.identity_clients.gotrue import (
    GoTrueAccountAdmin,
    GoTrueClient,
    create_http_client,
)
from storefront_admin.observability.logging import configure_logging, get_logger
from storefront_admin.observability.middleware import RequestContextMiddleware
from storefront_admin.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, token_verification=settings.token_verification)
        if not settings.service_role_key:
            log.warning("service_role_key_missing")

        engine = create_engine(settings)
        http = create_http_client(settings)
        gotrue = GoTrueClient(settings=settings, http=http)

        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        app.state.http = http
        app.state.identity_verifier = build_verifier(settings=settings, client=gotrue)
        app.state.account_admin = GoTrueAccountAdmin(client=gotrue)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod uses Alembic migrations.
            await init_db(engine)

        try:
            yield
        finally:
            await http.aclose()
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Storefront Admin Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Last added runs first: request ids wrap the CORS/pre-flight handling.
    app.add_middleware(
        PreflightMiddleware,
        allow_origin=settings.cors_allow_origin,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(delete_user_router)
    app.include_router(roles_router)
    app.include_router(dev_auth_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; authorization and deletion logic live in services.
