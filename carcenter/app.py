"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from carcenter import __version__
from carcenter.auth.jwt import TokenService
from carcenter.config import Settings
from carcenter.db.engine import Database
from carcenter.errors import install_exception_handlers
from carcenter.users.bootstrap import ensure_admin

logger = structlog.get_logger()

DESCRIPTION = "REST API of the car-service reservation system."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: optional schema creation and admin bootstrap. Shutdown: dispose the engine."""
    settings: Settings = app.state.settings
    db: Database = app.state.db
    if settings.create_tables:
        await db.create_all()
        logger.info("database_tables_created")
    await ensure_admin(db, settings)
    yield
    await db.close()
    logger.info("shutdown_complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    if settings is None:
        settings = Settings()  # type: ignore[call-arg]

    prefix = settings.api_prefix.rstrip("/")
    app = FastAPI(
        title="Car Center API",
        description=DESCRIPTION,
        version=__version__,
        contact={
            "name": "Car Center Team",
            "email": "dev@car-center.com",
            "url": "https://car-center.com",
        },
        license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
        servers=[
            {"url": f"http://localhost:{settings.port}", "description": "Local development"},
            {"url": "https://dev-api.car-center.com", "description": "Development"},
            {"url": "https://api.car-center.com", "description": "Production"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings)
    app.state.tokens = TokenService(settings)

    install_exception_handlers(app)

    from carcenter.routers.auth import router as auth_router
    from carcenter.routers.users import router as users_router

    app.include_router(auth_router, prefix=prefix)
    app.include_router(users_router, prefix=prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "carcenter-api"}

    return app
