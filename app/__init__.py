"""Application factory and top-level wiring for the Addresses API.

``create_app`` is the one place where configuration, the database, middleware,
error handling and routers meet. Read it top to bottom for a bird's-eye view
of what runs on every request.
"""

from __future__ import annotations

from fastapi import FastAPI

from .core.config import AppSettings, settings as default_settings
from .core.errors import register_exception_handlers
from .db.migrate import init_db
from .db.session import configure_engine
from .middlewares import RequestIdMiddleware, SecurityHeadersMiddleware


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title=settings.APP_NAME)

    # ---------- DB init/migrations ----------
    # Tables are created on startup so a fresh SQLite file works out of the box.
    init_db(configure_engine(settings.DB_URL))

    # ---------- Middleware ----------
    # Added last runs first: request ids wrap everything, including headers.
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # ---------- Exception handling ----------
    register_exception_handlers(app)

    # ---------- Routers ----------
    from .routers import addresses as addresses_router

    app.include_router(addresses_router.router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, bool]:
        return {"ok": True}

    if settings.METRICS_ENABLED:
        from prometheus_fastapi_instrumentator import Instrumentator

        Instrumentator().instrument(app).expose(app, include_in_schema=False)

    return app


__all__ = ["create_app"]
