# autocenter/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from autocenter.api.router import api_router
from autocenter.core.config import Settings, get_settings
from autocenter.core.container import build_services
from autocenter.core.errors import register_exception_handlers
from autocenter.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

# local front-ends used during development
DEFAULT_CORS_ORIGINS = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:4173",
    "http://127.0.0.1:4173",
}


def configure_logging(settings: Settings) -> None:
    # no-op when the host (uvicorn, pytest) already configured the root logger
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None, kv_store: Optional[KeyValueStore] = None, **overrides) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    services = build_services(settings, kv=kv_store, **overrides)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s in %s mode", settings.app_name, settings.app_version, services.mode)
        if services.mode == "cloud":
            from autocenter.core.indexes import ensure_booking_indexes
            await ensure_booking_indexes(services.store.collection)
        yield
        if services.mode == "cloud":
            from autocenter.core.db import close_db
            await close_db()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.services = services

    # CORS first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(set(settings.cors_origins or []) | DEFAULT_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1024)

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get("/ready")
    async def ready():
        return {"ready": True, "mode": services.mode}

    return app


# Local runner: uvicorn autocenter.main:create_app --factory
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("autocenter.main:create_app", factory=True, reload=True, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
