from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shop_api.config import Settings, get_settings
from shop_api.database import Database
from shop_api.errors import register_error_handlers
from shop_api.logging_config import setup_logging
from shop_api.routes import health, product, store, user

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around an explicitly constructed persistence client.

    The database is initialised when the app starts and disposed when it
    stops; without one, it is built from ``DATABASE_URL``.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    if database is None:
        database = Database(settings.DATABASE_URL, create_tables=settings.should_create_tables)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s (env=%s)", settings.SERVICE_NAME, settings.ENV)
        database.init()
        try:
            yield
        finally:
            database.shutdown()
            logger.info("Stopped %s", settings.SERVICE_NAME)

    app = FastAPI(title=settings.SERVICE_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(user.router)
    app.include_router(store.router)
    app.include_router(product.router)
    return app
