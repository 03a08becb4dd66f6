"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.api.error import register_error_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import subscriptions, users
from src.depends import engine

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """
    Build the API application

    Args:
        config: ApplicationConfig-like object

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Subscription Expense Tracker",
        description="Tracks recurring subscriptions, next billing dates and monthly expense",
        version="1.0.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)

    app.include_router(users.router)
    app.include_router(subscriptions.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
