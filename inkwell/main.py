"""Inkwell API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InkwellError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import inkwell.infrastructure.database as db_module
from inkwell.api.error_handlers import register_error_handlers
from inkwell.api.routes import admin_categories, admin_posts, health, public_posts
from inkwell.config import get_settings
from inkwell.infrastructure.database import init_db
from inkwell.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Inkwell API started")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("Inkwell API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Inkwell API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(public_posts.router)
    app.include_router(admin_posts.router)
    app.include_router(admin_categories.router)

    register_error_handlers(app)
    return app


app = create_app()
