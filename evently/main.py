"""
Main application module.

This module initializes and configures the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from evently import __version__
from evently.middleware.error_handler import add_error_handlers
from evently.routes.users import router as users_router
from evently.routes.categories import router as categories_router
from evently.routes.events import router as events_router
from evently.routes.orders import router as orders_router
from evently.routes.webhooks import router as webhooks_router
from evently.utils.config import get_settings
from evently.utils.database import init_db, close_db

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and release the engine on shutdown."""
    logger.info("Starting up application...")
    await init_db()
    logger.info("Application startup complete")
    yield
    logger.info("Shutting down application...")
    await close_db()
    logger.info("Application shutdown complete")

def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, error handlers and routers."""
    settings = get_settings()

    app = FastAPI(
        title="Evently API",
        description="Event ticketing: events, categories, checkout and orders",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)

    app.include_router(users_router)
    app.include_router(categories_router)
    app.include_router(events_router)
    app.include_router(orders_router)
    app.include_router(webhooks_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app

app = create_app()
