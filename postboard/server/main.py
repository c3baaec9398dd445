"""
Main Application Entry Point.

This module builds the FastAPI application: logging, telemetry, CORS, request
middleware, exception handlers and the API routers. It also provides ``run()``
which serves the application with uvicorn on the configured host and port.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.core.database import dispose_engine, init_db
from postboard.core.logging_config import get_logger, setup_logging
from postboard.core.monitoring import initialize_logfire
from postboard.server.core import constant
from postboard.server.core.config import settings

from .api.v1 import health, posts, users
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Ensures the schema on startup and releases pooled connections on shutdown.
    A failing startup aborts the server.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} ({settings.environment})...")
    try:
        await init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME}...")
    await dispose_engine()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        Postboard API

        Users and their posts, served through a routes -> controllers -> services -> repositories stack.
        All responses share one envelope; errors carry a machine-readable code.
        """,
        version=constant.API_VERSION,
        openapi_url=f"{constant.API_V1_STR}/openapi.json",
        docs_url=f"{constant.API_V1_STR}/docs",
        redoc_url=f"{constant.API_V1_STR}/redoc",
        lifespan=lifespan,
    )

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(LogfireMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")
    app.include_router(posts.router, prefix=f"{constant.API_V1_STR}/posts")

    initialize_logfire(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the unified settings."""
    server = settings.server
    uvicorn.run(
        "postboard.server.main:app",
        host=server.host,
        port=server.port,
        log_level=settings.log_level.lower(),
    )
