# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the FastAPI application: middleware, the root route, exception
# handlers, and the lifespan that starts the MongoDB connection attempt.
#
# The startup demo is NOT started here; it needs the port to be bound
# first, which only the server knows. See app/server.py.
#
# Usage:
#   python -m app                                        # server + startup demo
#   uvicorn app.main:create_app --factory --port 3000   # server only
#
# There is no module-level app: importing this module builds nothing,
# opens no log file and creates no database client.
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.exceptions import StarterServerError, starter_server_exception_handler
from app.logging_config import configure_logging
from app.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.routers import root
from lib.database import DatabaseConnector


def create_app(
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
    database: DatabaseConnector | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        logger: Logger handle shared by every component (built from settings
            when omitted)
        database: Connector to start in the lifespan (built from MONGO_URI
            when omitted)

    Returns:
        FastAPI: The configured application. Settings, logger and database
        connector are available on app.state.
    """
    settings = settings or get_settings()
    logger = logger or configure_logging(settings)
    database = database or DatabaseConnector(
        settings.MONGO_URI,
        timeout_ms=settings.MONGO_TIMEOUT_MS,
        logger=logger,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: kick off the MongoDB connection attempt without waiting on it
        - Shutdown: cancel the attempt if still running and close the client
        """
        logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
        database.start()

        yield

        logger.info("Shutting down server")
        await database.close()

    app = FastAPI(
        title="Starter Server",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.logger = logger
    app.state.database = database

    # =========================================================================
    # Middleware
    # =========================================================================
    # Starlette runs the last-added middleware first, so these are added in
    # reverse of the order a request passes through them:
    #   CORS -> security headers -> request logging -> route

    app.add_middleware(RequestLoggingMiddleware, logger=logger)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(StarterServerError)
    async def handle_starter_server_error(request: Request, exc: StarterServerError):
        """Handle custom server exceptions."""
        return await starter_server_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(root.router)

    return app

