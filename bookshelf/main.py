"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests pass their own Settings (in-memory database, seeding on/off)

2. Lifespan Events
   - startup: build the entity store, create tables, seed sample data
   - shutdown: close the store (disposes the engine and its connections)
   - The store lives on app.state and reaches resolvers via the GraphQL context

3. Middleware Stack
   - CORS: Allow cross-origin requests

4. Exception Handlers
   - Convert store errors to HTTP responses
   - Log errors for debugging
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookshelf.config import Settings, get_settings
from bookshelf.graphql import create_graphql_router
from bookshelf.services.seed import seed_sample_data
from bookshelf.store import StoreError, Table, create_store

# =============================================================================
# Logging Configuration
# =============================================================================
# Configure logging before creating the app
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Factory
# =============================================================================
def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to get_settings()

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan context manager.

        Code before yield: Runs on startup
        Code after yield: Runs on shutdown
        """
        # ----- STARTUP -----
        logger.info(f"Starting {app_settings.app_name}...")
        logger.info(f"Debug mode: {app_settings.debug}")
        logger.info(f"Store backend: {app_settings.store_backend}")

        store = create_store(app_settings)
        await store.open()

        if app_settings.seed_on_startup:
            if await seed_sample_data(store):
                logger.info("Sample data inserted")

        app.state.store = store
        app.state.settings = app_settings

        yield  # Application runs here

        # ----- SHUTDOWN -----
        logger.info(f"Shutting down {app_settings.app_name}...")
        await store.close()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Bookshelf GraphQL API

A GraphQL API over a small library of authors and books.

### Features
- **Books** and **Authors**: add, update, delete, look up by id
- **Cursor pagination**: `books(first, after)` and `authors(first, after)`
- **Relations**: `Book.author` and `Author.books`
        """,
        version="1.0.0",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    # GraphQL resolvers report their own errors in the response body; these
    # handlers cover the plain HTTP endpoints.
    @app.exception_handler(StoreError)
    async def store_exception_handler(
        request: Request,
        exc: StoreError,
    ) -> JSONResponse:
        """Convert store failures to a 500 response without leaking details."""
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    graphql_router = create_graphql_router(app_settings)
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and its store answers.",
    )
    async def health_check(request: Request) -> dict:
        """
        Health check endpoint.

        Runs a cheap count query against the store; a failing store is
        reported as unhealthy rather than raised.
        """
        store = request.app.state.store
        try:
            await store.count(Table.AUTHOR)
            store_healthy = True
        except StoreError as exc:
            logger.warning(f"Health check: store unavailable ({exc})")
            store_healthy = False

        return {
            "status": "healthy" if store_healthy else "degraded",
            "app": app_settings.app_name,
            "store": {
                "backend": app_settings.store_backend,
                "healthy": store_healthy,
            },
            "graphql": {
                "endpoint": "/graphql",
                "ide_enabled": app_settings.graphql_ide_enabled,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookshelf.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m bookshelf.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
