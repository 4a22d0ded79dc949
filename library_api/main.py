"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests import the module-level ``app`` and override dependencies

2. Lifespan Events
   - startup: create missing tables (CREATE_TABLES_ON_STARTUP)
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - NotFoundError → 404 with the service's message
   - Request validation → 400 with the list of violated constraints
   - Database errors → 500 with a generic message
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from library_api.config import get_settings
from library_api.database import create_tables, engine
from library_api.exceptions import LibraryAPIError, NotFoundError
from library_api.routers import auth_router, books_router, users_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    if settings.create_tables_on_startup:
        create_tables()
        logger.info("Database tables ready")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """
    Flatten Pydantic errors into "field: message" strings.

    The leading "body"/"path" segment of each location is dropped, so a
    missing title reads "title: Field required".
    """
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in {"body", "path", "query"}:
            location = location[1:]
        field = ".".join(location)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Library API

A REST API for managing books and users.

### Resources
- **Books**: Full CRUD operations
- **Users**: Full CRUD operations; passwords are stored as bcrypt hashes
  and never returned
- **Auth**: Exchange credentials for a JWT access token
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(NotFoundError)
    async def not_found_handler(
        request: Request,
        exc: NotFoundError,
    ) -> JSONResponse:
        """Requested id has no stored entity."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Reject malformed input with 400 before any service code runs.

        FastAPI's default is 422; clients of this API expect 400 with the
        list of violated constraints.
        """
        violations = format_validation_errors(exc)
        logger.info(f"Validation failed for {request.method} {request.url.path}: {violations}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"detail": violations}),
        )

    @app.exception_handler(LibraryAPIError)
    async def library_error_handler(
        request: Request,
        exc: LibraryAPIError,
    ) -> JSONResponse:
        logger.error(f"Application error: {exc.message} {exc.context}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
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

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)
    app.include_router(users_router)
    app.include_router(auth_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database reachable.",
    )
    def health_check() -> dict:
        """
        Health check endpoint.

        Used by load balancers, container probes and monitoring.
        """
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            database = "healthy"
        except SQLAlchemyError as e:
            logger.warning(f"Health check database error: {e}")
            database = "unhealthy"

        return {
            "status": "healthy" if database == "healthy" else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn library_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m library_api.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
