from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import os
import time
import uuid
from roktokona.core.config import Settings, settings as default_settings
from roktokona.core.logging import logger
from roktokona.core.exceptions import (
    ApiError,
    api_error_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from roktokona.api.api import api_router
from roktokona.database.database import Database
from roktokona.database.init_db import init_db
from roktokona.static import SPAStaticFiles


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application around one explicitly constructed store."""
    settings = settings or default_settings
    database = database or Database(settings.DATABASE_URL, echo=settings.DB_ECHO)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Blood donor registration and inventory API",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )
    app.state.settings = settings
    app.state.database = database

    # Add exception handlers
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        logger.info(
            f"Request: {request.method} {request.url.path}",
            extra={"request_id": request_id}
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Response: {response.status_code} - {process_time:.3f}s",
            extra={"request_id": request_id}
        )

        response.headers["X-Request-ID"] = request_id

        return response

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        """Initialize application on startup."""
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")

        try:
            init_db(database, settings)
            logger.info(f"Database initialized at {database.location}")
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on application shutdown."""
        logger.info("Application shutting down")
        database.dispose()

    # Front-end bundle last so API routes take precedence
    if os.path.isdir(settings.STATIC_DIRECTORY):
        app.mount(
            "/",
            SPAStaticFiles(directory=settings.STATIC_DIRECTORY, index=settings.STATIC_INDEX),
            name="frontend",
        )
    else:
        logger.warning(f"Static directory '{settings.STATIC_DIRECTORY}' not found; front-end will not be served")

    return app


app = create_app()
