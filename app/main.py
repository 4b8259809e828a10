"""
app/main.py

Purpose: Application entry point and composition root

- Builds the MongoDB client, repository, service and router in order
- Loads configuration and logging
- Registers middleware, exception handlers and health endpoints
- Manages application lifecycle (startup/shutdown)
- No business logic should be written here
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import time

from app.api.users import create_user_router
from app.core.config import Settings, settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.mongo import (
    check_database_health,
    close_mongo_connection,
    connect_to_mongo,
    create_mongo_client,
    get_users_collection,
)
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService
from utils.constants import SERVICE_NAME, SERVICE_VERSION

logger = get_logger(__name__)

# Requests slower than this are logged as warnings
SLOW_REQUEST_SECONDS = 5.0


def create_app(app_settings: Optional[Settings] = None, client=None) -> FastAPI:
    """
    Wires the application together.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        client: Motor-compatible client; one is created from
            MONGODB_URL when omitted

    Returns:
        FastAPI app ready to be served
    """
    app_settings = app_settings or settings

    if client is None:
        client = create_mongo_client(app_settings)

    collection = get_users_collection(client, app_settings)
    repository = UserRepository(collection)
    service = UserService(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Handles startup and shutdown events.
        """
        setup_logging(app_settings)
        logger.info(f"🚀 Starting {SERVICE_NAME}...")

        try:
            logger.info("Validating configuration...")
            validate_settings(app_settings)
            logger.info("✅ Configuration validated")

            logger.info("Connecting to MongoDB...")
            await connect_to_mongo(client, retries=app_settings.MONGODB_CONNECT_RETRIES)
            logger.info("✅ MongoDB connected")

            logger.info(f"Environment: {app_settings.ENVIRONMENT}")
            logger.info(f"Debug Mode: {app_settings.DEBUG}")

        except Exception as e:
            logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
            raise

        yield  # Application runs here

        logger.info(f"🛑 Shutting down {SERVICE_NAME}...")
        close_mongo_connection(client)

    app = FastAPI(
        title=SERVICE_NAME,
        description="CRUD API for user records stored in MongoDB",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        debug=app_settings.DEBUG,
        docs_url="/docs" if app_settings.is_development else None,
        redoc_url="/redoc" if app_settings.is_development else None,
    )
    app.state.settings = app_settings
    app.state.mongo_client = client
    app.state.user_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app, app_settings)

    app.include_router(create_user_router(service))

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - basic info."""
        return {
            "name": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "running",
            "environment": app_settings.ENVIRONMENT
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Checks database connectivity.
        """
        db_healthy = await check_database_health(client)
        health_status = {
            "status": "healthy" if db_healthy else "unhealthy",
            "timestamp": time.time(),
            "environment": app_settings.ENVIRONMENT,
            "version": SERVICE_VERSION,
            "checks": {"database": "healthy" if db_healthy else "unhealthy"}
        }

        status_code = 200 if db_healthy else 503
        return JSONResponse(content=health_status, status_code=status_code)

    @app.get("/ready", tags=["Health"])
    async def readiness_check():
        """
        Readiness probe - indicates if app is ready to receive traffic.
        """
        if await check_database_health(client):
            return {"status": "ready"}
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "database_unavailable"}
        )

    @app.get("/live", tags=["Health"])
    async def liveness_check():
        """
        Liveness probe - indicates if app is alive.
        """
        return {"status": "alive"}

    return app


def main():
    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
