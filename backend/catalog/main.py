"""
Catalog API - Backend
Product catalog REST service (create and list products)
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.api import products
from catalog.core.config import Settings, get_settings
from catalog.core.container import Container, build_container
from catalog.core.error_handler import ErrorHandlerMiddleware, register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.is_development else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    # Keep SQLAlchemy engine chatter out of application logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Configuration (default: environment / .env)
        container: Pre-built dependency container (default: built from settings)
    """
    settings = settings or get_settings()
    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = app.state.container.database
        if database is not None and settings.DB_SYNC_SCHEMA:
            logger.info("Synchronizing database schema...")
            database.create_schema()
        logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started ({settings.APP_ENV})")
        yield
        if database is not None:
            database.dispose()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan
    )
    app.state.container = container

    # Error middleware first so CORS wraps its responses too
    app.add_middleware(ErrorHandlerMiddleware, environment=settings.APP_ENV)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(products.router, prefix="/api/products", tags=["Products"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION
        }

    @app.get("/health")
    def health():
        """Health check - tests database connectivity"""
        start_time = time.time()
        database = app.state.container.database

        db_status = "not_configured"
        db_latency_ms = None
        db_error = None

        if database is not None:
            try:
                db_latency_ms = database.ping()
                db_status = "connected"
            except Exception as e:
                logger.warning(f"Health check could not reach the database: {e}")
                db_status = "disconnected"
                db_error = "unreachable" if settings.is_production else str(e)

        content = {
            "status": "degraded" if db_status == "disconnected" else "healthy",
            "service": "catalog-api",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "latency_ms": db_latency_ms,
                "error": db_error
            },
            "total_latency_ms": round((time.time() - start_time) * 1000, 2)
        }
        return JSONResponse(status_code=503 if db_status == "disconnected" else 200, content=content)

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn"""
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "catalog.main:create_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development
    )


if __name__ == "__main__":
    run()
