import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from linx.core.config import settings
from linx.core.init_db import init_db
from linx.core.logging_config import configure_logging
from linx.routers.health import router as health_router
from linx.routers.ingestion import router as ingestion_router
from linx.routers.root import router as root_router
from linx.routers.sols import router as sols_router
from linx.routers.weather import router as weather_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    On startup the report table is created if missing; on shutdown the
    event is only logged, sessions are closed per request.
    """
    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    await init_db()
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Configures logging, registers all routers and applies the lifespan
    handler.
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Mars weather by Earth date, from Curiosity REMS reports",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Register API routers
    app.include_router(root_router)
    app.include_router(weather_router)
    app.include_router(sols_router)
    app.include_router(ingestion_router)
    app.include_router(health_router)

    return app


# Application entry point
app = create_app()


def run() -> None:
    """Serve the application with uvicorn on `HOST:PORT` (0.0.0.0:3000 by default)."""
    uvicorn.run(
        "linx.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
