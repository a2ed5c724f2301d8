"""
Main FastAPI application for PushCapture.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from loguru import logger

from pushcapture import __version__
from pushcapture.api import configuration
from pushcapture.config import settings
from pushcapture.database import close_db, engine
from pushcapture.services import ConfigurationManager, ConfigurationStore, LocalPushServiceFactory
from pushcapture.utils.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    setup_logger()
    logger.info(f"Starting {settings.app_name} {__version__}...")

    # One manager per running instance: the locked state lives as long as the process
    app.state.config_manager = ConfigurationManager(
        store=ConfigurationStore(engine),
        push_factory=LocalPushServiceFactory(),
    )
    logger.info(f"Using configuration store {engine.url.render_as_string(hide_password=True)}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    await close_db()
    logger.info(f"{settings.app_name} shut down complete")


# Create FastAPI app
app = FastAPI(
    title="PushCapture",
    description="Push notification configuration screen",
    version=__version__,
    lifespan=lifespan
)

# Include routers
app.include_router(configuration.router)


@app.get("/api/status/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
