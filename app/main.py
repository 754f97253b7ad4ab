"""Main FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from app import __version__
from app.config import settings
from app.models.response import HealthResponse
from app.routers import trigger_router
from app.services.pipeline import run_pipeline
from app.services.scheduler import MemeScheduler
from app.services.session import get_session, close_session


# Configure loguru
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level.upper(),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting Meme Notifier v{__version__}")
    logger.info(f"Server running on {settings.host}:{settings.port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Image provider: {settings.image_api_provider}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(f"Timeout: {settings.timeout}s")

    session = await get_session()

    async def scheduled_run():
        return await run_pipeline(settings, session)

    scheduler = MemeScheduler(scheduled_run, interval=settings.schedule_interval)
    if settings.schedule_enabled:
        await scheduler.start()
    else:
        logger.info("Schedule disabled, manual triggers only")

    yield

    logger.info("Shutting down...")
    await scheduler.stop()
    await close_session()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Meme Notifier",
    description="Generates motivational memes with an image API and posts them to Telegram",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Include routers
app.include_router(trigger_router, tags=["Trigger"])


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse()


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
