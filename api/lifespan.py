"""
Application lifespan management.

Reports which external integrations are configured at startup and
releases the shared HTTP client on shutdown.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from config.settings import settings
from utils.http import close_http_client
from utils.monitoring import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Missing API keys are not fatal: the matching features return empty
    results, so they are only reported here.
    """
    logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")

    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    for name, configured in settings.integrations.items():
        if configured:
            logger.info(f"✅ {name} configured")
        else:
            logger.warning(f"⚠️  {name} not configured; related results will be empty")

    logger.info("📚 Upload endpoint: POST /upload")
    logger.info("📝 Quiz endpoints: POST /evaluate, POST /retake")
    logger.info("🔎 Study endpoint: GET /study?topic=...")

    yield

    logger.info(f"🛑 Shutting down {settings.app_name}")
    try:
        await close_http_client()
        logger.info("✅ HTTP client closed")
    except Exception as e:
        logger.warning(f"HTTP client cleanup warning: {e}")

    logger.info("✅ Shutdown complete")
