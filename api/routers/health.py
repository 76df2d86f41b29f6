"""Health Check Router - System status endpoints."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from api.models import HealthResponse
from config import settings
from utils.errors import BaseApplicationError, get_error_handler
from utils.monitoring import get_metrics_summary

router = APIRouter(prefix="", tags=["Health"])


@router.get("/", include_in_schema=False)
async def root():
    """Serve the single-page frontend."""
    index_path = Path(settings.static_dir) / "index.html"
    if not index_path.is_file():
        raise BaseApplicationError("Page not found", error_code="NOT_FOUND", status_code=404)
    return FileResponse(index_path)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Reports which integrations are configured along with in-process
    request and error counters. The service is healthy even when an
    integration is missing; those features degrade to empty results.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        integrations=settings.integrations,
        metrics=get_metrics_summary(),
        errors=get_error_handler().get_stats(),
    )
