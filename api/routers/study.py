"""Study Router - Notes, videos and web resources for a topic."""

import asyncio
from typing import Optional

from fastapi import APIRouter, Query

from api.models import StudyResponse
from tools.study import fetch_videos, fetch_web_resources
from utils.core.llm import generate_response
from utils.errors import ValidationError, handle_errors
from utils.monitoring import get_logger
from utils.prompts import build_study_notes_prompt

logger = get_logger(__name__)
router = APIRouter(prefix="", tags=["Study"])


@router.get("/study", response_model=StudyResponse)
@handle_errors("Failed to fetch study materials.")
async def study_materials(topic: Optional[str] = Query(None, description="Topic to study")):
    """
    Build a study bundle for a topic.

    Notes, videos and web resources are fetched concurrently. An
    unconfigured or failing source contributes an empty result.
    """
    topic = (topic or "").strip()
    if not topic:
        raise ValidationError("Missing topic", field="topic")

    notes, youtube, resources = await asyncio.gather(
        generate_response(build_study_notes_prompt(topic), use_case="notes"),
        fetch_videos(topic),
        fetch_web_resources(topic),
    )

    logger.info(
        f"Study bundle ready for '{topic}'",
        videos=len(youtube),
        resources=len(resources),
    )
    return StudyResponse(notes=notes, youtube=youtube, resources=resources)
