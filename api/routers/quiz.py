"""Quiz Router - Score attempts and build retake quizzes."""

from typing import Dict, List

from fastapi import APIRouter

from api.models import EvaluateRequest, EvaluateResponse, RetakeRequest, RetakeResponse
from utils.core.llm import generate_response
from utils.errors import ValidationError, handle_errors
from utils.json_recovery import extract_json_array
from utils.monitoring import get_logger
from utils.prompts import build_retake_prompt, build_revision_notes_prompt
from utils.quiz_scoring import score_quiz

logger = get_logger(__name__)
router = APIRouter(prefix="", tags=["Quiz"])

NO_NOTES = "No notes generated."
NOTES_UNAVAILABLE = "Notes unavailable."


async def generate_revision_notes(topics: List[str], context: str = "") -> Dict[str, str]:
    """
    Generate revision notes for each weak topic, one model call at a time.

    A failing topic gets a placeholder instead of aborting the others.
    """
    notes = {}
    for topic in topics:
        try:
            text = await generate_response(
                build_revision_notes_prompt(topic, context),
                use_case="notes",
            )
            notes[topic] = text or NO_NOTES
        except Exception as e:
            logger.error(f"Revision notes failed for topic '{topic}'", error=e)
            notes[topic] = NOTES_UNAVAILABLE
    return notes


@router.post("/evaluate", response_model=EvaluateResponse)
@handle_errors("Failed to evaluate quiz.")
async def evaluate_quiz(request: EvaluateRequest):
    """
    Score a quiz attempt.

    Returns the overall score, per-topic accuracy, the topics answered
    below 50% accuracy, and revision notes for each of those topics.
    """
    if not request.mcqs:
        raise ValidationError("No MCQs provided", field="mcqs")

    result = score_quiz(
        [q.model_dump(exclude_unset=True) for q in request.mcqs],
        request.answers,
    )
    notes = await generate_revision_notes(result.weak_topics, request.context or "")

    logger.info(
        f"Quiz evaluated: {result.score}/{result.total}",
        weak_topics=len(result.weak_topics),
    )
    return EvaluateResponse(
        score=result.score,
        total=result.total,
        percentage=result.percentage,
        topic_stats={
            topic: {"correct": s.correct, "total": s.total, "accuracy": s.accuracy}
            for topic, s in result.topic_stats.items()
        },
        weak_topics=result.weak_topics,
        notes=notes,
    )


@router.post("/retake", response_model=RetakeResponse)
@handle_errors("Failed to generate retake quiz.")
async def retake_quiz(request: RetakeRequest):
    """Generate a fresh quiz focused on the given topics."""
    if not request.topics:
        raise ValidationError("No topics provided", field="topics")

    raw = await generate_response(
        build_retake_prompt(request.topics, request.context or ""),
        use_case="quiz",
    )
    mcqs = extract_json_array(raw, label="retake MCQs")

    logger.info(f"Retake quiz generated: {len(mcqs)} questions", topics=len(request.topics))
    return RetakeResponse(mcqs=mcqs)
