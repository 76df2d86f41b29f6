"""
API Request/Response Models.

Pydantic models for API request validation and response serialization.
JSON keys follow the frontend's camelCase (topicStats, weakTopics).
"""

from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Request Models
# ============================================================================

class Question(BaseModel):
    """
    Multiple-choice question as produced by the model and echoed back by the client.

    `correct` is left untyped so submitted answers are compared without coercion.
    Scoring reads only the fields the client actually sent, so an absent
    `correct` is not confused with an explicit null.
    """

    model_config = ConfigDict(extra="allow")

    question: str = Field(default="", description="Question text")
    topic: Optional[str] = Field(default=None, description="Short topic label")
    options: List[Any] = Field(default_factory=list, description="Answer choices, normally 4")
    correct: Any = Field(default=None, description="Index (0-3) of the correct option")


class EvaluateRequest(BaseModel):
    """Quiz attempt to score."""

    mcqs: List[Question] = Field(default_factory=list, description="Questions in quiz order")
    answers: List[Any] = Field(default_factory=list, description="Submitted option indices, aligned with mcqs")
    context: Optional[str] = Field(default="", description="Source text for revision notes")


class RetakeRequest(BaseModel):
    """Topics to build a retake quiz for."""

    topics: List[str] = Field(default_factory=list, description="Weak topics")
    context: Optional[str] = Field(default="", description="Source text to ground questions on")


# ============================================================================
# Response Models
# ============================================================================

class UploadResponse(BaseModel):
    """Document summary and generated quiz."""

    summary: str = Field(..., description="Bullet-point summary")
    mcqs: List[Any] = Field(default_factory=list, description="Generated questions, as returned by the model")


class TopicStatsModel(BaseModel):
    correct: int
    total: int
    accuracy: float


class EvaluateResponse(BaseModel):
    """Quiz score with per-topic breakdown and revision notes."""

    model_config = ConfigDict(populate_by_name=True)

    score: int
    total: int
    percentage: float
    topic_stats: Dict[str, TopicStatsModel] = Field(default_factory=dict, alias="topicStats")
    weak_topics: List[str] = Field(default_factory=list, alias="weakTopics")
    notes: Dict[str, str] = Field(default_factory=dict)


class RetakeResponse(BaseModel):
    mcqs: List[Any] = Field(default_factory=list)


class VideoResource(BaseModel):
    title: str
    url: str
    thumbnail: str = ""


class WebResource(BaseModel):
    title: str
    link: str


class StudyResponse(BaseModel):
    """Study bundle for a topic."""

    notes: str = ""
    youtube: List[VideoResource] = Field(default_factory=list)
    resources: List[WebResource] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    integrations: Dict[str, bool]
    metrics: Dict[str, Any] = Field(default_factory=dict)
    errors: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
