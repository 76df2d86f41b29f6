"""
LLM utilities for the study quiz service using Google Gemini.

Every generation in the service is a single-shot prompt -> text call.
`generate_response` is the boundary: it never raises, and any failure
(missing key, network error, non-success status, odd response shape)
comes back as an empty string so handlers can degrade instead of fail.
"""

import time
from typing import Any, Optional, Literal
from langchain_google_genai import ChatGoogleGenerativeAI

from config import settings
from utils.errors import LLMError
from utils.monitoring import get_logger, track_llm_call

logger = get_logger(__name__)

PROVIDER = "gemini"

# Temperature settings by use case
TEMPERATURE_SETTINGS = {
    "summary": 0.3,    # Faithful to the source text
    "quiz": 0.7,       # Varied questions and distractors
    "notes": 0.7,      # Conversational study notes
}


def initialize_llm(
    model_name: Optional[str] = None,
    temperature: Optional[float] = None,
    use_case: Optional[Literal["summary", "quiz", "notes"]] = None,
    max_tokens: Optional[int] = None,
    **kwargs
) -> ChatGoogleGenerativeAI:
    """
    Initialize a Gemini chat model from settings.

    Args:
        model_name: Optional model override (default: settings.default_model)
        temperature: Optional temperature (0.0-1.0), overrides use_case
        use_case: Auto-set temperature: summary, quiz, notes
        max_tokens: Maximum output tokens
        **kwargs: Additional Gemini parameters

    Returns:
        Configured ChatGoogleGenerativeAI instance

    Raises:
        LLMError: If no Gemini API key is configured
    """
    model = model_name or settings.default_model

    if not settings.gemini_api_key:
        raise LLMError("GEMINI_API_KEY is not configured", provider=PROVIDER, model=model)

    if temperature is None and use_case:
        temperature = TEMPERATURE_SETTINGS.get(use_case, settings.llm_temperature)
    elif temperature is None:
        temperature = settings.llm_temperature

    config = {
        "model": model,
        "temperature": temperature,
        "google_api_key": settings.gemini_api_key,
    }

    max_tokens = max_tokens or settings.llm_max_output_tokens
    if max_tokens:
        config["max_output_tokens"] = max_tokens

    config.update(kwargs)
    return ChatGoogleGenerativeAI(**config)


def content_to_text(content: Any) -> str:
    """
    Normalize a chat message's content to plain text.

    Gemini replies arrive either as a string or as a list of parts;
    for the latter the first text part wins.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        for part in content:
            if isinstance(part, str):
                return part
            if isinstance(part, dict) and isinstance(part.get("text"), str):
                return part["text"]
    return ""


async def generate_response(
    prompt: str,
    use_case: Optional[Literal["summary", "quiz", "notes"]] = None,
) -> str:
    """
    Send a single prompt to Gemini and return the first candidate's text.

    Returns an empty string on any failure; details are logged.
    """
    start = time.time()
    try:
        llm = initialize_llm(use_case=use_case)
    except LLMError as e:
        logger.error(f"❌ {e.message}", **e.details)
        track_llm_call(success=False)
        return ""
    except Exception as e:
        logger.error(
            "❌ Gemini client setup failed",
            error=e,
            model=settings.default_model,
        )
        track_llm_call(success=False)
        return ""

    try:
        response = await llm.ainvoke(prompt)
        text = content_to_text(getattr(response, "content", None))
    except Exception as e:
        logger.error(
            f"❌ Gemini API error: {e}",
            model=llm.model,
            prompt_chars=len(prompt),
        )
        track_llm_call(success=False)
        return ""

    latency_ms = int((time.time() - start) * 1000)
    logger.external_call(
        PROVIDER,
        success=bool(text),
        latency_ms=latency_ms,
        prompt_chars=len(prompt),
        response_chars=len(text),
    )
    track_llm_call(success=bool(text))
    return text
