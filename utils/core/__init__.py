"""
Core Utilities Package

- llm: Gemini initialization and single-shot text generation
"""

from .llm import initialize_llm, generate_response, content_to_text, TEMPERATURE_SETTINGS

__all__ = [
    "initialize_llm",
    "generate_response",
    "content_to_text",
    "TEMPERATURE_SETTINGS",
]
