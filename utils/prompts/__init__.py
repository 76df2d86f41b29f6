"""
Prompts Package

Centralized prompt templates:
- Document summary and MCQ generation
- Retake quizzes and revision notes
- Study notes
"""

from .prompts import (
    build_summary_prompt,
    build_mcq_prompt,
    build_retake_prompt,
    build_revision_notes_prompt,
    build_study_notes_prompt,
    MCQ_JSON_SCHEMA,
    DEFAULT_QUESTION_COUNT,
)

__all__ = [
    'build_summary_prompt',
    'build_mcq_prompt',
    'build_retake_prompt',
    'build_revision_notes_prompt',
    'build_study_notes_prompt',
    'MCQ_JSON_SCHEMA',
    'DEFAULT_QUESTION_COUNT',
]
