"""
Centralized prompt templates for the study quiz service.

Every builder is a pure function of its inputs so the same document or
topic list always produces the same instruction text.
"""

from typing import List


# =============================================================================
# QUESTION FORMAT
# =============================================================================

MCQ_JSON_SCHEMA = """[
  {
    "question": "string",
    "topic": "string",
    "options": ["string", "string", "string", "string"],
    "correct": 0
  }
]"""

DEFAULT_QUESTION_COUNT = 5


# =============================================================================
# DOCUMENT PROMPTS
# =============================================================================

def build_summary_prompt(text: str) -> str:
    """Bullet-point summary of an uploaded document."""
    return (
        "Summarize the following PDF content in 6–10 bullet points "
        f"using simple language:\n\n{text}"
    )


def build_mcq_prompt(text: str, count: int = DEFAULT_QUESTION_COUNT) -> str:
    """
    Multiple-choice questions grounded on a document.

    The reply is expected to be a bare JSON array matching MCQ_JSON_SCHEMA;
    callers still run it through the lenient JSON extractor.
    """
    return f"""
Generate exactly {count} multiple choice questions in valid JSON format:
{MCQ_JSON_SCHEMA}
Rules:
- "topic" must be a short, clear name.
- "correct" is the index (0–3) of the correct answer in options.
- Output ONLY valid JSON.
Base strictly on this text:
{text}
"""


# =============================================================================
# QUIZ FOLLOW-UP PROMPTS
# =============================================================================

def build_retake_prompt(
    topics: List[str],
    context: str = "",
    count: int = DEFAULT_QUESTION_COUNT,
) -> str:
    """Fresh questions restricted to the topics a learner got wrong."""
    return f"""
Generate {count} MCQs only for topics: {', '.join(topics)}
Format:
{MCQ_JSON_SCHEMA}
Rules:
- All questions must have a "topic" from the list.
- Base strictly on topics and this context:
{context}
- Output only valid JSON
"""


def build_revision_notes_prompt(topic: str, context: str = "") -> str:
    """Short revision notes for one weak topic."""
    context_block = f"Context:\n{context}" if context else ""
    return f"""
Write beginner-friendly revision notes for: "{topic}".
{context_block}
- Max 180 words
- 4–6 bullet points
- Include 1 real-world example
- Output only notes
"""


# =============================================================================
# STUDY MATERIAL PROMPTS
# =============================================================================

def build_study_notes_prompt(topic: str) -> str:
    """Standalone study notes for the /study endpoint."""
    return f"""
Create simple study notes for the topic "{topic}".
- 5–7 bullet points in plain language
- 1 short real-world example
- If applicable, include 1 key formula/definition
- Keep under 180 words
"""
