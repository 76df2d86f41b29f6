"""Tests for prompt builders."""

from utils.prompts import (
    build_mcq_prompt,
    build_retake_prompt,
    build_revision_notes_prompt,
    build_study_notes_prompt,
    build_summary_prompt,
)


def test_summary_prompt_embeds_text():
    prompt = build_summary_prompt("Cells are the unit of life.")
    assert "bullet points" in prompt
    assert prompt.endswith("Cells are the unit of life.")


def test_mcq_prompt_question_count():
    assert "exactly 5 multiple choice questions" in build_mcq_prompt("text")
    assert "exactly 8 multiple choice questions" in build_mcq_prompt("text", count=8)


def test_mcq_prompt_describes_format():
    prompt = build_mcq_prompt("Mitochondria produce ATP.")
    assert '"correct": 0' in prompt
    assert "Output ONLY valid JSON" in prompt
    assert "Mitochondria produce ATP." in prompt


def test_retake_prompt_lists_topics():
    prompt = build_retake_prompt(["Algebra", "Geometry"], context="Triangles")
    assert "topics: Algebra, Geometry" in prompt
    assert "Triangles" in prompt


def test_revision_notes_context_is_optional():
    with_context = build_revision_notes_prompt("Algebra", context="x + 1 = 2")
    without_context = build_revision_notes_prompt("Algebra")

    assert "Context:\nx + 1 = 2" in with_context
    assert "Context:" not in without_context
    assert '"Algebra"' in without_context


def test_study_notes_prompt():
    prompt = build_study_notes_prompt("Photosynthesis")
    assert 'topic "Photosynthesis"' in prompt
    assert "180 words" in prompt


def test_prompts_are_deterministic():
    assert build_mcq_prompt("same text") == build_mcq_prompt("same text")
