"""API endpoint tests."""

import asyncio

import pytest
from unittest.mock import AsyncMock, patch

from api.routers import documents, quiz, study

pytestmark = pytest.mark.api


async def fake_generate(prompt, use_case=None):
    """Model stand-in: a JSON quiz for quiz prompts, bullet text otherwise."""
    if use_case == "quiz":
        return '[{"question": "Q?", "topic": "Cells", "options": ["a", "b", "c", "d"], "correct": 2},]'
    return "- a bullet point"


class TestHealth:
    """Test health and frontend endpoints."""

    def test_health_endpoint(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["integrations"] == {"gemini": False, "youtube": False, "web_search": False}

    def test_root_serves_frontend(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_correlation_id_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "req-123"})
        assert response.headers["X-Correlation-ID"] == "req-123"

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert "error" in response.json()


class TestUpload:
    """Test document upload."""

    def test_missing_file(self, client):
        response = client.post("/upload")
        assert response.status_code == 400
        assert response.json() == {"error": "No PDF uploaded"}

    def test_unsupported_file_type(self, client):
        response = client.post(
            "/upload",
            files={"pdf": ("slides.pptx", b"data", "application/octet-stream")},
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Unsupported file type")

    def test_file_too_large(self, client, monkeypatch):
        from config import settings
        monkeypatch.setattr(settings, "max_upload_size_mb", 1)

        response = client.post(
            "/upload",
            files={"pdf": ("big.txt", b"x" * (1024 * 1024 + 1), "text/plain")},
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("File too large")

    def test_summary_and_quiz(self, client, upload_dir):
        with patch.object(documents, "generate_response", side_effect=fake_generate) as generate:
            response = client.post(
                "/upload",
                files={"pdf": ("cells.txt", b"Cells are the basic unit of life.", "text/plain")},
            )

        assert response.status_code == 200
        body = response.json()
        assert body["summary"] == "- a bullet point"
        assert body["mcqs"] == [
            {"question": "Q?", "topic": "Cells", "options": ["a", "b", "c", "d"], "correct": 2}
        ]
        assert generate.call_count == 2
        assert "Cells are the basic unit of life." in generate.call_args_list[0].args[0]
        # Stored upload is removed once text is extracted
        assert list(upload_dir.iterdir()) == []

    def test_empty_model_output_degrades(self, client):
        with patch.object(documents, "generate_response", AsyncMock(return_value="")):
            response = client.post(
                "/upload",
                files={"pdf": ("notes.md", b"# Notes", "text/markdown")},
            )

        assert response.status_code == 200
        assert response.json() == {"summary": "No summary returned.", "mcqs": []}

    def test_upload_is_saved_off_the_event_loop(self, client):
        real_to_thread = asyncio.to_thread
        with patch.object(documents, "generate_response", side_effect=fake_generate), \
                patch.object(documents.asyncio, "to_thread", side_effect=real_to_thread) as to_thread:
            response = client.post(
                "/upload",
                files={"pdf": ("cells.txt", b"Cells are the basic unit of life.", "text/plain")},
            )

        assert response.status_code == 200
        targets = [c.args[0] for c in to_thread.call_args_list]
        assert documents.save_upload in targets
        assert documents.discard_upload in targets

    def test_non_finite_correct_discards_quiz(self, client):
        async def nan_quiz(prompt, use_case=None):
            if use_case == "quiz":
                return '[{"question": "Q", "correct": NaN}]'
            return "- a bullet point"

        with patch.object(documents, "generate_response", side_effect=nan_quiz):
            response = client.post(
                "/upload",
                files={"pdf": ("notes.txt", b"Some notes", "text/plain")},
            )

        assert response.status_code == 200
        assert response.json() == {"summary": "- a bullet point", "mcqs": []}

    def test_unreadable_pdf(self, client, upload_dir):
        response = client.post(
            "/upload",
            files={"pdf": ("broken.pdf", b"not really a pdf", "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process PDF."}
        assert list(upload_dir.iterdir()) == []


class TestEvaluate:
    """Test quiz scoring."""

    def test_missing_mcqs(self, client):
        response = client.post("/evaluate", json={"answers": [0]})
        assert response.status_code == 400
        assert response.json() == {"error": "No MCQs provided"}

    def test_malformed_body(self, client):
        response = client.post("/evaluate", json={"mcqs": "not a list"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_score_and_notes_for_weak_topics(self, client, sample_mcqs):
        generate = AsyncMock(return_value="- revise this")
        with patch.object(quiz, "generate_response", generate):
            response = client.post(
                "/evaluate",
                json={"mcqs": sample_mcqs, "answers": [0, 1, 0, 0], "context": "source text"},
            )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 2
        assert body["total"] == 4
        assert body["percentage"] == 50.0
        assert body["topicStats"]["Algebra"] == {"correct": 2, "total": 2, "accuracy": 1.0}
        assert body["topicStats"]["Geometry"] == {"correct": 0, "total": 2, "accuracy": 0.0}
        assert body["weakTopics"] == ["Geometry"]
        assert body["notes"] == {"Geometry": "- revise this"}

        prompt = generate.call_args.args[0]
        assert '"Geometry"' in prompt
        assert "source text" in prompt

    def test_no_weak_topics_means_no_model_calls(self, client, sample_mcqs):
        generate = AsyncMock(return_value="unused")
        with patch.object(quiz, "generate_response", generate):
            response = client.post(
                "/evaluate",
                json={"mcqs": sample_mcqs, "answers": [0, 1, 2, 3]},
            )

        assert response.json()["weakTopics"] == []
        assert response.json()["notes"] == {}
        generate.assert_not_called()

    def test_absent_correct_never_matches(self, client):
        """A question without a correct answer is not satisfied by a null answer."""
        generate = AsyncMock(return_value="- revise")
        with patch.object(quiz, "generate_response", generate):
            response = client.post(
                "/evaluate",
                json={"mcqs": [{"question": "Q", "topic": "T"}], "answers": [None]},
            )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 0
        assert body["weakTopics"] == ["T"]

    def test_explicit_null_correct_matches_null_answer(self, client):
        response = client.post(
            "/evaluate",
            json={"mcqs": [{"question": "Q", "topic": "T", "correct": None}], "answers": [None]},
        )

        assert response.status_code == 200
        assert response.json()["score"] == 1
        assert response.json()["weakTopics"] == []

    def test_note_placeholders(self, client):
        """Empty notes and failing topics get placeholders without failing the request."""
        mcqs = [
            {"question": "Q1", "topic": "Empty", "options": [], "correct": 0},
            {"question": "Q2", "topic": "Broken", "options": [], "correct": 0},
        ]
        generate = AsyncMock(side_effect=["", RuntimeError("model down")])
        with patch.object(quiz, "generate_response", generate):
            response = client.post("/evaluate", json={"mcqs": mcqs, "answers": [1, 1]})

        assert response.status_code == 200
        assert response.json()["notes"] == {
            "Empty": "No notes generated.",
            "Broken": "Notes unavailable.",
        }


class TestRetake:
    """Test retake quiz generation."""

    def test_missing_topics(self, client):
        response = client.post("/retake", json={"topics": []})
        assert response.status_code == 400
        assert response.json() == {"error": "No topics provided"}

    def test_generates_quiz(self, client):
        with patch.object(quiz, "generate_response", side_effect=fake_generate) as generate:
            response = client.post(
                "/retake",
                json={"topics": ["Cells", "Genetics"], "context": "biology notes"},
            )

        assert response.status_code == 200
        assert response.json()["mcqs"][0]["topic"] == "Cells"
        assert "Cells, Genetics" in generate.call_args.args[0]

    def test_unparseable_output_is_empty_quiz(self, client):
        with patch.object(quiz, "generate_response", AsyncMock(return_value="Sorry, I can't.")):
            response = client.post("/retake", json={"topics": ["Cells"]})

        assert response.status_code == 200
        assert response.json() == {"mcqs": []}


class TestStudy:
    """Test study bundles."""

    def test_missing_topic(self, client):
        assert client.get("/study").json() == {"error": "Missing topic"}
        response = client.get("/study", params={"topic": "   "})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing topic"}

    def test_unconfigured_fetchers_return_empty_lists(self, client):
        with patch.object(study, "generate_response", AsyncMock(return_value="- notes")):
            response = client.get("/study", params={"topic": "  Photosynthesis "})

        assert response.status_code == 200
        assert response.json() == {"notes": "- notes", "youtube": [], "resources": []}

    def test_bundle_combines_sources(self, client):
        videos = [{"title": "Video", "url": "https://www.youtube.com/watch?v=x", "thumbnail": ""}]
        resources = [{"title": "Paper", "link": "https://example.edu/p.pdf"}]

        with patch.object(study, "generate_response", AsyncMock(return_value="- notes")), \
                patch.object(study, "fetch_videos", AsyncMock(return_value=videos)) as fetch_v, \
                patch.object(study, "fetch_web_resources", AsyncMock(return_value=resources)):
            response = client.get("/study", params={"topic": "Photosynthesis"})

        assert response.status_code == 200
        assert response.json() == {"notes": "- notes", "youtube": videos, "resources": resources}
        fetch_v.assert_awaited_once_with("Photosynthesis")


class TestModels:
    """Test request/response model configuration."""

    def test_question_keeps_extra_fields_and_unset_correct(self):
        from api.models import Question

        question = Question(question="Q", topic="T", explanation="because")
        dumped = question.model_dump(exclude_unset=True)
        assert dumped == {"question": "Q", "topic": "T", "explanation": "because"}
        assert "correct" not in dumped

    def test_evaluate_response_by_field_name_and_alias(self):
        from api.models import EvaluateResponse

        response = EvaluateResponse(score=1, total=1, percentage=100.0, weak_topics=["T"])
        assert response.model_dump(by_alias=True)["weakTopics"] == ["T"]
        assert EvaluateResponse.model_config["populate_by_name"] is True
