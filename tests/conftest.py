"""
Test Configuration and Utilities

Shared fixtures for the study quiz service tests:
- Isolated environment (no API keys, temporary upload directory)
- FastAPI test client
- Sample quiz data
"""

import os
import tempfile

# Configure the environment before any application module reads settings
os.environ["TESTING"] = "true"
os.environ["ENABLE_METRICS"] = "true"
os.environ["GEMINI_API_KEY"] = ""
os.environ["YOUTUBE_API_KEY"] = ""
os.environ["GOOGLE_CSE_API_KEY"] = ""
os.environ["GOOGLE_CSE_ID"] = ""
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="study-quiz-uploads-")

import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from config import settings
from utils.monitoring import reset_metrics


# ============================================================================
# Test Configuration
# ============================================================================

@pytest.fixture(autouse=True)
def clean_state():
    """Reset metrics and empty the upload directory around each test."""
    reset_metrics()
    yield
    upload_dir = Path(settings.upload_dir)
    if upload_dir.exists():
        for leftover in upload_dir.iterdir():
            leftover.unlink()


@pytest.fixture
def client():
    """Create a test client for the API."""
    from api.app import app
    return TestClient(app)


@pytest.fixture
def upload_dir() -> Path:
    """Directory uploads are written to during tests."""
    path = Path(settings.upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def configured_keys(monkeypatch):
    """Pretend every external integration is configured."""
    monkeypatch.setattr(settings, "gemini_api_key", "test-gemini-key")
    monkeypatch.setattr(settings, "youtube_api_key", "test-youtube-key")
    monkeypatch.setattr(settings, "google_cse_api_key", "test-cse-key")
    monkeypatch.setattr(settings, "google_cse_id", "test-cse-id")
    return settings


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def sample_mcqs():
    """Four questions across two topics."""
    return [
        {"question": "Q1", "topic": "Algebra", "options": ["a", "b", "c", "d"], "correct": 0},
        {"question": "Q2", "topic": "Algebra", "options": ["a", "b", "c", "d"], "correct": 1},
        {"question": "Q3", "topic": "Geometry", "options": ["a", "b", "c", "d"], "correct": 2},
        {"question": "Q4", "topic": "Geometry", "options": ["a", "b", "c", "d"], "correct": 3},
    ]


MCQ_REPLY = """Here are your questions:
```json
[
  {"question": "What is 2+2?", "topic": "Arithmetic", "options": ["3", "4", "5", "6"], "correct": 1},
  {"question": "What is 3*3?", "topic": "Arithmetic", "options": ["6", "9", "12", "3"], "correct": 1,},
]
```"""


@pytest.fixture
def mcq_reply():
    """Model reply with prose, a code fence and trailing commas."""
    return MCQ_REPLY


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: tests that go through the HTTP layer"
    )
    config.addinivalue_line(
        "markers", "integration: tests that need real API keys"
    )
