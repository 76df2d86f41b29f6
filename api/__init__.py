"""
API package for the study quiz service.

FastAPI application with one router per feature:
- health: frontend page and health check
- documents: upload, summary and quiz generation
- quiz: scoring and retake quizzes
- study: notes, videos and web resources
"""

from .app import app

__all__ = ["app"]
