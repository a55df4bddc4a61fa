"""
Pytest configuration and fixtures.

Provides shared fixtures for testing.
"""

import pytest
from typing import Any, Dict

from fastapi.testclient import TestClient

from quiz_api.main import app


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def sample_submission() -> Dict[str, Any]:
    """Two-question quiz with one right and one wrong answer"""
    return {
        "title": "Capitals",
        "questions": [
            {
                "kind": "single_choice",
                "prompt": "Capital of France?",
                "options": ["Berlin", "Paris", "Rome"],
                "correctReference": 1,
                "maxPoints": 3,
            },
            {
                "kind": "free_text",
                "prompt": "Capital of Spain?",
                "correctReference": ["Madrid"],
                "maxPoints": 1,
            },
        ],
        "answers": {"0": "1", "1": "Lisbon"},
        "passing_score": 70,
    }
