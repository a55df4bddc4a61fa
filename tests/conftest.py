"""
Shared pytest fixtures and utilities for testing the grading core.

This module provides:
- Utilities for testing Pydantic validation
- A recording observer for grading events
- Question definition builders shared by the answer and model tests
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from quizgrade.answer import GradingObserver


class RecordingObserver(GradingObserver):
    """Observer that keeps every event it receives."""

    def __init__(self):
        self.graded = []
        self.anomalies = []
        self.attempts = []

    def question_graded(self, result):
        self.graded.append(result)

    def anomaly(self, question_index, kind, error, depth=0):
        self.anomalies.append((question_index, kind, error, depth))

    def attempt_graded(self, grade):
        self.attempts.append(grade)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def capitals_quiz() -> list[dict[str, Any]]:
    """One question of every kind, 10 points in total."""
    return [
        {
            "kind": "single_choice",
            "prompt": "Capital of France?",
            "options": ["Berlin", "Paris", "Rome"],
            "correctReference": 1,
            "maxPoints": 2,
        },
        {
            "kind": "boolean",
            "prompt": "Rome is in Italy",
            "correctReference": True,
        },
        {
            "kind": "multi_select",
            "prompt": "Which are capitals?",
            "options": ["Paris", "Lyon", "Madrid", "Porto"],
            "correctReference": ["0", "2"],
            "maxPoints": 2,
            "allowPartialCredit": True,
        },
        {
            "kind": "free_text",
            "prompt": "Capital of Spain?",
            "correctReference": ["Madrid"],
            "maxPoints": 2,
        },
        {
            "kind": "composite",
            "prompt": "Read the passage",
            "subQuestions": [
                {"kind": "single_choice", "correctReference": 0, "maxPoints": 1},
                {"kind": "boolean", "correctReference": False, "maxPoints": 2},
            ],
        },
    ]


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
