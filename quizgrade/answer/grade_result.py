"""
Grade result data structure.

This module provides the GradeResult class which encapsulates the outcome
of grading one question, including:
- Points earned and points possible
- Strict correctness flag
- Kind-specific details for audit and display
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator


class GradeResult(BaseModel):
    """
    Result of grading a single question.

    Attributes:
        score: Points earned, always within [0, max_score]
        max_score: Points possible for the question
        is_correct: True only for full credit under the kind's own rule
        question_index: Position of the question in its quiz (or parent)
        kind: Question kind that produced the result
        details: Kind-specific explanatory data (selected vs correct values,
            similarity, nested sub-results, or an ``error`` entry)
    """

    model_config = ConfigDict(validate_assignment=True)

    score: float = 0.0
    max_score: float = 0.0
    is_correct: StrictBool = False

    question_index: int = 0
    kind: str = "unknown"

    details: dict[str, Any] = {}

    def model_post_init(self, __context: Any) -> None:
        """Keep score inside [0, max_score]."""
        clamped = max(0.0, min(self.max_score, self.score))
        if clamped != self.score:
            self.score = clamped

    @field_validator("score", "max_score")
    @classmethod
    def validate_points(cls, v: float) -> float:
        """Validate points are numeric."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("points must be numeric")
        return float(v)

    @field_validator("max_score")
    @classmethod
    def validate_max_score(cls, v: float) -> float:
        if v < 0.0:
            raise ValueError("max_score must be non-negative")
        return v

    @field_validator("details", mode="before")
    @classmethod
    def validate_details(cls, v: Any) -> dict[str, Any]:
        """Ensure details is a dict."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("details must be a dict")
        return v

    @property
    def error(self) -> str | None:
        """Error annotation, if the question could not be graded."""
        return self.details.get("error")

    @property
    def ratio(self) -> float:
        """Fraction of available points earned (0.0 when nothing is available)."""
        if self.max_score == 0:
            return 0.0
        return self.score / self.max_score

    def set_error(self, error: str) -> None:
        """Mark the question as ungradable."""
        self.details = {**self.details, "error": error}
        self.score = 0.0
        self.is_correct = False

    def is_partial_credit(self) -> bool:
        """Check if the question earned some but not all points."""
        return 0.0 < self.score < self.max_score

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Nested sub-results of composite questions are converted as well.
        """
        details = dict(self.details)
        if "sub_results" in details:
            details["sub_results"] = [
                sub.to_dict() if isinstance(sub, GradeResult) else sub
                for sub in details["sub_results"]
            ]
        return {
            "question_index": self.question_index,
            "kind": self.kind,
            "score": self.score,
            "max_score": self.max_score,
            "is_correct": self.is_correct,
            "details": details,
        }

    @classmethod
    def full_credit(
        cls,
        max_score: float,
        kind: str = "unknown",
        question_index: int = 0,
        details: dict[str, Any] | None = None,
    ) -> GradeResult:
        """
        Create a fully correct result (convenience factory).

        Returns:
            GradeResult with score=max_score, is_correct=True
        """
        return cls(
            score=max_score,
            max_score=max_score,
            is_correct=True,
            kind=kind,
            question_index=question_index,
            details=details or {},
        )

    @classmethod
    def no_credit(
        cls,
        max_score: float,
        kind: str = "unknown",
        question_index: int = 0,
        details: dict[str, Any] | None = None,
    ) -> GradeResult:
        """
        Create an incorrect result (convenience factory).

        Returns:
            GradeResult with score=0.0, is_correct=False
        """
        return cls(
            score=0.0,
            max_score=max_score,
            is_correct=False,
            kind=kind,
            question_index=question_index,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        max_score: float,
        error: str,
        kind: str = "unknown",
        question_index: int = 0,
    ) -> GradeResult:
        """
        Create an error result (convenience factory).

        Args:
            max_score: Points the question would have been worth
            error: Error message stored in ``details["error"]``
            kind: Question kind
            question_index: Position of the question

        Returns:
            GradeResult with score=0.0 and an error annotation
        """
        result = cls(max_score=max_score, kind=kind, question_index=question_index)
        result.set_error(error)
        return result
