"""
Base question evaluator framework.

Provides abstract base class for question evaluators and a registry
for kind-based dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .grade_result import GradeResult


class GradingDataError(ValueError):
    """Raised when a question definition cannot be graded as stored."""


class QuestionEvaluator(BaseModel, ABC):
    """
    Abstract base class for question evaluators.

    Each evaluator grades submissions for one question kind against a
    validated question definition.

    Subclasses must implement:
    - evaluate(): Core grading logic
    - kind: Class variable for kind identification
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Kind identifier (must be set by subclasses)
    kind: ClassVar[str] = "unknown"

    question: Any = Field(description="The question definition being graded")
    question_index: int = Field(default=0, ge=0, description="Position of the question in its parent")
    depth: int = Field(default=0, ge=0, description="Composite nesting level of the question")
    grader: Any = Field(default=None, description="Grader used for nested sub-questions")

    @abstractmethod
    def evaluate(self, submitted: Any) -> GradeResult:
        """
        Grade a raw submitted value.

        Args:
            submitted: Learner's answer as delivered by the client, or None

        Returns:
            GradeResult with score, correctness and details

        Raises:
            GradingDataError: If the question definition cannot be graded
        """
        pass

    @property
    def max_points(self) -> float:
        return self.question.max_points

    def full_credit(self, details: dict[str, Any]) -> GradeResult:
        return GradeResult.full_credit(
            self.max_points, kind=self.question.kind, question_index=self.question_index, details=details
        )

    def no_credit(self, details: dict[str, Any]) -> GradeResult:
        return GradeResult.no_credit(
            self.max_points, kind=self.question.kind, question_index=self.question_index, details=details
        )

    def scored(self, score: float, is_correct: bool, details: dict[str, Any]) -> GradeResult:
        return GradeResult(
            score=score,
            max_score=self.max_points,
            is_correct=is_correct,
            kind=self.question.kind,
            question_index=self.question_index,
            details=details,
        )


class EvaluatorRegistry(BaseModel):
    """
    Registry for question evaluators.

    Provides kind-based dispatch to the appropriate evaluator.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _evaluators: dict[str, type[QuestionEvaluator]] = PrivateAttr(default_factory=dict)

    def register(self, kind: str, evaluator_class: type[QuestionEvaluator]) -> None:
        """
        Register an evaluator for a question kind.

        Args:
            kind: Kind identifier (e.g., "single_choice", "free_text")
            evaluator_class: Evaluator class to use for this kind

        Raises:
            TypeError: If evaluator_class is not a QuestionEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, QuestionEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of QuestionEvaluator, got {evaluator_class}")
        self._evaluators[kind] = evaluator_class

    def get_evaluator(self, kind: str) -> type[QuestionEvaluator] | None:
        """Get evaluator class for a kind, or None if not registered."""
        return self._evaluators.get(kind)

    def create_evaluator(self, kind: str, question: Any, **options: Any) -> QuestionEvaluator:
        """
        Create evaluator instance for a question.

        Args:
            kind: Kind identifier
            question: Validated question definition
            **options: Evaluator fields (question_index, depth, grader)

        Returns:
            Evaluator instance

        Raises:
            GradingDataError: If the kind is not registered
        """
        evaluator_class = self.get_evaluator(kind)
        if evaluator_class is None:
            raise GradingDataError(f"Unknown question type: {kind}")

        return evaluator_class(question=question, **options)

    def get_registered_kinds(self) -> list[str]:
        """List of all registered kinds."""
        return list(self._evaluators.keys())
