"""
Question grader.

Dispatches a question to the evaluator registered for its kind and localizes
every failure to that question: ``QuestionGrader.grade`` never raises.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quizgrade.models.question import BaseQuestion, MalformedQuestion, QuestionKind, parse_question

from .evaluator import EvaluatorRegistry
from .evaluators import ChoiceEvaluator, CompositeEvaluator, FreeTextEvaluator, MultiSelectEvaluator
from .grade_result import GradeResult
from .observer import GradingObserver, LoggingObserver

# Deepest composite nesting level that is still graded (top level is 0)
DEFAULT_MAX_DEPTH = 2


def default_registry() -> EvaluatorRegistry:
    """Registry with the built-in evaluator for every question kind."""
    registry = EvaluatorRegistry()
    registry.register(QuestionKind.SINGLE_CHOICE.value, ChoiceEvaluator)
    registry.register(QuestionKind.BOOLEAN.value, ChoiceEvaluator)
    registry.register(QuestionKind.MULTI_SELECT.value, MultiSelectEvaluator)
    registry.register(QuestionKind.FREE_TEXT.value, FreeTextEvaluator)
    registry.register(QuestionKind.COMPOSITE.value, CompositeEvaluator)
    return registry


class QuestionGrader(BaseModel):
    """
    Grades one question at a time.

    Stateless apart from its configuration, so one instance may serve any
    number of attempts concurrently.

    Attributes:
        registry: Kind to evaluator dispatch table
        max_depth: Deepest composite nesting level still graded
        observer: Receives data-integrity anomalies
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    registry: EvaluatorRegistry = Field(default_factory=default_registry)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    observer: GradingObserver = Field(default_factory=LoggingObserver)

    def grade(self, question: Any, submitted: Any, index: int = 0, depth: int = 0) -> GradeResult:
        """
        Grade a submitted answer against one question.

        Args:
            question: Question model or raw definition mapping
            submitted: Raw submitted value, None when not answered
            index: Position of the question in its quiz (or parent composite)
            depth: Composite nesting level of the question

        Returns:
            GradeResult; malformed definitions and internal failures yield
            score 0 with ``details["error"]``
        """
        try:
            question = parse_question(question)
        except Exception as exc:
            return self._error(
                MalformedQuestion(max_points=0.0), index, depth, str(exc) or exc.__class__.__name__
            )

        if isinstance(question, MalformedQuestion):
            return self._error(question, index, depth, question.error)

        if depth > self.max_depth:
            return self._error(
                question, index, depth, f"Composite nesting deeper than {self.max_depth} levels"
            )

        try:
            evaluator = self.registry.create_evaluator(
                question.kind, question, question_index=index, depth=depth, grader=self
            )
            return evaluator.evaluate(submitted)
        except Exception as exc:
            # one bad question must not abort grading of the others
            return self._error(question, index, depth, str(exc) or exc.__class__.__name__)

    def _error(self, question: BaseQuestion, index: int, depth: int, error: str) -> GradeResult:
        self.observer.anomaly(index, question.kind, error, depth=depth)
        return GradeResult.error_result(
            question.max_points, error, kind=question.kind, question_index=index
        )
