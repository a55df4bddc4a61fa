"""
Grading observers.

Hooks through which graders and the attempt aggregator report what they did,
kept apart from the grading algorithm. ``LoggingObserver`` forwards events to
the standard logging module with structured ``extra_data``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from .grade_result import GradeResult

if TYPE_CHECKING:
    from .attempt import AttemptGrade


class GradingObserver:
    """No-op observer; subclasses override the events they care about."""

    def question_graded(self, result: GradeResult) -> None:
        """Called once per top-level question, in quiz order."""

    def anomaly(self, question_index: int, kind: str, error: str, depth: int = 0) -> None:
        """Called when a question definition could not be graded."""

    def attempt_graded(self, grade: AttemptGrade) -> None:
        """Called once the whole attempt has been aggregated."""


class LoggingObserver(GradingObserver):
    """
    Observer that writes grading events to a logger.

    Anomalies are logged as warnings since they point at a malformed quiz;
    per-question results are debug output.
    """

    def __init__(self, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None):
        self.logger = logger or logging.getLogger("quizgrade")

    def question_graded(self, result: GradeResult) -> None:
        self.logger.debug(
            "Question graded",
            extra={
                "extra_data": {
                    "question_index": result.question_index,
                    "kind": result.kind,
                    "score": result.score,
                    "max_score": result.max_score,
                    "is_correct": result.is_correct,
                }
            },
        )

    def anomaly(self, question_index: int, kind: str, error: str, depth: int = 0) -> None:
        self.logger.warning(
            "Question definition could not be graded",
            extra={
                "extra_data": {
                    "question_index": question_index,
                    "kind": kind,
                    "depth": depth,
                    "error": error,
                }
            },
        )

    def attempt_graded(self, grade: AttemptGrade) -> None:
        self.logger.info(
            "Attempt graded",
            extra={
                "extra_data": {
                    "total_score": grade.total_score,
                    "total_possible": grade.total_possible,
                    "percentage": grade.percentage,
                    "questions": len(grade.per_question),
                }
            },
        )
