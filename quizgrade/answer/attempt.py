"""
Attempt aggregation.

Runs the question grader across a quiz, in question order, and sums the
results into an AttemptGrade.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, Field

from quizgrade.models.question import Quiz
from quizgrade.models.submission import normalize_answers

from .grade_result import GradeResult
from .graders import QuestionGrader
from .observer import GradingObserver, LoggingObserver
from .similarity import round_half_up

# Attempts faster than this many seconds per question are flagged
MIN_SECONDS_PER_QUESTION = 10


class AttemptSummary(BaseModel):
    """Pass/fail outcome and review flags for a graded attempt"""

    score: float
    max_possible_score: float
    percentage: int
    correct_answers: int
    total_questions: int
    passed: bool
    perfect_score: bool = False
    too_fast: bool = False


class AttemptGrade(BaseModel):
    """
    Aggregate grade over all questions of a quiz.

    Attributes:
        total_score: Sum of question scores
        total_possible: Sum of question max scores
        percentage: Rounded total_score / total_possible * 100, 0 when
            nothing was possible
        is_gradable: False when the quiz offered no points at all
        per_question: Question results in quiz order
    """

    total_score: float = 0.0
    total_possible: float = 0.0
    percentage: int = 0
    is_gradable: bool = False
    per_question: list[GradeResult] = Field(default_factory=list)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.per_question if r.is_correct)

    @property
    def errors(self) -> dict[int, str]:
        """Question index to error for questions that could not be graded."""
        return {r.question_index: r.error for r in self.per_question if r.error}

    def summarize(self, passing_score: float = 0.0, time_taken: Optional[float] = None) -> AttemptSummary:
        """
        Summarize the attempt for result pages and review.

        Args:
            passing_score: Percentage required to pass
            time_taken: Seconds the learner spent, if tracked

        Returns:
            AttemptSummary with pass/fail and the perfect_score/too_fast flags
        """
        total_questions = len(self.per_question)
        too_fast = (
            time_taken is not None
            and total_questions > 0
            and time_taken < total_questions * MIN_SECONDS_PER_QUESTION
        )
        return AttemptSummary(
            score=self.total_score,
            max_possible_score=self.total_possible,
            percentage=self.percentage,
            correct_answers=self.correct_count,
            total_questions=total_questions,
            passed=self.is_gradable and self.percentage >= passing_score,
            perfect_score=self.is_gradable and self.total_score == self.total_possible,
            too_fast=too_fast,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_score": self.total_score,
            "total_possible": self.total_possible,
            "percentage": self.percentage,
            "is_gradable": self.is_gradable,
            "per_question": [r.to_dict() for r in self.per_question],
        }


def compute_percentage(total_score: float, total_possible: float) -> int:
    """Whole-number percentage; 0 when no points were possible or the ratio is not finite."""
    if total_possible <= 0:
        return 0
    ratio = total_score / total_possible
    if not math.isfinite(ratio):
        return 0
    return round_half_up(ratio * 100)


def grade_attempt(
    questions: Union[Quiz, Iterable[Any], None],
    answers: Any,
    *,
    grader: Optional[QuestionGrader] = None,
    observer: Optional[GradingObserver] = None,
) -> AttemptGrade:
    """
    Grade every question of a quiz against a learner's answers.

    Args:
        questions: Quiz, or ordered question models / raw definitions; the
            position of a question is its answer index
        answers: Raw mapping of question index (int or digit string) to the
            submitted value, or a list in question order
        grader: Question grader to use (default: built-in evaluators)
        observer: Receives per-question and per-attempt events (default:
            the grader's observer)

    Returns:
        AttemptGrade; always complete, a malformed question only zeroes
        itself
    """
    if grader is None:
        grader = QuestionGrader(observer=observer or LoggingObserver())
    if observer is None:
        observer = grader.observer

    if isinstance(questions, Quiz):
        questions = questions.questions
    submitted = normalize_answers(answers)

    per_question: list[GradeResult] = []
    total_score = 0.0
    total_possible = 0.0
    for index, question in enumerate(questions or []):
        result = grader.grade(question, submitted.get(index), index)
        observer.question_graded(result)
        total_score += result.score
        total_possible += result.max_score
        per_question.append(result)

    grade = AttemptGrade(
        total_score=total_score,
        total_possible=total_possible,
        percentage=compute_percentage(total_score, total_possible),
        is_gradable=total_possible > 0,
        per_question=per_question,
    )
    observer.attempt_graded(grade)
    return grade
