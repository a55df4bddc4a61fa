"""
quizgrade.answer - Grading framework for quiz questions

Provides kind-dispatched question grading with:
- Edit-distance similarity and tiered free-text matching
- Per-kind evaluators with partial credit
- Recursive grading of composite questions
- Attempt aggregation with pluggable observers
"""

from .attempt import AttemptGrade, AttemptSummary, compute_percentage, grade_attempt
from .evaluator import EvaluatorRegistry, GradingDataError, QuestionEvaluator
from .evaluators import match_text
from .grade_result import GradeResult
from .graders import DEFAULT_MAX_DEPTH, QuestionGrader, default_registry
from .observer import GradingObserver, LoggingObserver
from .similarity import levenshtein_distance, round_half_up, similarity

__all__ = [
    "AttemptGrade",
    "AttemptSummary",
    "compute_percentage",
    "grade_attempt",
    "EvaluatorRegistry",
    "GradingDataError",
    "QuestionEvaluator",
    "GradeResult",
    "DEFAULT_MAX_DEPTH",
    "QuestionGrader",
    "default_registry",
    "GradingObserver",
    "LoggingObserver",
    # Matching primitives
    "match_text",
    "levenshtein_distance",
    "round_half_up",
    "similarity",
]
