"""
Free-text answer evaluator.

Handles string comparison with tiered exact, substring and fuzzy matching.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from quizgrade.models.submission import as_text

from ..evaluator import QuestionEvaluator
from ..grade_result import GradeResult
from ..similarity import round_half_up, similarity

# Tier scores; the ordering exact > answer-contains-reference >
# reference-contains-answer > fuzzy must hold
EXACT_SCORE = 1.0
CONTAINS_REFERENCE_SCORE = 0.9
CONTAINED_IN_REFERENCE_SCORE = 0.8
FUZZY_THRESHOLD = 0.7
FUZZY_WEIGHT = 0.8

# Similarity at or above this is a correct answer
CORRECT_THRESHOLD = 0.8


def normalize_text(text: str, case_sensitive: bool = False) -> str:
    """Trim whitespace and lower-case unless matching is case-sensitive."""
    text = str(text).strip()
    if not case_sensitive:
        text = text.lower()
    return text


def match_text(
    answer: Optional[str],
    references: Iterable[str],
    case_sensitive: bool = False,
) -> float:
    """
    Best match score of an answer across acceptable reference answers.

    Per reference, the first applicable tier wins:

    1. exact (normalized) equality: 1.0, returned immediately
    2. answer contains the reference: 0.9
    3. reference contains the answer: 0.8
    4. edit-distance similarity above 0.7: similarity * 0.8

    Args:
        answer: Learner's answer
        references: Acceptable answers
        case_sensitive: Compare without lower-casing

    Returns:
        Best score in [0, 1]; 0 for a blank answer or no references
    """
    if answer is None:
        return 0.0
    normalized_answer = normalize_text(answer, case_sensitive)
    if not normalized_answer:
        return 0.0

    best_score = 0.0
    for reference in references:
        normalized_reference = normalize_text(reference, case_sensitive)
        if not normalized_reference:
            continue

        if normalized_answer == normalized_reference:
            return EXACT_SCORE

        if normalized_reference in normalized_answer:
            best_score = max(best_score, CONTAINS_REFERENCE_SCORE)
            continue

        if normalized_answer in normalized_reference:
            best_score = max(best_score, CONTAINED_IN_REFERENCE_SCORE)
            continue

        ratio = similarity(normalized_answer, normalized_reference)
        if ratio > FUZZY_THRESHOLD:
            best_score = max(best_score, ratio * FUZZY_WEIGHT)

    return best_score


class FreeTextEvaluator(QuestionEvaluator):
    """
    Evaluator for free-text answers.

    Supports:
    - Multiple acceptable answers
    - Case-insensitive matching (default)
    - Substring and fuzzy matching with partial credit
    """

    kind = "free_text"

    def evaluate(self, submitted: Any) -> GradeResult:
        answer = as_text(submitted)
        references = list(self.question.correct_reference)
        score_ratio = match_text(answer, references, self.question.case_sensitive)
        is_correct = score_ratio >= CORRECT_THRESHOLD

        if self.question.allow_partial_credit:
            score = round_half_up(self.max_points * score_ratio)
        else:
            score = self.max_points if is_correct else 0

        return self.scored(
            score,
            is_correct,
            {
                "answer": answer,
                "correct_answers": references,
                "similarity": score_ratio,
                "case_sensitive": self.question.case_sensitive,
                "is_correct": is_correct,
            },
        )
