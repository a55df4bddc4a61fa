"""
Multi-select evaluator.

Handles set comparison with optional partial credit.
"""

from __future__ import annotations

from typing import Any

from quizgrade.models.submission import as_selection

from ..evaluator import GradingDataError, QuestionEvaluator
from ..grade_result import GradeResult
from ..similarity import round_half_up


class MultiSelectEvaluator(QuestionEvaluator):
    """
    Evaluator for multi-select answers.

    Supports:
    - Exact set matching (order of selection is irrelevant)
    - Partial credit where each wrong selection cancels a correct one

    ``is_correct`` is always the exact-set-match flag, also when partial
    credit was awarded.
    """

    kind = "multi_select"

    def compare(self, selected: list[str], correct: list[str]) -> tuple[int, int]:
        """
        Count hits against the correct set.

        Returns:
            Tuple of (correct_hits, wrong_hits)
        """
        correct_set = set(correct)
        correct_hits = sum(1 for value in selected if value in correct_set)
        wrong_hits = len(selected) - correct_hits
        return correct_hits, wrong_hits

    def evaluate(self, submitted: Any) -> GradeResult:
        correct = list(self.question.correct_reference)
        if not correct:
            raise GradingDataError("multi_select question has an empty correct set")

        selected = as_selection(submitted)
        correct_hits, wrong_hits = self.compare(selected, correct)
        exact_match = correct_hits == len(correct) and wrong_hits == 0

        if self.question.allow_partial_credit:
            fraction = max(0, correct_hits - wrong_hits) / len(correct)
            score = round_half_up(self.max_points * fraction)
        else:
            score = self.max_points if exact_match else 0

        details: dict[str, Any] = {
            "selected": selected,
            "correct": correct,
            "correct_count": correct_hits,
            "incorrect_count": wrong_hits,
            "is_correct": exact_match,
        }
        if self.question.options:
            details["selected_text"] = ", ".join(
                self.question.option_text(value) or value for value in selected
            )
            details["correct_text"] = ", ".join(
                self.question.option_text(value) or value for value in correct
            )

        return self.scored(score, exact_match, details)
