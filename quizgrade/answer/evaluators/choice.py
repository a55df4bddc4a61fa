"""
Single-value choice evaluator.

Grades single_choice and boolean questions. All-or-nothing: partial credit
never applies, whatever the question's allow_partial_credit setting.
"""

from __future__ import annotations

from typing import Any

from quizgrade.models.submission import as_choice, stringify

from ..grade_result import GradeResult
from ..evaluator import QuestionEvaluator


class ChoiceEvaluator(QuestionEvaluator):
    """
    Evaluator for single-value answers.

    The submitted value and the correct reference are compared by their
    canonical string form, so an index sent as ``"1"`` matches ``1``.
    """

    kind = "single_choice"

    def evaluate(self, submitted: Any) -> GradeResult:
        selected = as_choice(submitted)
        is_correct = selected is not None and stringify(selected) == stringify(
            self.question.correct_reference
        )

        details: dict[str, Any] = {
            "selected": selected,
            "correct": self.question.correct_reference,
            "is_correct": is_correct,
        }
        if self.question.options:
            details["selected_text"] = (
                self.question.option_text(selected) if selected is not None else None
            )
            details["correct_text"] = self.question.option_text(self.question.correct_reference)

        if is_correct:
            return self.full_credit(details)
        return self.no_credit(details)
