"""
Composite (paragraph) question evaluator.

Grades every sub-question through the owning grader and sums the results.
"""

from __future__ import annotations

from typing import Any

from quizgrade.models.submission import as_sub_answers

from ..evaluator import GradingDataError, QuestionEvaluator
from ..grade_result import GradeResult


class CompositeEvaluator(QuestionEvaluator):
    """
    Evaluator for composite questions.

    The submission is a mapping (or list) of sub-question index to answer;
    missing entries are graded as not answered. The composite is correct only
    if every sub-question is.
    """

    kind = "composite"

    def evaluate(self, submitted: Any) -> GradeResult:
        if self.grader is None:
            raise GradingDataError("composite questions need a grader for their sub-questions")

        sub_answers = as_sub_answers(submitted)
        sub_results = [
            self.grader.grade(sub_question, sub_answers.get(i), i, depth=self.depth + 1)
            for i, sub_question in enumerate(self.question.sub_questions)
        ]

        total_sub_score = sum(r.score for r in sub_results)
        total_sub_max = sum(r.max_score for r in sub_results)
        is_correct = all(r.is_correct for r in sub_results)

        return GradeResult(
            score=total_sub_score,
            max_score=total_sub_max,
            is_correct=is_correct,
            kind=self.question.kind,
            question_index=self.question_index,
            details={
                "sub_results": sub_results,
                "total_sub_score": total_sub_score,
                "total_sub_max": total_sub_max,
                "is_correct": is_correct,
            },
        )
