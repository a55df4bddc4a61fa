"""quizgrade - Deterministic grading engine for quiz submissions.

Main namespace package containing the grading submodules:
- quizgrade.models: Question definitions and submitted-answer coercion
- quizgrade.answer: Similarity scoring, per-kind evaluators, graders and
  attempt aggregation
"""

__version__ = "0.1.0"

__all__ = []
