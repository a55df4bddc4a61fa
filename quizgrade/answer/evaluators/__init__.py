"""
Kind-specific question evaluators.

Each module implements an evaluator for one or more question kinds.
"""

from .choice import ChoiceEvaluator
from .composite import CompositeEvaluator
from .multi_select import MultiSelectEvaluator
from .string import FreeTextEvaluator, match_text, normalize_text

__all__ = [
    "ChoiceEvaluator",
    "MultiSelectEvaluator",
    "FreeTextEvaluator",
    "CompositeEvaluator",
    "match_text",
    "normalize_text",
]
