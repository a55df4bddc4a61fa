"""Question and submission models"""

from .question import (
    MAX_NESTING_DEPTH,
    BaseQuestion,
    BooleanQuestion,
    ChoiceQuestion,
    CompositeQuestion,
    FreeTextQuestion,
    MalformedQuestion,
    MultiSelectQuestion,
    Question,
    QuestionKind,
    Quiz,
    SingleChoiceQuestion,
    normalize_kind,
    parse_question,
)
from .submission import (
    as_choice,
    as_selection,
    as_sub_answers,
    as_text,
    normalize_answers,
    stringify,
)

__all__ = [
    "MAX_NESTING_DEPTH",
    "BaseQuestion",
    "BooleanQuestion",
    "ChoiceQuestion",
    "CompositeQuestion",
    "FreeTextQuestion",
    "MalformedQuestion",
    "MultiSelectQuestion",
    "Question",
    "QuestionKind",
    "Quiz",
    "SingleChoiceQuestion",
    "normalize_kind",
    "parse_question",
    "as_choice",
    "as_selection",
    "as_sub_answers",
    "as_text",
    "normalize_answers",
    "stringify",
]
