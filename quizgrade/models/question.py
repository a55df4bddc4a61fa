"""
Question definitions.

Questions are a tagged union over five kinds. Each variant carries only the
fields its grading rule needs. Definitions come from stored quizzes and may be
stale or malformed, so ``parse_question`` never raises: anything it cannot
validate becomes a ``MalformedQuestion`` that grades as zero with an error.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .submission import stringify


class QuestionKind(str, Enum):
    """Supported question kinds"""
    SINGLE_CHOICE = "single_choice"
    MULTI_SELECT = "multi_select"
    BOOLEAN = "boolean"
    FREE_TEXT = "free_text"
    COMPOSITE = "composite"


# Kind names used by quizzes authored before the current schema
LEGACY_KINDS = {
    "mcq": QuestionKind.SINGLE_CHOICE.value,
    "true_false": QuestionKind.BOOLEAN.value,
    "checkbox": QuestionKind.MULTI_SELECT.value,
    "text_input": QuestionKind.FREE_TEXT.value,
    "paragraph": QuestionKind.COMPOSITE.value,
}

# Deepest composite nesting accepted when parsing a definition (top level is 0)
MAX_NESTING_DEPTH = 16


class BaseQuestion(BaseModel):
    """Fields shared by every question kind"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    kind: str
    prompt: str = Field(
        default="",
        validation_alias=AliasChoices("prompt", "text"),
        description="Display text, not used for grading",
    )
    max_points: float = Field(
        default=1.0,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("max_points", "maxPoints", "points"),
    )
    allow_partial_credit: bool = Field(
        default=False,
        validation_alias=AliasChoices("allow_partial_credit", "allowPartialCredit"),
    )
    options: list[Any] = Field(default_factory=list, description="Display labels for choices")
    explanation: str = ""

    @field_validator("prompt", "explanation", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("options", mode="before")
    @classmethod
    def none_as_no_options(cls, v: Any) -> Any:
        return [] if v is None else v

    def option_text(self, value: Any) -> Optional[str]:
        """Display label of the option addressed by ``value`` (an index), if any."""
        try:
            option = self.options[int(value)]
        except (TypeError, ValueError, IndexError):
            return None
        if isinstance(option, Mapping):
            text = option.get("text")
            return str(text) if text else None
        return str(option)

    def public_payload(self) -> dict[str, Any]:
        """Question payload safe to show to a learner (no answers or explanations)."""
        return self.model_dump(exclude={"correct_reference", "explanation"})


class ChoiceQuestion(BaseQuestion):
    """Question answered with a single value compared by its string form"""

    correct_reference: Any = Field(
        validation_alias=AliasChoices("correct_reference", "correctReference", "correct"),
    )

    @field_validator("correct_reference")
    @classmethod
    def validate_scalar(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("correct_reference is required")
        if isinstance(v, (list, tuple, dict)):
            raise ValueError("correct_reference must be a single value")
        return v


class SingleChoiceQuestion(ChoiceQuestion):
    """One option out of several"""
    kind: Literal["single_choice"] = "single_choice"


class BooleanQuestion(ChoiceQuestion):
    """True/false question"""
    kind: Literal["boolean"] = "boolean"


class MultiSelectQuestion(BaseQuestion):
    """Any subset of the options may be selected"""

    kind: Literal["multi_select"] = "multi_select"
    correct_reference: list[str] = Field(
        validation_alias=AliasChoices("correct_reference", "correctReference", "correct"),
    )

    @field_validator("correct_reference", mode="before")
    @classmethod
    def validate_correct_set(cls, v: Any) -> list[str]:
        """Coerce the correct set to distinct strings; an empty set cannot be graded."""
        if not isinstance(v, (list, tuple)):
            raise ValueError("correct_reference must be a list of option values")
        values: list[str] = []
        for item in v:
            if item is None or isinstance(item, (list, tuple, dict)):
                raise ValueError("correct_reference entries must be single values")
            text = stringify(item)
            if text not in values:
                values.append(text)
        if not values:
            raise ValueError("correct_reference must not be empty")
        return values


class FreeTextQuestion(BaseQuestion):
    """Typed answer matched against one or more acceptable strings"""

    kind: Literal["free_text"] = "free_text"
    correct_reference: list[str] = Field(
        validation_alias=AliasChoices("correct_reference", "correctReference", "correct"),
    )
    case_sensitive: bool = Field(
        default=False,
        validation_alias=AliasChoices("case_sensitive", "caseSensitive"),
    )

    @field_validator("correct_reference", mode="before")
    @classmethod
    def references_as_list(cls, v: Any) -> list[str]:
        """Accept a single string or a list; blank references are dropped."""
        if v is None:
            raise ValueError("correct_reference is required")
        items = v if isinstance(v, (list, tuple)) else [v]
        references = [
            stringify(item)
            for item in items
            if item is not None and not isinstance(item, (list, tuple, dict))
        ]
        references = [ref for ref in references if ref]
        if not references:
            raise ValueError("correct_reference must contain at least one non-blank answer")
        return references


class CompositeQuestion(BaseQuestion):
    """
    Paragraph question made of ordered sub-questions.

    Worth the sum of its sub-questions' points; a ``max_points`` given on the
    composite itself is ignored.
    """

    kind: Literal["composite"] = "composite"
    sub_questions: list["Question"] = Field(
        min_length=1,
        validation_alias=AliasChoices("sub_questions", "subQuestions"),
    )

    @field_validator("sub_questions", mode="before")
    @classmethod
    def parse_sub_questions(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, (list, tuple)):
            return v
        depth = (info.context or {}).get("depth", 0)
        return [parse_question(item, depth=depth + 1) for item in v]

    @model_validator(mode="after")
    def sum_sub_question_points(self) -> CompositeQuestion:
        total = sum(q.max_points for q in self.sub_questions)
        if not math.isfinite(total):
            raise ValueError("total points of sub_questions must be finite")
        self.max_points = total
        return self

    def public_payload(self) -> dict[str, Any]:
        payload = super().public_payload()
        payload["sub_questions"] = [q.public_payload() for q in self.sub_questions]
        return payload


class MalformedQuestion(BaseQuestion):
    """Definition that failed validation; always graded as zero"""

    kind: str = "unknown"
    error: str = "Malformed question definition"


Question = Union[
    SingleChoiceQuestion,
    BooleanQuestion,
    MultiSelectQuestion,
    FreeTextQuestion,
    CompositeQuestion,
    MalformedQuestion,
]

CompositeQuestion.model_rebuild()


QUESTION_TYPES: dict[str, type[BaseQuestion]] = {
    QuestionKind.SINGLE_CHOICE.value: SingleChoiceQuestion,
    QuestionKind.MULTI_SELECT.value: MultiSelectQuestion,
    QuestionKind.BOOLEAN.value: BooleanQuestion,
    QuestionKind.FREE_TEXT.value: FreeTextQuestion,
    QuestionKind.COMPOSITE.value: CompositeQuestion,
}


def normalize_kind(kind: Any) -> Any:
    """Map legacy kind names onto the current ones."""
    if isinstance(kind, str):
        kind = kind.strip().lower()
        return LEGACY_KINDS.get(kind, kind)
    return kind


def _fallback_points(data: Mapping[str, Any], kind: Any, depth: int = 0) -> float:
    """Best-effort point value for a definition that failed validation."""
    if depth > MAX_NESTING_DEPTH:
        return 0.0
    sub_questions = data.get("sub_questions", data.get("subQuestions"))
    if kind == QuestionKind.COMPOSITE.value and isinstance(sub_questions, list):
        total = sum(
            _fallback_points(sub, normalize_kind(sub.get("kind", sub.get("type"))), depth + 1)
            if isinstance(sub, Mapping) else 0.0
            for sub in sub_questions
        )
        return total if math.isfinite(total) else 0.0
    for key in ("max_points", "maxPoints", "points"):
        if key in data:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return 0.0
            if not math.isfinite(value) or value < 0:
                return 0.0
            return float(value)
    return 1.0


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def parse_question(raw: Any, depth: int = 0) -> BaseQuestion:
    """
    Build a question model from an untrusted definition.

    Args:
        raw: Question model instance or mapping (camelCase, snake_case and
            legacy field names are accepted)
        depth: Nesting level of the definition inside composite questions

    Returns:
        A validated question variant, or a MalformedQuestion describing why
        the definition could not be used. Never raises.
    """
    if isinstance(raw, BaseQuestion):
        return raw
    if not isinstance(raw, Mapping):
        return MalformedQuestion(
            error=f"Question definition must be an object, got {type(raw).__name__}",
            max_points=0.0,
        )

    data = dict(raw)
    kind = normalize_kind(data.pop("kind", data.pop("type", None)))
    if depth > MAX_NESTING_DEPTH:
        return MalformedQuestion(
            kind=str(kind),
            error=f"Question nesting deeper than {MAX_NESTING_DEPTH} levels",
            max_points=0.0,
        )

    model = QUESTION_TYPES.get(kind) if isinstance(kind, str) else None
    if model is None:
        return MalformedQuestion(
            kind=str(kind),
            error=f"Unknown question type: {kind}",
            max_points=_fallback_points(data, kind, depth),
        )

    data["kind"] = kind
    try:
        return model.model_validate(data, context={"depth": depth})
    except ValidationError as exc:
        return MalformedQuestion(
            kind=kind,
            error=_describe(exc),
            max_points=_fallback_points(data, kind, depth),
        )


class Quiz(BaseModel):
    """An ordered set of questions; the order is the authoritative answer index"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = ""
    questions: list[Question] = Field(default_factory=list)
    passing_score: float = Field(
        default=0.0,
        ge=0,
        le=100,
        validation_alias=AliasChoices("passing_score", "passingScore"),
        description="Percentage required to pass",
    )

    @field_validator("questions", mode="before")
    @classmethod
    def parse_questions(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        return [parse_question(item) for item in v]

    @property
    def total_points(self) -> float:
        """Points available across all questions"""
        return sum(q.max_points for q in self.questions)

    def for_taking(self) -> list[dict[str, Any]]:
        """Question payloads with correct answers and explanations removed."""
        return [q.public_payload() for q in self.questions]
