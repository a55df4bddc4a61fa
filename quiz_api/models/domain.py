"""
Domain models for the grading service.

Request and response shapes around the grading core.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from quizgrade.answer import AttemptGrade, AttemptSummary
from quizgrade.models import Quiz

from ..core.config import settings


def _longest_string(value: Any) -> int:
    """Length of the longest string nested anywhere in a submitted value"""
    if isinstance(value, str):
        return len(value)
    if isinstance(value, dict):
        return max((_longest_string(v) for v in value.values()), default=0)
    if isinstance(value, (list, tuple)):
        return max((_longest_string(v) for v in value), default=0)
    return 0


class GradeSubmission(BaseModel):
    """A learner's answers together with the quiz they answer"""
    title: str = Field("", description="Quiz title, used for logging and errors")
    questions: List[Any] = Field(..., description="Ordered question definitions")
    answers: Dict[str, Any] = Field(default_factory=dict, description="Answers by question index")
    passing_score: float = Field(0.0, ge=0, le=100, description="Percentage required to pass")
    time_taken: Optional[float] = Field(None, ge=0, description="Seconds spent on the attempt")

    @field_validator("questions")
    @classmethod
    def limit_questions(cls, v: List[Any]) -> List[Any]:
        """Reject oversized quizzes"""
        if len(v) > settings.MAX_QUESTIONS:
            raise ValueError(f"Too many questions (max {settings.MAX_QUESTIONS})")
        return v

    @field_validator("answers")
    @classmethod
    def limit_answer_length(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        """Reject answers too long to grade"""
        if _longest_string(v) > settings.MAX_ANSWER_LENGTH:
            raise ValueError(f"Answer too long (max {settings.MAX_ANSWER_LENGTH} characters)")
        return v

    def to_quiz(self) -> Quiz:
        """Quiz built from the submitted definitions; malformed ones are kept as such"""
        return Quiz(title=self.title, questions=self.questions, passing_score=self.passing_score)


class GradeResponse(BaseModel):
    """Grading outcome returned to the caller for persistence or display"""
    grade: AttemptGrade
    summary: AttemptSummary
