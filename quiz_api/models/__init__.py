"""Domain models package"""

from .domain import GradeSubmission, GradeResponse

__all__ = [
    "GradeSubmission",
    "GradeResponse",
]
