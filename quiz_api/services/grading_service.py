"""
Grading service for quiz attempts.

Handles answer submission and wraps the grading core.
"""

import traceback

from quizgrade.answer import LoggingObserver, QuestionGrader, grade_attempt

from ..models.domain import GradeSubmission, GradeResponse
from ..core.config import Settings, settings as default_settings
from ..core.errors import GradingError
from ..core.logging import get_context_logger, get_logger

logger = get_logger(__name__)


class GradingService:
    """
    Service for attempt grading operations.

    Grades a submission against the quiz it answers and summarizes the
    outcome. Persisting the result is left to the caller.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

        logger.info(
            "GradingService initialized",
            extra_data={"max_composite_depth": self.settings.MAX_COMPOSITE_DEPTH}
        )

    def grade_submission(self, submission: GradeSubmission) -> GradeResponse:
        """
        Grade a learner's submission.

        Args:
            submission: Quiz definition and raw answers

        Returns:
            GradeResponse with the attempt grade and summary

        Raises:
            GradingError: If the attempt could not be graded at all
        """
        logger.info(
            "Grading attempt",
            extra_data={
                "quiz": submission.title,
                "num_questions": len(submission.questions),
                "num_answers": len(submission.answers),
            }
        )

        observer = LoggingObserver(get_context_logger("quizgrade", quiz=submission.title))
        grader = QuestionGrader(max_depth=self.settings.MAX_COMPOSITE_DEPTH, observer=observer)

        try:
            quiz = submission.to_quiz()
            grade = grade_attempt(quiz, submission.answers, grader=grader)
            summary = grade.summarize(
                passing_score=quiz.passing_score,
                time_taken=submission.time_taken,
            )
        except Exception as e:
            logger.error(
                "Failed to grade attempt",
                extra_data={
                    "quiz": submission.title,
                    "error": str(e),
                    "traceback": traceback.format_exc(),
                }
            )
            raise GradingError(submission.title, str(e))

        logger.info(
            "Grading completed",
            extra_data={
                "quiz": submission.title,
                "total_score": grade.total_score,
                "total_possible": grade.total_possible,
                "percentage": grade.percentage,
                "errors": len(grade.errors),
            }
        )

        return GradeResponse(grade=grade, summary=summary)


# Factory function
def get_grading_service() -> GradingService:
    """Create grading service instance"""
    return GradingService()
