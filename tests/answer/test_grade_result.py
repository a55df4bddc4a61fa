"""Tests for GradeResult Pydantic model."""

import pytest
from pydantic import ValidationError

from quizgrade.answer.grade_result import GradeResult


class TestGradeResultBasicInstantiation:
    """Test basic instantiation and field validation."""

    def test_default_instantiation(self):
        result = GradeResult()
        assert result.score == 0.0
        assert result.max_score == 0.0
        assert result.is_correct is False
        assert result.kind == "unknown"
        assert result.details == {}
        assert result.error is None

    def test_instantiation_with_all_fields(self):
        result = GradeResult(
            score=1,
            max_score=2,
            is_correct=False,
            question_index=3,
            kind="multi_select",
            details={"correct_count": 1},
        )
        assert result.score == 1.0
        assert result.max_score == 2.0
        assert result.question_index == 3
        assert result.details == {"correct_count": 1}

    def test_negative_max_score_rejected(self, assert_validation_error):
        assert_validation_error(GradeResult, {"max_score": -1}, expected_field="max_score")

    def test_non_dict_details_rejected(self, assert_validation_error):
        assert_validation_error(GradeResult, {"details": ["x"]}, expected_field="details")

    def test_is_correct_must_be_boolean(self):
        with pytest.raises(ValidationError):
            GradeResult(is_correct="yes")


class TestGradeResultScoreBounds:
    """Score always stays within [0, max_score]."""

    def test_score_above_max_is_clamped(self):
        result = GradeResult(score=3, max_score=2.5)
        assert result.score == 2.5

    def test_negative_score_is_clamped(self):
        result = GradeResult(score=-1, max_score=2)
        assert result.score == 0.0

    def test_score_within_range_untouched(self):
        result = GradeResult(score=1.5, max_score=2)
        assert result.score == 1.5


class TestGradeResultMethods:

    def test_set_error(self):
        result = GradeResult(score=2, max_score=2, is_correct=True)
        result.set_error("Unknown question type: essay")
        assert result.error == "Unknown question type: essay"
        assert result.score == 0.0
        assert result.is_correct is False
        assert result.max_score == 2.0

    def test_is_partial_credit(self):
        assert GradeResult(score=1, max_score=2).is_partial_credit() is True
        assert GradeResult(score=2, max_score=2).is_partial_credit() is False
        assert GradeResult(score=0, max_score=2).is_partial_credit() is False

    def test_ratio(self):
        assert GradeResult(score=1, max_score=4).ratio == 0.25
        assert GradeResult(score=0, max_score=0).ratio == 0.0

    def test_to_dict_converts_sub_results(self):
        sub = GradeResult.full_credit(1, kind="boolean")
        parent = GradeResult(score=1, max_score=1, is_correct=True, kind="composite",
                             details={"sub_results": [sub]})
        data = parent.to_dict()
        assert data["details"]["sub_results"][0]["kind"] == "boolean"
        assert data["details"]["sub_results"][0]["is_correct"] is True


class TestGradeResultFactories:

    def test_full_credit(self):
        result = GradeResult.full_credit(3, kind="single_choice", question_index=1)
        assert result.score == 3.0
        assert result.is_correct is True
        assert result.question_index == 1

    def test_no_credit(self):
        result = GradeResult.no_credit(3, kind="single_choice")
        assert result.score == 0.0
        assert result.max_score == 3.0
        assert result.is_correct is False

    def test_error_result(self):
        result = GradeResult.error_result(2, "bad definition", kind="essay", question_index=4)
        assert result.score == 0.0
        assert result.max_score == 2.0
        assert result.error == "bad definition"
        assert result.question_index == 4
