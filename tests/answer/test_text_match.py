"""Tests for tiered free-text matching."""

import pytest

from quizgrade.answer.evaluators.string import match_text, normalize_text


class TestNormalizeText:

    def test_trims_and_lowercases(self):
        assert normalize_text("  Paris ") == "paris"

    def test_case_sensitive_keeps_case(self):
        assert normalize_text(" Paris ", case_sensitive=True) == "Paris"


class TestMatchTextFailsClosed:
    """Blank input or no references always score zero."""

    def test_empty_answer(self):
        assert match_text("", ["Paris"]) == 0.0

    def test_whitespace_answer(self):
        assert match_text("   ", ["Paris"]) == 0.0

    def test_missing_answer(self):
        assert match_text(None, ["Paris"]) == 0.0

    def test_no_references(self):
        assert match_text("Paris", []) == 0.0

    def test_only_blank_references(self):
        assert match_text("Paris", ["", "   "]) == 0.0


class TestMatchTextTiers:
    """Exact > answer contains reference > reference contains answer > fuzzy."""

    def test_exact_after_normalization(self):
        assert match_text("  paris ", ["Paris"]) == 1.0

    def test_answer_contains_reference(self):
        assert match_text("the capital is paris", ["Paris"]) == pytest.approx(0.9)

    def test_reference_contains_answer(self):
        assert match_text("new york", ["New York City"]) == pytest.approx(0.8)

    def test_fuzzy_match_is_discounted(self):
        # distance 1 over 5 characters -> 0.8 similarity -> 0.64
        assert match_text("parus", ["Paris"]) == pytest.approx(0.64)

    def test_extra_letter_counts_as_containment(self):
        # "pariss" contains "paris", so the substring tier applies before fuzzy
        assert match_text("Pariss", ["Paris"]) == pytest.approx(0.9)

    def test_fuzzy_below_threshold_scores_zero(self):
        # 4 edits over 10 characters -> 0.6 similarity, not above 0.7
        assert match_text("abcdefwxyz", ["abcdefghij"]) == 0.0

    def test_unrelated_answer(self):
        assert match_text("london", ["Paris"]) == 0.0

    def test_case_sensitive_blocks_exact(self):
        assert match_text("paris", ["Paris"], case_sensitive=True) == pytest.approx(0.64)
        assert match_text("Paris", ["Paris"], case_sensitive=True) == 1.0


class TestMatchTextMultipleReferences:

    def test_best_reference_wins(self):
        assert match_text("romee", ["Paris", "Rome"]) == pytest.approx(0.9)

    def test_exact_match_on_later_reference(self):
        assert match_text("paris", ["Pariss", "Paris"]) == 1.0

    def test_order_does_not_matter(self):
        references = ["Madrid", "Madrid, Spain", "Madird"]
        assert match_text("madrid spain", references) == match_text("madrid spain", list(reversed(references)))
