"""Tests for edit-distance similarity scoring."""

import pytest

from quizgrade.answer.similarity import levenshtein_distance, round_half_up, similarity


class TestLevenshteinDistance:
    """Test the edit distance computation."""

    def test_identical_strings(self):
        assert levenshtein_distance("paris", "paris") == 0

    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_single_substitution(self):
        assert levenshtein_distance("paris", "parus") == 1

    def test_single_insertion(self):
        assert levenshtein_distance("paris", "pariss") == 1

    def test_against_empty(self):
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3

    def test_symmetric(self):
        assert levenshtein_distance("madrid", "madird") == levenshtein_distance("madird", "madrid")


class TestSimilarity:
    """Test the normalized similarity ratio."""

    def test_identical_is_one(self):
        assert similarity("berlin", "berlin") == 1.0

    def test_one_edit_in_five(self):
        assert similarity("paris", "parus") == pytest.approx(0.8)

    def test_one_edit_in_six(self):
        assert similarity("pariss", "paris") == pytest.approx(5 / 6)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0

    def test_one_side_empty(self):
        assert similarity("abc", "") == 0.0

    def test_both_empty_are_identical(self):
        assert similarity("", "") == 1.0

    def test_range(self):
        for a, b in [("a", "ab"), ("lisbon", "london"), ("x", "yyyyyy")]:
            assert 0.0 <= similarity(a, b) <= 1.0


class TestRoundHalfUp:
    """Halves round up, unlike Python's round()."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (0.49, 0),
        (6.4, 6),
        (0.0, 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected
