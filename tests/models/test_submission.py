"""
Tests for submitted answer coercion.
"""

import pytest

from quizgrade.models import (
    as_choice,
    as_selection,
    as_sub_answers,
    as_text,
    normalize_answers,
    stringify,
)


class TestStringify:

    @pytest.mark.parametrize("value,expected", [
        (1, "1"),
        (1.0, "1"),
        (1.5, "1.5"),
        ("1", "1"),
        (" a ", "a"),
        (True, "true"),
        (False, "false"),
        (None, ""),
    ])
    def test_canonical_form(self, value, expected):
        assert stringify(value) == expected


class TestNormalizeAnswers:

    def test_string_and_int_keys(self):
        assert normalize_answers({"0": "a", 1: "b", " 2 ": "c"}) == {0: "a", 1: "b", 2: "c"}

    def test_non_index_keys_dropped(self):
        assert normalize_answers({"first": "a", "-1": "b", True: "c", "3": "d"}) == {3: "d"}

    def test_list_in_question_order(self):
        assert normalize_answers(["a", None, "c"]) == {0: "a", 1: None, 2: "c"}

    @pytest.mark.parametrize("raw", [None, "0", 5, 2.5])
    def test_not_a_mapping(self, raw):
        assert normalize_answers(raw) == {}


class TestShapes:
    """A value of the wrong shape means not answered."""

    def test_as_choice(self):
        assert as_choice("1") == "1"
        assert as_choice(0) == 0
        assert as_choice(False) is False
        assert as_choice("  ") is None
        assert as_choice(None) is None
        assert as_choice(["1"]) is None
        assert as_choice({"a": 1}) is None

    def test_as_selection(self):
        assert as_selection(["0", 2, 2.0, "0", None, [1], ""]) == ["0", "2"]
        assert as_selection("0") == []
        assert as_selection(None) == []

    def test_as_text(self):
        assert as_text(" Paris ") == " Paris "
        assert as_text(42) == "42"
        assert as_text(["Paris"]) is None
        assert as_text(None) is None

    def test_as_sub_answers(self):
        assert as_sub_answers({"1": True}) == {1: True}
        assert as_sub_answers([True]) == {0: True}
        assert as_sub_answers("x") == {}

