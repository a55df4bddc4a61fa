"""
Submitted answer coercion.

Answers arrive straight from a client request body: strings, numbers, lists or
nested objects, possibly malformed. These helpers reduce them to the shape a
question kind expects. A value of the wrong shape counts as "not answered";
nothing here raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

SCALAR_TYPES = (str, int, float, bool)


def stringify(value: Any) -> str:
    """
    Canonical string form used for answer comparison.

    Booleans render as ``true``/``false`` and integral floats lose their
    fraction, so ``1``, ``1.0`` and ``"1"`` compare equal. Strings are
    stripped. ``None`` renders as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return value.strip()
    return str(value)


def _index_key(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.strip().isdigit():
        return int(key.strip())
    return None


def normalize_answers(raw: Any) -> dict[int, Any]:
    """
    Map question index to submitted value.

    Accepts a mapping keyed by ints or digit strings (JSON object keys) or a
    list in question order. Keys that are not indexes are dropped.
    """
    if isinstance(raw, Mapping):
        items = raw.items()
    elif isinstance(raw, (list, tuple)):
        items = enumerate(raw)
    else:
        return {}

    answers: dict[int, Any] = {}
    for key, value in items:
        index = _index_key(key)
        if index is not None:
            answers[index] = value
    return answers


def as_choice(value: Any) -> Optional[Any]:
    """Single value for single_choice/boolean questions, ``None`` if unanswered."""
    if not isinstance(value, SCALAR_TYPES):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def as_selection(value: Any) -> list[str]:
    """Distinct selected values, as strings, in submission order."""
    if not isinstance(value, (list, tuple)):
        return []
    selected: list[str] = []
    for item in value:
        if not isinstance(item, SCALAR_TYPES):
            continue
        text = stringify(item)
        if text and text not in selected:
            selected.append(text)
    return selected


def as_text(value: Any) -> Optional[str]:
    """Free-text answer as a string, ``None`` if unanswered."""
    if isinstance(value, str):
        return value
    if isinstance(value, SCALAR_TYPES):
        return stringify(value)
    return None


def as_sub_answers(value: Any) -> dict[int, Any]:
    """Sub-question index to answer for composite questions."""
    if isinstance(value, (Mapping, list, tuple)):
        return normalize_answers(value)
    return {}
