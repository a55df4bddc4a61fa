"""
String similarity scoring.

Edit-distance based closeness between two already-normalized strings, used
by the free-text matcher once exact and substring checks have failed.
"""

from __future__ import annotations

import math


def levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the unit-cost edit distance between two strings.

    Uses the full dynamic-programming matrix of size (len(a)+1) x (len(b)+1).
    Answers are short, so the quadratic table is acceptable.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of insertions, deletions and substitutions
    """
    rows = len(a) + 1
    cols = len(b) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitute
                    matrix[i][j - 1],  # insert
                    matrix[i - 1][j],  # delete
                )

    return matrix[rows - 1][cols - 1]


def similarity(a: str, b: str) -> float:
    """
    Similarity ratio ``1 - distance / max(len(a), len(b))``.

    Two empty strings are identical and score 1.0.

    Returns:
        Value in [0, 1]
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))
