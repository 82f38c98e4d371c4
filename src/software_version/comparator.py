# SPDX-License-Identifier: MIT
"""Lexicographic comparison of semantic token sequences."""

from __future__ import annotations

from typing import Sequence

from .tokens import Token


def compare_tokens(left: Sequence[Token], right: Sequence[Token]) -> int:
    """Compare two semantic token sequences.

    Tokens are compared position by position, kind first and value second.
    Only positions present in both sequences are compared: when one sequence
    is a prefix of the other, they are equal. Sequences produced by
    :func:`~software_version.normalizer.tokenize` always end with a single
    EOV token, so this only matters for hand-built sequences.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    for left_token, right_token in zip(left, right):
        if left_token.kind != right_token.kind:
            return -1 if left_token.kind < right_token.kind else 1
        # Values of the same kind share a type, EOV values are both None.
        if left_token.value != right_token.value:
            return -1 if left_token.value < right_token.value else 1
    return 0
