# SPDX-License-Identifier: MIT
"""Token kinds and the character classification table.

Token kinds are ordered so that comparing their ordinals gives the expected
ordering between versions that diverge at a given position::

      1alpha  (PREVERSION)
    < 1~1     (TILDE)
    < 1       (EOV)
    < 1-1     (DASH)
    < 1+1     (PLUS)
    < 1g      (WORD)
    < 1_1     (UNDERSCORE)
    < 1.1     (DOT)
    < 1:1     (EPOCH)
    < ^       (MAX)

COLON, UNDERSCORE and DOT only exist as literal tokens. They separate numbers
and are stripped from the semantic token stream, so ``1.1 == 1_1 == 1u1``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Optional, Union


class TokenKind(IntEnum):
    """Kind of a literal or semantic token, ordered by comparison precedence."""

    PREVERSION = 10
    TILDE = 11
    EOV = 20  # end of version
    DASH = 30
    PLUS = 31
    COLON = 33
    CARET = 34
    WORD = 40
    UNDERSCORE = 50
    DOT = 51
    NUMBER = 52
    EPOCH = 60
    MAX = 99


TokenValue = Optional[Union[int, str]]


class Token(NamedTuple):
    """A ``(kind, value)`` pair.

    NUMBER and EPOCH carry an ``int``, WORD and PREVERSION a lower-cased
    string, structural kinds their raw characters and EOV ``None``.
    """

    kind: TokenKind
    value: TokenValue = None

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.name
        return f"{self.kind.name} {self.value}"


EOV_TOKEN = Token(TokenKind.EOV)

# Consecutive characters of the same kind are grouped into a single token.
# Anything missing from this table is part of a word.
CHARACTER_KINDS: dict[str, TokenKind] = {
    ".": TokenKind.DOT,
    ",": TokenKind.DOT,
    "~": TokenKind.TILDE,
    "+": TokenKind.PLUS,
    "-": TokenKind.DASH,
    ":": TokenKind.COLON,
    "^": TokenKind.CARET,
    "_": TokenKind.UNDERSCORE,
    " ": TokenKind.UNDERSCORE,
    **{digit: TokenKind.NUMBER for digit in "0123456789"},
}


def character_kind(char: str) -> TokenKind:
    """Return the token kind of a single character."""
    return CHARACTER_KINDS.get(char, TokenKind.WORD)
