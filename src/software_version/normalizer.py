# SPDX-License-Identifier: MIT
"""Turn literal tokens into semantic tokens.

Separators are dropped, epochs, pre-release and maximum markers are
recognised, filler words are removed and useless zeros are trimmed so that
``1.0.0 == 1`` while ``1.0.r1`` and ``1r1`` stay distinct.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .lexer import lex
from .tokens import Token, TokenKind

# Dots, underscores (el6_7) and colons bear no semantic value once epochs
# have been recognised.
_SEPARATORS = frozenset({TokenKind.DOT, TokenKind.UNDERSCORE, TokenKind.COLON})

# Fancy ways of writing a dot, but only when a number follows: 1u1 = 1.1
# while 1a, 1b, 1c are successive versions.
_NUMBER_SEPARATOR_WORDS = frozenset({"r", "u", "p", "v"})

_FILLER_WORDS = frozenset({"rev", "revision", "update", "patch"})

# 52.0a2 means 52.0alpha2, but 52b is the version before 52c.
_ABBREVIATED_PREVERSIONS = frozenset({"a", "b"})

_PREVERSIONS = frozenset({"alpha", "beta", "rc"})


def _normalize_word(current: Token, ahead_kind: Optional[TokenKind]) -> Optional[Token]:
    word = current.value
    if word in _NUMBER_SEPARATOR_WORDS:
        return None if ahead_kind == TokenKind.NUMBER else current
    if word in _FILLER_WORDS:
        return None
    if word in _ABBREVIATED_PREVERSIONS:
        if ahead_kind == TokenKind.NUMBER:
            return Token(TokenKind.PREVERSION, word)
        return current
    if word in _PREVERSIONS:
        return Token(TokenKind.PREVERSION, word)
    return current


def _normalize_token(current: Token, ahead_kind: Optional[TokenKind]) -> Optional[Token]:
    """Return the semantic token for ``current``, or None to drop it."""
    kind = current.kind
    if kind == TokenKind.NUMBER:
        # 1:1 > 2, as most Linux distributions expect.
        if ahead_kind == TokenKind.COLON:
            return Token(TokenKind.EPOCH, current.value)
        return current
    if kind in _SEPARATORS:
        return None
    if kind == TokenKind.CARET:
        # A trailing caret is the highest version possible: 6.0.^ > 6.0.999999.
        # Anywhere else it is a literal, as in 17^2.
        if ahead_kind == TokenKind.EOV:
            return Token(TokenKind.MAX, current.value)
        return current
    if kind == TokenKind.WORD:
        return _normalize_word(current, ahead_kind)
    return current


def normalize(literal_tokens: list[Token]) -> list[Token]:
    """Rewrite literal tokens into zero-trimmed semantic tokens.

    Args:
        literal_tokens: Output of :func:`lex`, terminated by an EOV token

    Returns:
        The semantic token list, still terminated by the EOV token
    """
    lookahead = [token.kind for token in literal_tokens[1:]] + [None]
    semantic_tokens = []
    for current, ahead_kind in zip(literal_tokens, lookahead):
        token = _normalize_token(current, ahead_kind)
        if token is not None:
            semantic_tokens.append(token)
    return trim_zeros(semantic_tokens)


def trim_zeros(tokens: Iterable[Token]) -> list[Token]:
    """Drop runs of zeros that are not followed by another number.

    MAX counts as a non-zero number here, so ``6.^ != 6.0.^`` and
    ``6.0.^ < 6.1``.

    Examples:
        >>> [str(t) for t in trim_zeros(tokenize("1.0.0"))]
        ['NUMBER 1', 'EOV']
        >>> [str(t) for t in trim_zeros(tokenize("1.0.1"))]
        ['NUMBER 1', 'NUMBER 0', 'NUMBER 1', 'EOV']
    """
    trimmed: list[Token] = []
    held: list[Token] = []
    for token in tokens:
        if token.kind in (TokenKind.NUMBER, TokenKind.MAX):
            if token.value == 0:
                held.append(token)
                continue
            trimmed.extend(held)
        held.clear()
        trimmed.append(token)
    return trimmed


def tokenize(text: str) -> list[Token]:
    """Return the semantic tokens of a version string.

    Examples:
        >>> [str(t) for t in tokenize("1:2.3")]
        ['EPOCH 1', 'NUMBER 2', 'NUMBER 3', 'EOV']
        >>> [str(t) for t in tokenize("1.0.0beta")]
        ['NUMBER 1', 'PREVERSION beta', 'EOV']
    """
    return normalize(lex(text))
