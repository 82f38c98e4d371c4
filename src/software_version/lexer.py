# SPDX-License-Identifier: MIT
"""Cut a version string into literal tokens.

No interpretation happens here: ``1:2.3beta`` becomes
``NUMBER COLON NUMBER DOT NUMBER WORD EOV``.
"""

from __future__ import annotations

from itertools import groupby

from .tokens import EOV_TOKEN, Token, TokenKind, character_kind


def _make_token(kind: TokenKind, chunk: str) -> Token:
    if kind == TokenKind.NUMBER:
        return Token(kind, int(chunk))
    if kind == TokenKind.WORD:
        return Token(kind, chunk.lower())
    return Token(kind, chunk)


def lex(text: str) -> list[Token]:
    """Split ``text`` into literal tokens terminated by an EOV token.

    Examples:
        >>> [str(t) for t in lex("1.0rc")]
        ['NUMBER 1', 'DOT .', 'NUMBER 0', 'WORD rc', 'EOV']
        >>> lex("")
        [Token(kind=<TokenKind.EOV: 20>, value=None)]
    """
    tokens = [
        _make_token(kind, "".join(chars))
        for kind, chars in groupby(text, key=character_kind)
    ]
    tokens.append(EOV_TOKEN)
    return tokens
