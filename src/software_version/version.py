# SPDX-License-Identifier: MIT
"""Version objects wrapping arbitrary version strings.

Any string is a valid version: it is tokenized on first use and compared
token by token, so ``Version("1:2.3.4-beta~rc2")`` can be ordered against
``Version("2.3.4")`` without a strict format.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .comparator import compare_tokens
from .normalizer import tokenize
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_IMPLICIT_EPOCH = Token(TokenKind.EPOCH, 0)


class VersionError(Exception):
    """Base class for errors raised by software_version."""


class VersionTypeError(VersionError, TypeError):
    """Raised when a value cannot be converted to a Version."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or (
            f"Cannot convert {type(value).__name__} to a version: {value!r}"
        )
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A software version, ordered with package manager conventions.

    Attributes:
        raw: The original value. ``None`` stands for the empty version.

    Equal versions hash alike, but a Version does not share its hash with an
    equal plain value: ``Version("1") == "1"`` while ``{Version("1"), "1"}``
    has two elements. Convert values before mixing them as set members or
    dict keys.

    Examples:
        >>> Version("1.0.0") == Version("1")
        True
        >>> Version("1:1") > "2"
        True
        >>> Version("1.0alpha") < "1.0"
        True
        >>> sorted(map(Version, ["1.10", "1.4.8", "1.0.0"]))
        [Version(raw='1.0.0'), Version(raw='1.4.8'), Version(raw='1.10')]
    """

    raw: Any = None
    _tokens: Optional[tuple[Token, ...]] = field(default=None, init=False, repr=False)
    _parts: Optional[tuple[int, ...]] = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        """Return the original version string, untouched."""
        if self.raw is None:
            return ""
        return str(self.raw)

    def to_json(self) -> str:
        """Return the JSON representation of the version: its string."""
        return str(self)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Semantic tokens, computed once and cached."""
        tokens = self._tokens
        if tokens is None:
            tokens = tuple(tokenize(str(self)))
            logger.debug("Tokenized %r as %s", str(self), " ".join(map(str, tokens)))
            # Recomputing concurrently yields the same tuple, no lock needed.
            object.__setattr__(self, "_tokens", tokens)
        return tokens

    @property
    def sort_key(self) -> tuple[Token, ...]:
        """Tokens with the implicit zero epoch made explicit."""
        tokens = self.tokens
        if tokens[0].kind == TokenKind.EPOCH:
            return tokens
        return (_IMPLICIT_EPOCH,) + tokens

    @property
    def epoch(self) -> int:
        """Explicit epoch (the ``N`` of ``N:...``), or 0."""
        first = self.tokens[0]
        if first.kind == TokenKind.EPOCH:
            return first.value
        return 0

    @property
    def parts(self) -> tuple[int, ...]:
        """First run of numbers in the version, padded to three with zeros.

        The epoch is not part of it: ``1:2.3`` gives ``(2, 3, 0)``.
        """
        parts = self._parts
        if parts is None:
            numbers: list[int] = []
            for token in self.tokens:
                if token.kind == TokenKind.NUMBER:
                    numbers.append(token.value)
                elif numbers:
                    break
            numbers.extend([0] * (3 - len(numbers)))
            parts = tuple(numbers)
            object.__setattr__(self, "_parts", parts)
        return parts

    @property
    def major(self) -> int:
        return self.parts[0]

    @property
    def minor(self) -> int:
        return self.parts[1]

    @property
    def patch(self) -> int:
        return self.parts[2]

    def compare(self, other: VersionLike) -> int:
        """Compare with another version-like value.

        Returns:
            -1, 0 or 1 as self is lower, equal or greater than other

        Raises:
            VersionTypeError: If other cannot be converted to a Version
        """
        return compare_tokens(self.sort_key, as_version(other).sort_key)

    def __eq__(self, other: object) -> bool:
        if not is_version_like(other):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not is_version_like(other):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: VersionLike) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: VersionLike) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: VersionLike) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: VersionLike) -> bool:
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self.sort_key)


VersionLike = Union[Version, str, int, float, None]


def is_version_like(value: Any) -> bool:
    """Return True if value can be converted to a Version."""
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (Version, str, int, float))


def as_version(value: VersionLike) -> Version:
    """Convert the argument to a Version, unless it already is one.

    Args:
        value: A Version, a version string, a number, or None for the
            empty version

    Returns:
        value itself if it is a Version, otherwise a new Version

    Raises:
        VersionTypeError: If value is of any other type

    Examples:
        >>> as_version("1.0")
        Version(raw='1.0')
        >>> v = Version("2.0")
        >>> as_version(v) is v
        True
    """
    if isinstance(value, Version):
        return value
    if not is_version_like(value):
        raise VersionTypeError(value)
    return Version(value)


# Short alias, reads as a conversion: software_version("1.0") < "1.1"
software_version = as_version
