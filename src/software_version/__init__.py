# SPDX-License-Identifier: MIT
"""Ordering of arbitrary software version strings.

Versions found in package repositories rarely follow a single grammar. This
package compares them heuristically, with the conventions shared by most
package managers: epochs, pre-release markers, separator insensitivity and
trailing maximum markers.

Example:
    >>> from software_version import Version, compare_versions, sort_versions
    >>>
    >>> version = Version("1:2.3.4-beta~rc2")
    >>> version.epoch, version.major, version.minor, version.patch
    (1, 2, 3, 4)
    >>>
    >>> compare_versions("1.0.0", "1")
    0
    >>> [str(v) for v in sort_versions(["1.10", "1.0alpha", "1.0"])]
    ['1.0alpha', '1.0', '1.10']
"""

__version__ = "0.1.0"

from .tokens import (
    Token,
    TokenKind,
)
from .lexer import lex
from .normalizer import (
    normalize,
    tokenize,
    trim_zeros,
)
from .comparator import compare_tokens
from .version import (
    Version,
    VersionLike,
    VersionError,
    VersionTypeError,
    as_version,
    is_version_like,
    software_version,
)
from .compare import (
    compare_versions,
    sort_versions,
    version_key,
)

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "lex",
    "normalize",
    "trim_zeros",
    "tokenize",
    "compare_tokens",
    # Versions
    "Version",
    "VersionLike",
    "VersionError",
    "VersionTypeError",
    "as_version",
    "is_version_like",
    "software_version",
    # Version comparison
    "compare_versions",
    "sort_versions",
    "version_key",
]
