# SPDX-License-Identifier: MIT
"""Functional helpers for comparing and sorting versions.

Ordering: pre-releases < tilde suffixes < release < dash suffixes < plus
suffixes < words < numbers < epochs < maximum marker.
"""

from __future__ import annotations

from typing import Iterable

from .comparator import compare_tokens
from .tokens import Token
from .version import Version, VersionLike, as_version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string, number or Version object)
        version2: Second version (string, number or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionTypeError: If either version cannot be converted to a Version

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1")
        0
        >>> compare_versions("1:1.0", "2.0")
        1
        >>> compare_versions("1.0beta2", "1.0")
        -1
        >>> compare_versions("6.0.^", "6.0.99999")
        1
    """
    v1 = as_version(version1)
    v2 = as_version(version2)
    return compare_tokens(v1.sort_key, v2.sort_key)


def version_key(version: VersionLike) -> tuple[Token, ...]:
    """Return a sort key for a version, suitable for sorting.

    Keys of equal versions are equal, and keys order like
    :func:`compare_versions`.

    Examples:
        >>> sorted(["1.10", "1.0.0", "1.0rc1"], key=version_key)
        ['1.0rc1', '1.0.0', '1.10']
    """
    return as_version(version).sort_key


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Return the given versions as Version objects, in ascending order.

    The sort is stable: versions comparing equal keep their input order.

    Examples:
        >>> [str(v) for v in sort_versions(["1.5.5", "1.10", "1.4.8"])]
        ['1.4.8', '1.5.5', '1.10']
    """
    return sorted((as_version(v) for v in versions), reverse=reverse)
