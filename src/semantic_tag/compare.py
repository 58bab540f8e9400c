# SPDX-License-Identifier: MIT
"""Tag comparison following SemVer 2.0 precedence.

Precedence compares major, minor and patch numerically, then pre-release
identifiers. Build metadata is ignored. For pre-releases sharing a
major.minor.patch:

    alpha < alpha.1 < alpha.beta < beta < beta.2 < beta.11 < rc.1 < (release)
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, NamedTuple, Optional, Union

if TYPE_CHECKING:
    from .tag import Tag

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


class _Identifier(NamedTuple):
    """A pre-release identifier classified as numeric or alphanumeric."""

    numeric: bool
    value: Union[int, str]


def _classify(identifier: str) -> _Identifier:
    if _NUMERIC_IDENTIFIER.fullmatch(identifier):
        return _Identifier(True, int(identifier))
    return _Identifier(False, identifier)


def _cmp(a: Union[int, str], b: Union[int, str]) -> int:
    if a < b:  # type: ignore[operator]
        return -1
    if a > b:  # type: ignore[operator]
        return 1
    return 0


def _cmp_classified(a: _Identifier, b: _Identifier) -> int:
    if a.numeric == b.numeric:
        # Both numeric compare as integers, both alphanumeric in ASCII order
        return _cmp(a.value, b.value)
    # Numeric identifiers always have lower precedence than alphanumeric ones
    return -1 if a.numeric else 1


def cmp_identifier(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> cmp_identifier("10", "2")
        1
        >>> cmp_identifier("alpha", "999999999")
        1
    """
    return _cmp_classified(_classify(a), _classify(b))


def pre_precedes(a: str, b: str) -> bool:
    """Return True if pre-release ``a`` has lower precedence than ``b``.

    An empty string is a release and outranks every pre-release. Otherwise
    dot-separated identifiers are compared left to right until one differs;
    if all of them are equal, the shorter list of identifiers comes first.
    """
    if a == "":
        return False
    if b == "":
        return True

    left = [_classify(part) for part in a.split(".")]
    right = [_classify(part) for part in b.split(".")]

    for x, y in zip(left, right):
        result = _cmp_classified(x, y)
        if result != 0:
            return result < 0

    return len(left) < len(right)


def precedes(a: Tag, b: Tag) -> bool:
    """Return True if tag ``a`` has lower precedence than tag ``b``.

    Build metadata is ignored: https://semver.org/#spec-item-10
    """
    if a.major != b.major:
        return a.major < b.major
    if a.minor != b.minor:
        return a.minor < b.minor
    if a.patch != b.patch:
        return a.patch < b.patch
    return pre_precedes(a.pre_release, b.pre_release)


def compare_tags(a: Tag, b: Tag) -> int:
    """Compare the precedence of two tags.

    Returns:
        -1 if a < b
        0 if a and b have equal precedence (they may still differ in build metadata)
        1 if a > b
    """
    if precedes(a, b):
        return -1
    if precedes(b, a):
        return 1
    return 0


# Sort key ordering tags by precedence, e.g. sorted(tags, key=by_semver)
by_semver = cmp_to_key(compare_tags)


def sort_tags(tags: Iterable[Tag], *, reverse: bool = False) -> list[Tag]:
    """Return the tags sorted by precedence.

    The sort is stable: tags of equal precedence keep their input order, in
    both directions.

    Examples:
        >>> from semantic_tag import must_parse
        >>> [str(t) for t in sort_tags([must_parse("v1.0.0"), must_parse("v1.0.0-rc.1")])]
        ['v1.0.0-rc.1', 'v1.0.0']
    """
    return sorted(tags, key=by_semver, reverse=reverse)


def latest(tags: Iterable[Tag], *, include_pre_releases: bool = True) -> Optional[Tag]:
    """Return the tag with the highest precedence.

    Args:
        tags: Candidate tags
        include_pre_releases: If False, only release tags are considered

    Returns:
        The highest tag (the earliest one on ties), or None if there is none
    """
    best: Optional[Tag] = None
    for tag in tags:
        if not include_pre_releases and not tag.is_base():
            continue
        if best is None or precedes(best, tag):
            best = tag
    return best
