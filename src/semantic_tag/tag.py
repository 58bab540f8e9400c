# SPDX-License-Identifier: MIT
"""Semantic version tags: the Tag value type and its recognizer.

A tag is a SemVer 2.0 version with the mandatory ``v`` prefix used by Go
module versions and most release tags:
- Release: v1.2.3
- Pre-release: v1.2.3-alpha, v1.2.3-rc.1, v0.8.2-0.20190227000051-27936f6d90f9
- Build metadata: v2.0.0+incompatible, v1.0.0-beta+exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .compare import precedes

logger = logging.getLogger(__name__)

# Based on the suggested SemVer regex, with the 'v' prefix made mandatory
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# [0-9] instead of \d: unicode digits are not version digits.
SEMVER_PATTERN = re.compile(
    r"v(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<pre_release>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build_metadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


class InvalidTagError(ValueError):
    """Raised when a string is required to be a semantic tag but is not."""

    def __init__(self, text: Any, message: str = ""):
        self.text = text
        self.message = message or f"Invalid semantic tag: {text}"
        super().__init__(self.message)


class TagGrammarError(RuntimeError):
    """Raised when the tag grammar captured something it should not have.

    This is never caused by bad input; it means SEMVER_PATTERN is broken.
    """


@dataclass(frozen=True, slots=True)
class Tag:
    """A parsed or constructed semantic version tag.

    Equality (``==``) is structural and includes build metadata. Ordering
    (``<``) is SemVer precedence and ignores build metadata, so two tags can
    be neither equal nor ordered relative to each other.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        pre_release: Dot-separated pre-release identifiers, "" for a release
        build_metadata: Dot-separated build identifiers, "" when absent
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = ""

    def __str__(self) -> str:
        return self.to_string()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return precedes(self, other)

    def to_string(self) -> str:
        """Return the canonical ``v<major>.<minor>.<patch>[-pre][+build]`` form."""
        text = f"v{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += f"-{self.pre_release}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text

    def base(self) -> Tag:
        """Return the release tag for this tag's major.minor.patch."""
        return Tag(self.major, self.minor, self.patch)

    def is_base(self) -> bool:
        """Return True if this is a release (no pre-release identifiers)."""
        return self.pre_release == ""

    def equal(self, other: Tag) -> bool:
        """Return True if all five fields match, build metadata included."""
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.pre_release == other.pre_release
            and self.build_metadata == other.build_metadata
        )

    def precedes(self, other: Tag) -> bool:
        """Return True if this tag has lower precedence than ``other``."""
        return precedes(self, other)


EMPTY = Tag(0, 0, 0)


def normalize(suffix: str) -> str:
    """Strip one leading '-' and then one leading '+' from a suffix.

    Callers should pass pre-release and build metadata without their
    separator, but "-rc1" and "+build" are accepted too.
    """
    if suffix.startswith("-"):
        suffix = suffix[1:]
    if suffix.startswith("+"):
        suffix = suffix[1:]
    return suffix


def new(major: int, minor: int, patch: int) -> Tag:
    """Create a release tag, e.g. v1.0.0 or v3.20.100."""
    return new_full(major, minor, patch, "", "")


def new_pre_release(major: int, minor: int, patch: int, pre_release: str) -> Tag:
    """Create a tag with a pre-release suffix, e.g. v1.0.0-alpha or v1.0.0-rc1."""
    return new_full(major, minor, patch, pre_release, "")


def new_full(
    major: int,
    minor: int,
    patch: int,
    pre_release: str,
    build_metadata: str,
) -> Tag:
    """Create a tag with pre-release and build metadata suffixes.

    Examples:
        >>> str(new_full(1, 0, 0, "beta", "exp.sha.5114f85"))
        'v1.0.0-beta+exp.sha.5114f85'
        >>> str(new_full(1, 0, 0, "-rc1", "+20130313144700"))
        'v1.0.0-rc1+20130313144700'
    """
    return Tag(
        major=major,
        minor=minor,
        patch=patch,
        pre_release=normalize(pre_release),
        build_metadata=normalize(build_metadata),
    )


def new_build(major: int, minor: int, patch: int, build_metadata: str) -> Tag:
    """Create a release tag with build metadata, e.g. v2.0.0+incompatible."""
    return new_full(major, minor, patch, "", build_metadata)


def _number(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as e:
        raise TagGrammarError(f"tag grammar captured a non-numeric field: {digits!r}") from e


def parse(text: str) -> tuple[Tag, bool]:
    """Parse a semantic tag.

    Malformed input is expected (callers typically feed arbitrary text
    through here and keep what parses), so this never raises for it.

    Args:
        text: Candidate string, e.g. "v1.2.3-rc.1+build.5"

    Returns:
        ``(tag, True)`` on success, ``(EMPTY, False)`` otherwise

    Examples:
        >>> parse("v2.0.0-pre+incompatible")
        (Tag(major=2, minor=0, patch=0, pre_release='pre', build_metadata='incompatible'), True)
        >>> parse("1.2.3")
        (Tag(major=0, minor=0, patch=0, pre_release='', build_metadata=''), False)
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string tag candidate of type %s", type(text).__name__)
        return EMPTY, False

    match = SEMVER_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected tag candidate %r", text)
        return EMPTY, False

    tag = Tag(
        major=_number(match.group("major")),
        minor=_number(match.group("minor")),
        patch=_number(match.group("patch")),
        pre_release=match.group("pre_release") or "",
        build_metadata=match.group("build_metadata") or "",
    )
    return tag, True


def parse_tag(text: str) -> Optional[Tag]:
    """Parse a semantic tag, returning None if ``text`` is not one."""
    tag, ok = parse(text)
    return tag if ok else None


def must_parse(text: str) -> Tag:
    """Parse a semantic tag.

    Raises:
        InvalidTagError: If ``text`` is not a semantic tag
    """
    tag, ok = parse(text)
    if not ok:
        raise InvalidTagError(text)
    return tag


def is_valid_tag(text: str) -> bool:
    """Check if a string is a semantic tag.

    Examples:
        >>> is_valid_tag("v1.0.0")
        True
        >>> is_valid_tag("1.0.0")
        False
    """
    return parse(text)[1]


def parse_lines(lines: Iterable[str]) -> list[Tag]:
    """Parse the tags out of newline-delimited text, skipping everything else.

    Each line is stripped of surrounding whitespace before parsing.
    """
    tags: list[Tag] = []
    for line in lines:
        tag, ok = parse(line.strip())
        if ok:
            tags.append(tag)
    return tags


def to_string(tag: Tag) -> str:
    """Render ``tag`` in canonical form."""
    return tag.to_string()


def structural_equal(a: Tag, b: Tag) -> bool:
    """Return True if ``a`` and ``b`` match in all fields, build metadata included."""
    return a.equal(b)
