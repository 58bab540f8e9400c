# SPDX-License-Identifier: MIT
"""Semantic version tag parsing and ordering.

This package parses ``v``-prefixed SemVer 2.0 tags and orders them by
SemVer precedence, so release tags can be sorted or the latest one picked.

Example:
    >>> from semantic_tag import parse, sort_tags, latest
    >>>
    >>> tag, ok = parse("v1.2.3-alpha.1+build.456")
    >>> ok, tag.major, tag.pre_release
    (True, 1, 'alpha.1')
    >>>
    >>> parse("1.2.3")[1]
    False
    >>>
    >>> tags = [parse(s)[0] for s in ["v1.0.0", "v1.0.0-rc.1", "v0.9.0"]]
    >>> [str(t) for t in sort_tags(tags)]
    ['v0.9.0', 'v1.0.0-rc.1', 'v1.0.0']
    >>> str(latest(tags))
    'v1.0.0'
"""

__version__ = "0.1.0"

from .tag import (
    Tag,
    EMPTY,
    SEMVER_PATTERN,
    InvalidTagError,
    TagGrammarError,
    parse,
    parse_tag,
    must_parse,
    is_valid_tag,
    parse_lines,
    new,
    new_pre_release,
    new_full,
    new_build,
    normalize,
    to_string,
    structural_equal,
)
from .compare import (
    precedes,
    pre_precedes,
    cmp_identifier,
    compare_tags,
    by_semver,
    sort_tags,
    latest,
)

__all__ = [
    # Tag model and parsing
    "Tag",
    "EMPTY",
    "SEMVER_PATTERN",
    "InvalidTagError",
    "TagGrammarError",
    "parse",
    "parse_tag",
    "must_parse",
    "is_valid_tag",
    "parse_lines",
    # Construction and rendering
    "new",
    "new_pre_release",
    "new_full",
    "new_build",
    "normalize",
    "to_string",
    "structural_equal",
    # Precedence
    "precedes",
    "pre_precedes",
    "cmp_identifier",
    "compare_tags",
    "by_semver",
    "sort_tags",
    "latest",
]
