# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import sort, latest, parse, compare

__all__ = ["sort", "latest", "parse", "compare"]
