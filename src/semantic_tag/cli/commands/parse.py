# SPDX-License-Identifier: MIT
"""Show the fields of a semantic tag."""

from __future__ import annotations

import click

from semantic_tag import InvalidTagError, must_parse

from ..main import echo_error, echo_info


@click.command()
@click.argument("text")
def parse(text: str) -> None:
    """Parse TEXT and print its fields.

    \b
    Examples:
        semtag parse v2.0.0-pre+incompatible
    """
    try:
        tag = must_parse(text)
    except InvalidTagError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_info(f"major: {tag.major}")
    echo_info(f"minor: {tag.minor}")
    echo_info(f"patch: {tag.patch}")
    echo_info(f"pre_release: {tag.pre_release}")
    echo_info(f"build_metadata: {tag.build_metadata}")
