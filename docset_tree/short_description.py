"""Utility for deriving the short description of a doc comment."""

import re

FIRST_BLANK_LINE_RE = re.compile(r"\n\n[\s\S]*$")


def short_description(description: str) -> str:
    """Return the first paragraph, i.e. the text up to the first blank line."""
    return FIRST_BLANK_LINE_RE.sub("\n", description)
