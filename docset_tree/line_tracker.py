"""Per-file state shared by the merge step and the comment augmenter."""

from dataclasses import dataclass


@dataclass
class LineTracker:
    """Line number of the docset currently being merged.

    One tracker is created per processed file and passed explicitly, so files
    processed concurrently never observe each other's position.
    """

    file: str | None = None
    linenr: int | None = None
