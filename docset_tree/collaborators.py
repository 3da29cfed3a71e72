"""Interfaces of the external stages that feed the tree assembler.

Parsing source text, associating comments with code, classifying docsets,
parsing tag text and merging comment and code fields are supplied by the
caller; this package only orchestrates them.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from docset_tree.line_tracker import LineTracker


class SyntaxParser(Protocol):
    def parse(self, source: str) -> Any:
        """Return a syntax tree annotated with comment ranges."""


class CommentExtractor(Protocol):
    def extract(self, ast: Any, source: str) -> list[dict[str, Any]]:
        """Return raw docsets: ``{"comment", "code", "linenr"}`` in source order."""


class DocsetClassifier(Protocol):
    def detect_all(
        self, docsets: list[dict[str, Any]], options: dict[str, Any]
    ) -> list[dict[str, Any]]:
        """Refine docset boundaries using the shape of the code."""


class TagParser(Protocol):
    def parse(self, comment: Any) -> Any:
        """Parse comment text into a tag tree."""


class TagTypeDetector(Protocol):
    def detect(self, comment: Any, code: Any) -> str:
        """Return the tag name (class, method, event, ...) of a docset."""


class ClassExpander(Protocol):
    def expand(self, docset: dict[str, Any]) -> list[dict[str, Any]]:
        """Expand a class docset into the class and the members it implies."""


class CommentAugmenter(Protocol):
    def detect(self, tagname: str, comment: Any, tracker: LineTracker) -> Any:
        """Augment a tag tree with the fields implied by its tag name."""


class FieldMerger(Protocol):
    def merge(self, docset: dict[str, Any]) -> dict[str, Any]:
        """Merge comment-derived and code-derived fields into a flat record."""


@dataclass
class Collaborators:
    """The external stages used by ``process_source``."""

    syntax_parser: SyntaxParser
    extractor: CommentExtractor
    classifier: DocsetClassifier
    tag_parser: TagParser
    type_detector: TagTypeDetector
    class_expander: ClassExpander
    augmenter: CommentAugmenter
    merger: FieldMerger
