"""Orchestration of one file: read, parse, expand, merge and assemble."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from docset_tree.assembler import DocTree, assemble_docsets
from docset_tree.collaborators import Collaborators
from docset_tree.docset import Docset
from docset_tree.errors import DocsetError, SourceReadError, SyntaxParseError
from docset_tree.expand import expand_docset
from docset_tree.line_tracker import LineTracker
from docset_tree.merge import merge_docset

logger = logging.getLogger(__name__)

Callback = Callable[[DocsetError | None, DocTree | None], None]


def read_source(path: Path) -> str:
    """Read the source text of a file."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceReadError(f"cannot read {path}: {exc}", str(path)) from exc


def extract_docsets(
    source: str,
    file: str | None,
    options: dict[str, Any],
    collaborators: Collaborators,
) -> list[Docset]:
    """Run the external stages and return the merged docsets of a file."""
    tracker = LineTracker(file=file)
    try:
        ast = collaborators.syntax_parser.parse(source)
        raw = collaborators.extractor.extract(ast, source)
        raw = collaborators.classifier.detect_all(raw, options)
        expanded = [e for d in raw for e in expand_docset(d, collaborators)]
        return [merge_docset(d, collaborators, tracker) for d in expanded]
    except Exception as exc:
        logger.exception("problem parsing %s", file)
        raise SyntaxParseError(f"problem parsing {file}: {exc}", file) from exc


def process_source(
    source: str,
    file: str | None,
    options: dict[str, Any] | None,
    collaborators: Collaborators,
) -> DocTree:
    """Turn the source text of one file into its DocTree.

    Raises SyntaxParseError or NamingError; neither leaves a partial tree.
    """
    options = options or {}
    docsets = extract_docsets(source, file, options, collaborators)
    return assemble_docsets(docsets, file, options)


def deliver(callback: Callback, build: Callable[[], DocTree]) -> None:
    """Invoke ``callback`` once with either the built tree or the error."""
    try:
        tree = build()
    except DocsetError as err:
        callback(err, None)
        return
    callback(None, tree)


def parse_file(
    path: str | Path,
    options: dict[str, Any] | None,
    callback: Callback,
    collaborators: Collaborators,
) -> None:
    """Read and process one source file, reporting through ``callback``."""
    path = Path(path)

    def build() -> DocTree:
        return process_source(read_source(path), str(path), options, collaborators)

    deliver(callback, build)
