"""Logic for loading merged docsets from YAML docset files.

A docset file holds the output of the external parsing stages for one
source file::

    source: lib/foo.js
    docsets:
      - tagname: class
        name: Foo
        doc: A foo.
"""

from pathlib import Path
from typing import Any

import yaml

from docset_tree.assembler import DocTree, assemble_docsets
from docset_tree.docset import Docset
from docset_tree.errors import SyntaxParseError
from docset_tree.pipeline import Callback, deliver, read_source


def load_docset_document(path: Path) -> dict[str, Any]:
    """Load and parse a docset YAML file."""
    try:
        doc = yaml.safe_load(read_source(path))
    except yaml.YAMLError as exc:
        raise SyntaxParseError(f"problem parsing {path}: {exc}", str(path)) from exc
    if doc is not None and not isinstance(doc, dict):
        msg = f"problem parsing {path}: expected a mapping at the top level"
        raise SyntaxParseError(msg, str(path))
    return doc or {}


def docsets_of(doc: dict[str, Any], path: Path) -> list[Docset]:
    """Return the docsets of a loaded document, in file order.

    Raises SyntaxParseError when the list or one of its records is malformed.
    """
    records = doc.get("docsets") or []
    if not isinstance(records, list):
        msg = f"problem parsing {path}: 'docsets' must be a list"
        raise SyntaxParseError(msg, str(path))

    docsets = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            msg = f"problem parsing {path}: docset #{index} is not a mapping"
            raise SyntaxParseError(msg, str(path))
        try:
            docsets.append(Docset.from_dict(record))
        except (TypeError, ValueError) as exc:
            msg = f"problem parsing {path}: docset #{index}: {exc}"
            raise SyntaxParseError(msg, str(path)) from exc
    return docsets


def load_docsets(path: Path) -> list[Docset]:
    """Load the merged docsets of a docset file."""
    return docsets_of(load_docset_document(path), path)


def parse_docset_file(
    path: str | Path, options: dict[str, Any] | None, callback: Callback
) -> None:
    """Assemble a docset file, reporting through ``callback``.

    Nodes are attributed to the ``source`` the file declares, falling back to
    the docset file itself.
    """
    path = Path(path)

    def build() -> DocTree:
        doc = load_docset_document(path)
        source = str(doc.get("source") or path)
        return assemble_docsets(docsets_of(doc, path), source, options)

    deliver(callback, build)
