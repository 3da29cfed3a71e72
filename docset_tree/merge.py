"""Logic for merging the comment and code parts of an expanded docset."""

from typing import Any

from docset_tree.collaborators import Collaborators
from docset_tree.docset import Docset
from docset_tree.line_tracker import LineTracker


def merge_docset(
    docset: dict[str, Any], collaborators: Collaborators, tracker: LineTracker
) -> Docset:
    """Augment the comment for its tag name and merge it into a flat Docset."""
    tracker.linenr = docset.get("linenr")
    docset["comment"] = collaborators.augmenter.detect(
        docset["tagname"], docset["comment"], tracker
    )
    record = collaborators.merger.merge(docset)
    record.setdefault("linenr", tracker.linenr)
    record.setdefault("tagname", docset["tagname"])
    return Docset.from_dict(record)
