"""Logic for parsing a raw docset's comment and expanding class docsets."""

from typing import Any

from docset_tree.collaborators import Collaborators
from docset_tree.tag_kind import TagKind


def expand_docset(
    docset: dict[str, Any], collaborators: Collaborators
) -> list[dict[str, Any]]:
    """Parse the comment, detect the tag name and expand class docsets."""
    docset["comment"] = collaborators.tag_parser.parse(docset.get("comment"))
    docset["tagname"] = collaborators.type_detector.detect(
        docset["comment"], docset.get("code")
    )

    if docset["tagname"] == TagKind.CLASS.value:
        return list(collaborators.class_expander.expand(docset))
    return [docset]
