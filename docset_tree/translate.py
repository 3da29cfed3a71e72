"""Logic for building the fields every documentation node shares."""

from docset_tree.docset import Docset
from docset_tree.node import Node
from docset_tree.short_description import short_description
from docset_tree.tag_kind import TagKind


def create_basic_translation(member_name: str, kind: TagKind, docset: Docset) -> Node:
    """Translate the kind-independent fields of a docset into a Node.

    A docset that inherits its documentation records the source reference and
    leaves the description to whatever resolves the inheritance later.
    Optional fields are copied only when the docset carries them.
    """
    node = Node(id=member_name, type=kind)

    if docset.inheritdoc is not None:
        node.inheritdoc = docset.inheritdoc
    else:
        node.description = docset.doc or ""
        node.short_description = short_description(node.description)

    node.line = docset.linenr

    if docset.private is not None:
        node.private = docset.private
    if docset.experimental is not None:
        node.experimental = docset.experimental
    if docset.chainable is not None:
        node.chainable = docset.chainable
    if docset.see is not None:
        node.related_to = docset.see
    if docset.author:
        node.author = docset.author
    if docset.version is not None:
        node.version = docset.version
    if docset.since is not None:
        node.since = docset.since
    if docset.section is not None:
        node.section = docset.section

    return node
