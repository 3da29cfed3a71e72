"""Logic for the pass that stores assembled nodes under their storage keys."""

import copy
import logging
import re

from docset_tree.node import Node
from docset_tree.tag_kind import TagKind

logger = logging.getLogger(__name__)

# Element.foo -> Element#foo
OWNER_MEMBER_RE = re.compile(r"(.+)\.(.+)$")


def storage_key(node: Node) -> str:
    """Key of a non-section node; the section part is filled in by a later pass."""
    return (node.section or "") + "." + node.id


def instance_id(node_id: str) -> str | None:
    """Rewrite ``Owner.name`` into ``Owner#name``; None when there is no owner."""
    if not OWNER_MEMBER_RE.match(node_id):
        return None
    return OWNER_MEMBER_RE.sub(r"\1#\2", node_id)


def distribute_nodes(
    nodes: list[Node], file: str | None, warnings: list[str]
) -> tuple[dict[str, Node], dict[str, Node]]:
    """Stamp hierarchy helpers on every node and route it to its registry.

    Returns ``(nodes_by_key, sections_by_id)``. Bound methods produce two
    nodes with the same description, e.g. ``Element.foo`` and
    ``Element#foo``, each linking to the other through ``bound``.
    """
    stored: dict[str, Node] = {}
    sections: dict[str, Node] = {}

    for node in nodes:
        node.aliases = []
        node.children = []
        node.file = file

        if node.type is TagKind.CLASS:
            node.subclasses = []

        if node.type is TagKind.SECTION:
            sections[node.id] = node
            continue

        stored[storage_key(node)] = node

        if node.type is TagKind.METHOD and node.bound is True:
            clone_id = instance_id(node.id)
            if clone_id is None:
                msg = f"bound method {node.id} in {file} has no owner to bind to"
                logger.warning(msg)
                warnings.append(msg)
                node.bound = None
                continue

            clone = copy.deepcopy(node)
            clone.id = clone_id
            node.bound = clone.id
            clone.bound = node.id
            stored[storage_key(clone)] = clone

    return stored, sections
