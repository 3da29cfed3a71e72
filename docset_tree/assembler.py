"""Assembly of merged docsets into the named documentation tree of one file."""

import logging
from dataclasses import dataclass, field
from typing import Any

from docset_tree.docset import Docset
from docset_tree.node import Node
from docset_tree.post_process import distribute_nodes
from docset_tree.prefix import (
    filter_documented,
    resolve_member_name,
    select_class_docset,
)
from docset_tree.signature import build_call_signature, build_value_signature
from docset_tree.tag_kind import (
    CALLABLE_KINDS,
    TagKind,
    UnrecognizedTag,
    classify_tag,
)
from docset_tree.translate import create_basic_translation

logger = logging.getLogger(__name__)


@dataclass
class DocTree:
    """The documentation nodes of one file."""

    file: str | None
    nodes: dict[str, Node] = field(default_factory=dict)  # "<section>.<id>" -> node
    sections: dict[str, Node] = field(default_factory=dict)  # bare id -> node
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation of the whole file."""
        return {
            "file": self.file,
            "nodes": {key: node.to_dict() for key, node in self.nodes.items()},
            "sections": {key: node.to_dict() for key, node in self.sections.items()},
        }


def build_class_node(docset: Docset) -> Node:
    """Build the node of the owning class."""
    node = create_basic_translation(docset.name, TagKind.CLASS, docset)
    if docset.inherits:
        node.inherits = list(docset.inherits)
    if docset.allowchild is not None:
        node.allowchild = docset.allowchild
    if docset.define is not None:
        node.define = docset.define
    return node


def build_callable_node(
    member_name: str, kind: TagKind, docset: Docset, warnings: list[str]
) -> Node:
    """Build a method or event node with its single call signature."""
    node = create_basic_translation(member_name, kind, docset)
    node.signatures = [
        build_call_signature(docset.params, docset.returns, member_name, warnings)
    ]
    if kind is TagKind.METHOD and docset.bound is not None:
        node.bound = docset.bound
    if kind is TagKind.EVENT:
        if docset.cancelable is not None:
            node.cancelable = docset.cancelable
        if docset.bubbles is not None:
            node.bubbles = docset.bubbles
    return node


def build_value_node(member_name: str, kind: TagKind, docset: Docset) -> Node:
    """Build a property, attribute or binding node; these are never called."""
    node = create_basic_translation(member_name, kind, docset)
    node.signatures = [build_value_signature(docset.type)]
    return node


def _warn(warnings: list[str], msg: str) -> None:
    logger.warning(msg)
    warnings.append(msg)


def assemble_docsets(
    docsets: list[Docset],
    file: str | None,
    options: dict[str, Any] | None = None,
) -> DocTree:
    """Fold the merged docsets of one file into a DocTree.

    The first documented class docset becomes the owning class and prefixes
    every member name. Raises NamingError when a member name is malformed.
    """
    options = options or {}
    global_ns = options.get("global_ns")
    warnings: list[str] = []
    built: list[Node] = []

    class_docset, remaining = select_class_docset(docsets)
    class_prefix: str | None = None
    if class_docset is not None:
        class_prefix = resolve_member_name(class_docset, None, None, file)
        built.append(build_class_node(class_docset))

    for docset in filter_documented(remaining):
        kind = classify_tag(docset.tagname)

        if isinstance(kind, UnrecognizedTag):
            _warn(
                warnings,
                f"I don't know what {kind.raw!r} is supposed to do in {file}"
                f" (line {docset.linenr})",
            )
            continue

        if kind is TagKind.CLASS:
            _warn(
                warnings,
                f"{file} already documents class {class_prefix}; "
                f"ignoring class {docset.name!r} (line {docset.linenr})",
            )
            continue

        if kind is TagKind.SECTION:
            section_name = resolve_member_name(docset, None, None, file)
            built.append(create_basic_translation(section_name, kind, docset))
            continue

        member_name = resolve_member_name(docset, class_prefix, global_ns, file)
        if kind in CALLABLE_KINDS:
            built.append(build_callable_node(member_name, kind, docset, warnings))
        else:
            built.append(build_value_node(member_name, kind, docset))

    nodes, sections = distribute_nodes(built, file, warnings)
    return DocTree(file=file, nodes=nodes, sections=sections, warnings=warnings)
