"""Logic for picking the owning class of a file and naming its members."""

import logging
import re

from docset_tree.docset import Docset
from docset_tree.errors import NamingError
from docset_tree.tag_kind import TagKind

logger = logging.getLogger(__name__)

TODO_RE = re.compile(r"^@todo", re.IGNORECASE)


def select_class_docset(docsets: list[Docset]) -> tuple[Docset | None, list[Docset]]:
    """Split off the first documented class docset; it owns the file's members."""
    for index, docset in enumerate(docsets):
        if docset.tagname == TagKind.CLASS.value and docset.doc:
            return docset, docsets[:index] + docsets[index + 1 :]
    return None, list(docsets)


def is_documented(docset: Docset) -> bool:
    """Check whether a docset carries documentation worth a node."""
    if docset.doc and not TODO_RE.match(docset.doc):
        return True
    return docset.inheritdoc is not None


def filter_documented(docsets: list[Docset]) -> list[Docset]:
    """Drop docsets without a description, or whose description is a @todo."""
    return [d for d in docsets if is_documented(d)]


def resolve_prefix(
    is_event: bool, class_prefix: str | None, global_ns: str | None
) -> tuple[str | None, str]:
    """Return the namespace prefix and join character for a member.

    Events join with ``@``, everything else with ``.``. Without an owning
    class the configured global namespace is used; without one either, the
    member is not prefixed at all.
    """
    prefix = class_prefix or global_ns
    if not prefix:
        return None, ""
    return prefix, "@" if is_event else "."


def resolve_member_name(
    docset: Docset,
    class_prefix: str | None,
    global_ns: str | None,
    file: str | None,
) -> str:
    """Compute the fully-qualified name of a member docset.

    Raises NamingError when the local segment is empty, i.e. the name ends at
    the join character, unless the docset inherits its documentation.
    """
    is_event = docset.tagname == TagKind.EVENT.value
    prefix, join_char = resolve_prefix(is_event, class_prefix, global_ns)
    member_name = docset.name if prefix is None else prefix + join_char + docset.name

    malformed = not docset.name or (bool(join_char) and member_name.endswith(join_char))
    if malformed and docset.inheritdoc is None:
        logger.error(
            "%s: this object doesn't have a proper name (%r, line %s): %r",
            file,
            member_name,
            docset.linenr,
            docset,
        )
        raise NamingError(file, member_name, docset.linenr, docset)

    return member_name
