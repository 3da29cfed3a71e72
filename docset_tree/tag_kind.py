"""The closed set of documentation entity kinds a docset can describe."""

from dataclasses import dataclass
from enum import Enum


class TagKind(str, Enum):
    """Documentation entity kinds understood by the assembler."""

    CLASS = "class"
    METHOD = "method"
    EVENT = "event"
    PROPERTY = "property"
    ATTRIBUTE = "attribute"
    BINDING = "binding"
    SECTION = "section"


@dataclass(frozen=True)
class UnrecognizedTag:
    """A tag name outside of TagKind, kept for the warning path."""

    raw: str


CALLABLE_KINDS = frozenset({TagKind.METHOD, TagKind.EVENT})


def classify_tag(tagname: str | None) -> TagKind | UnrecognizedTag:
    """Map a raw tag name onto TagKind, or wrap it as unrecognized."""
    try:
        return TagKind(tagname)
    except ValueError:
        return UnrecognizedTag(str(tagname))
