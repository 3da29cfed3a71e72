"""Data model for documentation nodes, the units of the result map."""

from dataclasses import dataclass, field
from typing import Any

from docset_tree.signature import Signature
from docset_tree.tag_kind import TagKind

# Emitted only when set; None means the docset did not carry the field.
OPTIONAL_FIELDS = (
    "private",
    "experimental",
    "chainable",
    "related_to",
    "author",
    "version",
    "since",
    "bound",
    "inheritdoc",
    "subclasses",
    "inherits",
    "allowchild",
    "define",
    "cancelable",
    "bubbles",
    "section",
)


@dataclass
class Node:
    """A documented class, member or section."""

    id: str
    type: TagKind
    description: str | None = None
    short_description: str | None = None
    line: int | None = None
    file: str | None = None
    aliases: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    signatures: list[Signature] = field(default_factory=list)
    private: bool | None = None
    experimental: bool | None = None
    chainable: bool | None = None
    related_to: str | None = None
    author: str | None = None
    version: str | None = None
    since: str | None = None
    bound: bool | str | None = None  # flag from the docset, then the twin's id
    inheritdoc: str | None = None
    subclasses: list[str] | None = None
    inherits: list[str] | None = None
    allowchild: str | None = None
    define: str | None = None
    cancelable: bool | None = None
    bubbles: bool | None = None
    section: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation consumed by renderers."""
        out: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
        }
        if self.description is not None:
            out["description"] = self.description
            out["short_description"] = self.short_description
        out["line"] = self.line
        out["file"] = self.file
        out["aliases"] = list(self.aliases)
        out["children"] = list(self.children)
        out["signatures"] = [s.to_dict() for s in self.signatures]
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = list(value) if isinstance(value, list) else value
        return out
