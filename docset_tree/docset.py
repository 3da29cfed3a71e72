"""Data models for merged docsets, the records the tree assembler consumes."""

from dataclasses import dataclass, field
from typing import Any

from docset_tree.as_text import as_text


@dataclass
class Param:
    """A documented call parameter."""

    name: str
    doc: str = ""
    type: str = ""
    optional: bool = False


@dataclass
class ReturnSpec:
    """A documented return value; brackets around the type mark an array."""

    type: str
    description: str = ""


@dataclass
class Docset:
    """A tag-annotated comment merged with the code construct it documents."""

    tagname: str
    name: str
    doc: str | None = None
    linenr: int | None = None
    params: list[Param] | None = None
    returns: ReturnSpec | None = None
    type: str | None = None  # value type for property/attribute/binding
    inherits: list[str] = field(default_factory=list)
    inheritdoc: str | None = None
    see: str | None = None
    author: str | None = None
    version: str | None = None
    since: str | None = None
    private: bool | None = None
    experimental: bool | None = None
    chainable: bool | None = None
    bound: bool | None = None
    allowchild: str | None = None
    define: str | None = None
    cancelable: bool | None = None
    bubbles: bool | None = None
    section: str | None = None
    comment: Any = None
    code: Any = None

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "Docset":
        """Build a Docset from a merged flat record.

        Tag values that the merger wraps (``{"doc": ...}``, ``{"src": ...}``,
        ``{"name": ...}``) are unwrapped to plain strings.
        """
        params = record.get("params")
        ret = record.get("return")
        if ret is None:
            ret = record.get("returns")

        return cls(
            tagname=str(record.get("tagname") or ""),
            name=_name(record.get("name")),
            doc=_text(record.get("doc"), "doc"),
            linenr=record.get("linenr"),
            params=_params(params),
            returns=_return_spec(ret),
            type=_text(record.get("type"), "type"),
            inherits=[str(x) for x in (record.get("inherits") or [])],
            inheritdoc=_unwrap(record.get("inheritdoc"), "src"),
            see=_unwrap(record.get("see"), "name"),
            author=_unwrap(record.get("author"), "doc"),
            version=_unwrap(record.get("version"), "doc"),
            since=_unwrap(record.get("since"), "doc"),
            private=record.get("private"),
            experimental=record.get("experimental"),
            chainable=record.get("chainable"),
            bound=record.get("bound"),
            allowchild=_unwrap(record.get("allowchild"), "doc"),
            define=_unwrap(record.get("define"), "doc"),
            cancelable=record.get("cancelable"),
            bubbles=record.get("bubbles"),
            section=_text(record.get("section"), "section"),
            comment=record.get("comment"),
            code=record.get("code"),
        )


def _text(value: object, field_name: str) -> str | None:
    """Return a scalar field as text; lists and mappings are not text."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        msg = f"'{field_name}' must be text, got {type(value).__name__}"
        raise TypeError(msg)
    return str(value)


def _name(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _unwrap(value: object, key: str) -> str | None:
    """Reduce a wrapped tag value to its text, None when absent or empty."""
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get(key)
        return None if value is None else str(value)
    if isinstance(value, list):
        # @author may be repeated
        parts = [_unwrap(v, key) for v in value]
        joined = ", ".join(p for p in parts if p)
        return joined or None
    return str(value)


def _params(raw: object) -> list[Param] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        msg = f"'params' must be a list, got {type(raw).__name__}"
        raise TypeError(msg)
    return [_param(p) for p in raw]


def _param(raw: Param | dict[str, Any]) -> Param:
    if isinstance(raw, Param):
        return raw
    if not isinstance(raw, dict):
        msg = f"each param must be a mapping, got {type(raw).__name__}"
        raise TypeError(msg)
    return Param(
        name=_name(raw.get("name")),
        doc=as_text(raw.get("doc")),
        type=str(raw.get("type") or ""),
        optional=bool(raw.get("optional", False)),
    )


def _return_spec(raw: ReturnSpec | dict[str, Any] | None) -> ReturnSpec | None:
    if raw is None or isinstance(raw, ReturnSpec):
        return raw
    if not isinstance(raw, dict):
        msg = f"'return' must be a mapping, got {type(raw).__name__}"
        raise TypeError(msg)
    return ReturnSpec(
        type=str(raw.get("type") or ""),
        description=as_text(raw.get("description") or raw.get("doc")),
    )
