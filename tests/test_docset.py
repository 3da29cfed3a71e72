"""Tests for building docsets from merged records."""

import pytest

from docset_tree.docset import Docset, Param, ReturnSpec
from docset_tree.tag_kind import TagKind, UnrecognizedTag, classify_tag


def test_from_dict_unwraps_tag_values() -> None:
    """Verify that wrapped tag values become plain strings."""
    record = {
        "tagname": "method",
        "name": " bar ",
        "doc": "Bars.",
        "linenr": 12,
        "params": [{"name": "x", "doc": "An x.", "type": "Number", "optional": True}],
        "return": {"type": "[String]", "doc": "Parts."},
        "inheritdoc": {"src": "Base.bar"},
        "see": {"name": "Foo.baz"},
        "author": [{"doc": "Ada"}, {"doc": "Grace"}],
        "version": {"doc": "2.0"},
        "since": {"doc": "1.0"},
        "allowchild": {"doc": "Child"},
        "bound": True,
    }
    docset = Docset.from_dict(record)

    assert docset.name == "bar"
    assert docset.linenr == 12  # noqa: PLR2004
    assert docset.params == [Param(name="x", doc="An x.", type="Number", optional=True)]
    assert docset.returns == ReturnSpec(type="[String]", description="Parts.")
    assert docset.inheritdoc == "Base.bar"
    assert docset.see == "Foo.baz"
    assert docset.author == "Ada, Grace"
    assert docset.version == "2.0"
    assert docset.since == "1.0"
    assert docset.allowchild == "Child"
    assert docset.bound is True


def test_from_dict_defaults() -> None:
    """Verify that missing fields stay absent."""
    docset = Docset.from_dict({"tagname": "property", "doc": "Size.", "author": []})

    assert docset.name == ""
    assert docset.params is None
    assert docset.returns is None
    assert docset.author is None
    assert docset.inherits == []


def test_from_dict_coerces_scalar_text() -> None:
    """Verify that scalar descriptions and types are read as text."""
    docset = Docset.from_dict({"tagname": "property", "name": "n", "doc": 42, "type": 1})

    assert docset.doc == "42"
    assert docset.type == "1"


@pytest.mark.parametrize(
    "record",
    [
        {"tagname": "method", "doc": ["a", "b"]},
        {"tagname": "method", "doc": {"text": "a"}},
        {"tagname": "method", "params": "x"},
        {"tagname": "method", "params": ["x"]},
        {"tagname": "method", "return": "String"},
    ],
)
def test_from_dict_rejects_malformed_fields(record: dict) -> None:
    """Verify that fields of the wrong shape raise TypeError."""
    with pytest.raises(TypeError):
        Docset.from_dict(record)


def test_classify_tag() -> None:
    """Verify that tag names map onto the closed set of kinds."""
    assert classify_tag("method") is TagKind.METHOD
    assert classify_tag("section") is TagKind.SECTION
    assert classify_tag("cfg") == UnrecognizedTag("cfg")
    assert classify_tag(None) == UnrecognizedTag("None")
