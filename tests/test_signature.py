"""Tests for argument type lists, return types and signatures."""

import logging

import pytest

from docset_tree.docset import Param, ReturnSpec
from docset_tree.signature import (
    build_call_signature,
    build_value_signature,
    parse_return,
)
from docset_tree.type_list import parse_type_list


def test_parse_type_list_pipe() -> None:
    """Verify that pipe-separated types are split and trimmed."""
    assert parse_type_list("string|number", "Foo.bar") == ["string", "number"]
    assert parse_type_list("string | Array", "Foo.bar") == ["string", "Array"]


def test_parse_type_list_single() -> None:
    """Verify that a single type yields one entry."""
    assert parse_type_list("Object", "Foo.bar") == ["Object"]


def test_parse_type_list_comma_warns(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that the legacy comma spelling is kept whole and warned about."""
    warnings: list[str] = []
    with caplog.at_level(logging.WARNING):
        types = parse_type_list("string,number", "Foo.bar", warnings)

    assert types == ["string,number"]
    assert len(warnings) == 1
    assert "Foo.bar" in warnings[0]
    assert "use '|' instead" in caplog.text


def test_parse_return_array() -> None:
    """Verify that bracketed return types are arrays."""
    ret = parse_return(ReturnSpec(type="[string]", description="Names."))
    assert ret.type == "string"
    assert ret.is_array is True
    assert ret.description == "Names."


def test_parse_return_plain() -> None:
    """Verify that plain return types are not arrays."""
    ret = parse_return(ReturnSpec(type="Boolean"))
    assert ret.type == "Boolean"
    assert ret.is_array is False


def test_build_call_signature() -> None:
    """Verify that one signature is built from params and return."""
    params = [
        Param(name="path", doc="Where.", type="String"),
        Param(name="cb", doc="Done.", type="Function|null", optional=True),
    ]
    sig = build_call_signature(params, ReturnSpec(type="[Node]"), "Foo.walk")

    assert [a.name for a in sig.arguments or []] == ["path", "cb"]
    assert sig.arguments is not None
    assert sig.arguments[1].types == ["Function", "null"]
    assert sig.arguments[1].optional is True
    assert sig.returns is not None
    assert sig.returns.is_array is True
    assert sig.to_dict() == {
        "arguments": [
            {
                "name": "path",
                "description": "Where.",
                "types": ["String"],
                "optional": False,
            },
            {
                "name": "cb",
                "description": "Done.",
                "types": ["Function", "null"],
                "optional": True,
            },
        ],
        "return": {"type": "Node", "isArray": True, "description": ""},
    }


def test_build_call_signature_without_params_or_return() -> None:
    """Verify that a bare method gets an empty argument list and no return."""
    sig = build_call_signature(None, None, "Foo.run")
    assert sig.arguments == []
    assert sig.returns is None


def test_build_value_signature() -> None:
    """Verify that value signatures carry a type but no arguments."""
    sig = build_value_signature("Number")
    assert sig.arguments is None
    assert sig.to_dict() == {
        "arguments": None,
        "return": {"type": "Number", "isArray": False, "description": ""},
    }
