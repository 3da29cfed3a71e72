"""Tests for YAML docset files and the parser registry."""

from pathlib import Path

import pytest

from docset_tree.assembler import DocTree
from docset_tree.errors import DocsetError, NamingError, SyntaxParseError
from docset_tree.load_docsets import load_docsets, parse_docset_file
from docset_tree.registry import ParserRegistry, register_docset_files

DOCSET_YAML = """\
source: lib/foo.js
docsets:
  - tagname: class
    name: Foo
    doc: A foo.
    linenr: 1
  - tagname: method
    name: bar
    doc: Bars.
    linenr: 4
    params:
      - {name: x, doc: An x., type: "Number|String"}
    return: {type: "[String]", doc: Parts.}
"""


def test_load_docsets(tmp_path: Path) -> None:
    """Verify that docsets are loaded in file order."""
    path = tmp_path / "foo.docsets.yml"
    path.write_text(DOCSET_YAML, encoding="utf-8")

    docsets = load_docsets(path)

    assert [d.name for d in docsets] == ["Foo", "bar"]
    assert docsets[1].returns is not None
    assert docsets[1].returns.type == "[String]"


def test_load_docsets_empty(tmp_path: Path) -> None:
    """Verify that an empty file holds no docsets."""
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_docsets(path) == []


def test_load_docsets_invalid_yaml(tmp_path: Path) -> None:
    """Verify that malformed YAML is a SyntaxParseError."""
    path = tmp_path / "bad.yml"
    path.write_text("docsets: [unclosed", encoding="utf-8")
    with pytest.raises(SyntaxParseError):
        load_docsets(path)


def test_parse_docset_file_uses_declared_source(tmp_path: Path) -> None:
    """Verify that nodes are attributed to the declared source file."""
    path = tmp_path / "foo.docsets.yml"
    path.write_text(DOCSET_YAML, encoding="utf-8")
    calls: list[tuple[DocsetError | None, DocTree | None]] = []

    parse_docset_file(path, None, lambda err, tree: calls.append((err, tree)))

    err, tree = calls[0]
    assert err is None
    assert tree is not None
    assert tree.file == "lib/foo.js"
    assert tree.nodes[".Foo.bar"].file == "lib/foo.js"


def test_parse_docset_file_reports_naming_error(tmp_path: Path) -> None:
    """Verify that a malformed name is delivered as an error."""
    path = tmp_path / "bad.yml"
    path.write_text(
        "docsets:\n  - {tagname: class, name: Foo, doc: A foo.}\n"
        "  - {tagname: method, name: '', doc: Lost.}\n",
        encoding="utf-8",
    )
    calls: list[tuple[DocsetError | None, DocTree | None]] = []

    parse_docset_file(path, None, lambda err, tree: calls.append((err, tree)))

    err, tree = calls[0]
    assert isinstance(err, NamingError)
    assert tree is None


def test_registry_dispatches_by_extension(tmp_path: Path) -> None:
    """Verify that files are routed to the parser of their extension."""
    registry = ParserRegistry()
    register_docset_files(registry, ["yml"])
    path = tmp_path / "foo.docsets.YML"
    path.write_text(DOCSET_YAML, encoding="utf-8")
    calls: list[DocTree | None] = []

    assert registry.parser_for(path) is parse_docset_file
    assert registry.parse(path, None, lambda _err, tree: calls.append(tree))
    assert not registry.parse(tmp_path / "foo.js", None, lambda *_: None)
    assert len(calls) == 1


@pytest.mark.parametrize(
    "body",
    [
        "docsets: {tagname: class}\n",
        "docsets:\n  - just a string\n",
        "docsets:\n  - {tagname: method, name: bar, doc: [a, b]}\n",
        "docsets:\n  - {tagname: method, name: bar, doc: Bars., params: x}\n",
        "docsets:\n  - {tagname: method, name: bar, doc: Bars., return: '[x]'}\n",
        "- {tagname: class, name: Foo}\n",
    ],
)
def test_load_docsets_rejects_malformed_records(tmp_path: Path, body: str) -> None:
    """Verify that badly shaped records are a SyntaxParseError for the file."""
    path = tmp_path / "bad.yml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(SyntaxParseError) as info:
        load_docsets(path)
    assert info.value.file == str(path)


def test_parse_docset_file_delivers_record_errors(tmp_path: Path) -> None:
    """Verify that a badly shaped record reaches the callback as an error."""
    path = tmp_path / "bad.yml"
    path.write_text(
        "docsets:\n  - {tagname: method, name: bar, doc: Bars., params: x}\n",
        encoding="utf-8",
    )
    calls: list[tuple[DocsetError | None, DocTree | None]] = []

    parse_docset_file(path, None, lambda err, tree: calls.append((err, tree)))

    assert len(calls) == 1
    err, tree = calls[0]
    assert isinstance(err, SyntaxParseError)
    assert "docset #0" in str(err)
    assert tree is None


def test_load_docsets_coerces_scalar_doc(tmp_path: Path) -> None:
    """Verify that a numeric description is read as text."""
    path = tmp_path / "num.yml"
    path.write_text(
        "docsets:\n  - {tagname: class, name: Foo, doc: 42}\n", encoding="utf-8"
    )
    (docset,) = load_docsets(path)
    assert docset.doc == "42"
