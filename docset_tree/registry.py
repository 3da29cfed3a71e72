"""Registry binding file extensions to the parsers that build doc trees."""

import functools
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from docset_tree.collaborators import Collaborators
from docset_tree.load_docsets import parse_docset_file
from docset_tree.pipeline import Callback, parse_file

logger = logging.getLogger(__name__)

Parser = Callable[[str | Path, dict[str, Any] | None, Callback], None]


class ParserRegistry:
    """Maps file extensions (``.js``, ``.yml``) to parsers."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.parsers: dict[str, Parser] = {}

    def register_parser(self, extension: str, parser: Parser) -> None:
        """Bind a parser to a file extension, replacing any earlier binding."""
        ext = extension.lower()
        if not ext.startswith("."):
            ext = "." + ext
        if ext in self.parsers:
            logger.info("Replacing parser registered for %s", ext)
        self.parsers[ext] = parser

    def parser_for(self, path: str | Path) -> Parser | None:
        """Return the parser registered for the extension of ``path``."""
        return self.parsers.get(Path(path).suffix.lower())

    def parse(
        self, path: str | Path, options: dict[str, Any] | None, callback: Callback
    ) -> bool:
        """Parse ``path`` with its registered parser.

        Returns False, without invoking ``callback``, when no parser handles
        the extension.
        """
        parser = self.parser_for(path)
        if parser is None:
            return False
        parser(path, options, callback)
        return True


def register_javascript(registry: ParserRegistry, collaborators: Collaborators) -> None:
    """Register the tag-comment pipeline for ``.js`` sources."""
    registry.register_parser(
        ".js", functools.partial(_parse_with, collaborators=collaborators)
    )


def register_docset_files(
    registry: ParserRegistry, extensions: Iterable[str] = (".yml", ".yaml")
) -> None:
    """Register the YAML docset reader for the given extensions."""
    for ext in extensions:
        registry.register_parser(ext, parse_docset_file)


def _parse_with(
    path: str | Path,
    options: dict[str, Any] | None,
    callback: Callback,
    *,
    collaborators: Collaborators,
) -> None:
    parse_file(path, options, callback, collaborators)
