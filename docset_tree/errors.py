"""Error types raised while turning a source file into a documentation tree."""

from typing import Any


class DocsetError(Exception):
    """Base class for failures that abort the processing of one file."""

    def __init__(self, message: str, file: str | None = None) -> None:
        """Store the message along with the file that failed."""
        super().__init__(message)
        self.file = file


class SourceReadError(DocsetError):
    """The source text of a file could not be read."""


class SyntaxParseError(DocsetError):
    """Parsing, classifying, expanding or merging the docsets of a file failed."""


class NamingError(DocsetError):
    """A docset resolved to a malformed fully-qualified name."""

    def __init__(
        self,
        file: str | None,
        name: str,
        line: int | None = None,
        docset: Any = None,
    ) -> None:
        """Record the offending name, line and docset."""
        where = f"{file}:{line}" if line is not None else str(file)
        super().__init__(
            f"{where}: '{name}' is not a proper name. Check that the comment "
            "is written correctly and that the statement above it is terminated.",
            file,
        )
        self.name = name
        self.line = line
        self.docset = docset
