"""Logic for summarizing a run over many docset files."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docset_tree.assembler import DocTree
from docset_tree.errors import DocsetError, NamingError


@dataclass
class FileOutcome:
    """What happened to one input file."""

    file: str
    nodes: int = 0
    sections: int = 0
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None
    symbol: str | None = None
    line: int | None = None


class RunReport:
    """Collects per-file outcomes and writes them as a JSON summary."""

    def __init__(self) -> None:
        """Initialize an empty report."""
        self.outcomes: list[FileOutcome] = []

    def add_tree(self, file: str, tree: DocTree) -> None:
        """Record a successfully assembled file."""
        self.outcomes.append(
            FileOutcome(
                file=file,
                nodes=len(tree.nodes),
                sections=len(tree.sections),
                warnings=list(tree.warnings),
            )
        )

    def add_error(self, file: str, err: DocsetError) -> None:
        """Record a file that failed."""
        outcome = FileOutcome(file=file, error=str(err), error_kind=type(err).__name__)
        if isinstance(err, NamingError):
            outcome.symbol = err.name
            outcome.line = err.line
        self.outcomes.append(outcome)

    @property
    def failed(self) -> list[FileOutcome]:
        """Outcomes that carry an error."""
        return [o for o in self.outcomes if o.error is not None]

    def summary(self) -> dict[str, Any]:
        """Return the report as a JSON-serializable dict."""
        error_counts: dict[str, int] = {}
        for o in self.failed:
            kind = o.error_kind or "Error"
            error_counts[kind] = error_counts.get(kind, 0) + 1

        return {
            "meta": {
                "total_files": len(self.outcomes),
                "failed_files": len(self.failed),
                "total_nodes": sum(o.nodes for o in self.outcomes),
                "total_sections": sum(o.sections for o in self.outcomes),
                "total_warnings": sum(len(o.warnings) for o in self.outcomes),
            },
            "files": [
                {k: v for k, v in vars(o).items() if v is not None}
                for o in self.outcomes
            ],
            "stats": {"error_counts": error_counts},
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.summary(), indent=2), encoding="utf-8")
