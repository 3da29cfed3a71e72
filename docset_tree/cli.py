"""Assemble YAML docset files into documentation node maps.

Each docset file is processed on its own; a file with a malformed comment is
reported and skipped so the rest of the run still produces output.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from docset_tree.assembler import DocTree
from docset_tree.errors import DocsetError
from docset_tree.load_config import OUTPUT_FORMATS, load_config
from docset_tree.registry import ParserRegistry, register_docset_files
from docset_tree.run_report import RunReport

logger = logging.getLogger(__name__)


def output_file_for(out_root: Path, rel: Path, fmt: str) -> Path:
    """Determine the output file for an input path relative to the input root."""
    # lib/foo.docsets.yml -> out_root/lib/foo.docsets.nodes.json
    suffix = ".nodes.json" if fmt == "json" else ".nodes.yml"
    p = out_root / rel.parent / (rel.with_suffix("").name + suffix)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def dump_tree(tree: DocTree, fmt: str, indent: int) -> str:
    """Serialize a tree in the configured output format."""
    data = tree.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.global_ns is not None:
        config["global_ns"] = args.global_ns
    if args.format is not None:
        config["output"]["format"] = args.format
    return config


def collect_files(docsets_dir: Path, registry: ParserRegistry) -> list[Path]:
    """Return the input files some registered parser handles, sorted."""
    return sorted(
        p for p in docsets_dir.rglob("*") if p.is_file() and registry.parser_for(p)
    )


def run(args: argparse.Namespace) -> int:
    """Execute the assembly over every docset file under the input directory."""
    config = _init_config(args)
    logging.basicConfig(
        level=config["logging"].get("level", "INFO"),
        format="%(levelname)s: %(message)s",
    )

    registry = ParserRegistry()
    register_docset_files(registry, config["extensions"])

    files = collect_files(args.docsets_dir, registry)
    if not files:
        msg = f"No docset files found under: {args.docsets_dir}"
        raise SystemExit(msg)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    fmt = config["output"]["format"]
    indent = int(config["output"].get("indent", 2))

    report = RunReport()
    print(f"Assembling {len(files)} docset files...")
    for f in files:
        results: list[tuple[DocsetError | None, DocTree | None]] = []
        registry.parse(f, config, lambda err, tree: results.append((err, tree)))
        err, tree = results[0]

        if tree is None:
            if err is None:
                err = DocsetError(f"no result for {f}", str(f))
            logger.error("FATAL: %s", err)
            report.add_error(str(f), err)
            if args.fail_fast:
                break
            continue

        out_file = output_file_for(out_root, f.relative_to(args.docsets_dir), fmt)
        out_file.write_text(dump_tree(tree, fmt, indent), encoding="utf-8")
        report.add_tree(str(f), tree)

    if args.report:
        report.generate_report(args.report)

    summary = report.summary()["meta"]
    print(
        f"Assembled {summary['total_nodes']} nodes and "
        f"{summary['total_sections']} sections into: {out_root}"
    )
    if report.failed:
        print(f"{len(report.failed)} of {len(files)} files failed")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the assembly process."""
    ap = argparse.ArgumentParser(
        description="Assemble YAML docset files into documentation node maps.",
    )
    ap.add_argument(
        "docsets_dir",
        type=Path,
        help="Directory containing docset files (*.yml, *.yaml)",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the *.nodes.json / *.nodes.yml files",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--global-ns",
        default=None,
        help="Namespace for members of files that document no class",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from config, json)",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON run report to this path",
    )
    ap.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first file that fails",
    )
    args = ap.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
