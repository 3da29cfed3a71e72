"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docset_tree.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    # Namespace used for members of files that document no class.
    "global_ns": None,
    "extensions": [".yaml", ".yml"],
    "output": {
        "format": "json",
        "indent": 2,
    },
    "logging": {
        "level": "INFO",
    },
}

OUTPUT_FORMATS = ("json", "yaml")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)

    fmt = config["output"].get("format")
    if fmt not in OUTPUT_FORMATS:
        msg = f"Unsupported output format {fmt!r} (expected one of {OUTPUT_FORMATS})"
        raise SystemExit(msg)
    return config
