"""YAML export of parse results."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import yaml

from gl_parser.core.models import ParseResult
from gl_parser.exporters.json_export import results_payload, write_json

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def write_yaml(path: Path, results: Sequence[ParseResult]) -> Path:
    """Write one block-style YAML item per log entry and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(results_payload(results), sort_keys=False, allow_unicode=True))
    return path


def write_results(path: Path, results: Sequence[ParseResult]) -> Path:
    """Write YAML for ``.yaml``/``.yml`` paths and JSON otherwise."""
    if path.suffix.lower() in YAML_SUFFIXES:
        return write_yaml(path, results)
    return write_json(path, results)
