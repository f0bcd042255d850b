"""JSON export of parse results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from gl_parser.core.models import ParseResult


def results_payload(results: Sequence[ParseResult]) -> List[Dict[str, Any]]:
    return [result.to_dict() for result in results]


def write_json(path: Path, results: Sequence[ParseResult]) -> Path:
    """Write one object per log entry as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(results_payload(results), indent=2, ensure_ascii=False) + "\n")
    return path
