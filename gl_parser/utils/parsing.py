"""Input helpers for workout log text."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

BATCH_SUFFIXES = {".json", ".yaml", ".yml"}


def _entry_text(item: Any) -> Optional[str]:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        value = item.get("log", item.get("text"))
        return value if isinstance(value, str) else None
    return None


def _entries_from_data(raw_data: Any) -> List[str]:
    if isinstance(raw_data, dict):
        raw_data = raw_data.get("entries", [raw_data])
    if isinstance(raw_data, str):
        return [raw_data]
    if isinstance(raw_data, list):
        entries = [_entry_text(item) for item in raw_data]
        return [entry for entry in entries if entry is not None]
    return []


def load_log_entries(
    text: Optional[str] = None,
    file_path: Optional[Path] = None,
    read_stdin: bool = False,
    stdin_text: str = "",
) -> List[str]:
    """Load one or more log entries from an argument, a file or stdin text.

    JSON/YAML files hold a batch: a list of strings, a list of
    ``{"log": ...}`` mappings, or a mapping with an ``entries`` list. Any
    other file is read as a single entry.
    """
    if text is not None:
        return [text]

    if file_path:
        content = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return _entries_from_data(yaml.safe_load(content))
        if suffix == ".json":
            return _entries_from_data(json.loads(content))
        return [content]

    if read_stdin:
        return [stdin_text]

    return []
