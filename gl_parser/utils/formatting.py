"""Formatting helpers used by console output."""

from __future__ import annotations

from typing import List, Optional

from gl_parser.core.models import Weight


def format_number(value: float) -> str:
    """Drop a trailing ``.0`` from whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_weight(weight: Optional[Weight]) -> str:
    """Format a weight as ``90kg``; ``-`` when none was stated."""
    if weight is None:
        return "-"
    return f"{format_number(weight.value)}{weight.unit.value}"


def format_reps(reps: List[int]) -> str:
    """Format reps compactly: ``3x10`` for identical sets, ``8/6/4`` otherwise."""
    if not reps:
        return "-"
    if len(reps) > 1 and len(set(reps)) == 1:
        return f"{len(reps)}x{reps[0]}"
    return "/".join(str(count) for count in reps)


def total_volume(weight: Optional[Weight], reps: List[int]) -> Optional[float]:
    """Weight times total reps, in the weight's own unit."""
    if weight is None or not reps:
        return None
    return weight.value * sum(reps)


def format_volume(weight: Optional[Weight], reps: List[int]) -> str:
    volume = total_volume(weight, reps)
    if volume is None or weight is None:
        return "-"
    return f"{format_number(volume)}{weight.unit.value}"
