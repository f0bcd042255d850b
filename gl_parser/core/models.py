"""Data models shared by the scanner, interpreter and commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class TokenKind(str, Enum):
    """Closed set of token kinds produced by the scanner."""

    ASPERAND = "ASPERAND"
    ASTERISK = "ASTERISK"
    EOF = "EOF"
    FORWARD_SLASH = "FORWARD_SLASH"
    HYPHEN = "HYPHEN"
    NEWLINE = "NEWLINE"
    NUMBER = "NUMBER"
    STRING = "STRING"
    WEIGHT_UNIT = "WEIGHT_UNIT"
    WHITE_SPACE = "WHITE_SPACE"


TokenLiteral = Union[None, float, str]


@dataclass(frozen=True)
class Token:
    """Classified slice of the source text."""

    kind: TokenKind
    lexeme: str
    literal: TokenLiteral = None
    line: int = 1


class InvalidUnitConfigurationError(ValueError):
    """Raised when a weight unit other than kg/lbs is configured."""


class Unit(str, Enum):
    """Weight units understood by the parser."""

    METRIC = "kg"
    IMPERIAL = "lbs"

    @classmethod
    def from_value(cls, value: Union[str, "Unit"]) -> "Unit":
        if isinstance(value, Unit):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidUnitConfigurationError(
                f"Unsupported weight unit: {value!r} (expected 'kg' or 'lbs')"
            ) from exc


@dataclass(frozen=True)
class ParserConfig:
    """Interpretation settings; the unit is the fallback for unit-less weights."""

    default_weight_unit: Unit = Unit.METRIC

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_weight_unit", Unit.from_value(self.default_weight_unit))


@dataclass(frozen=True)
class Weight:
    value: float
    unit: Unit

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit.value}


@dataclass
class Exercise:
    """One exercise/weight combination with its per-set repetitions.

    ``weight`` is ``None`` when no weight clause was given, so a weight stated
    as ``@0kg`` stays distinguishable from a missing one.
    """

    name: str
    weight: Optional[Weight] = None
    reps: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "weight": self.weight.to_dict() if self.weight is not None else None,
            "reps": list(self.reps),
        }


class DiagnosticKind(str, Enum):
    """Recoverable problems collected while scanning and interpreting."""

    UNRECOGNIZED_CHARACTER = "unrecognized-character"
    NUMERIC_CONVERSION = "numeric-conversion"
    REP_FIELD_CONVERSION = "rep-field-conversion"
    UNRECOGNIZED_REPS = "unrecognized-reps"
    UNEXPECTED_TOKEN = "unexpected-token"
    MISSING_EXERCISE = "missing-exercise"
    MISSING_WEIGHT_VALUE = "missing-weight-value"


SCAN_DIAGNOSTICS = frozenset({DiagnosticKind.UNRECOGNIZED_CHARACTER, DiagnosticKind.NUMERIC_CONVERSION})

_MESSAGES = {
    DiagnosticKind.UNRECOGNIZED_CHARACTER: "unexpected character {text} at line {line}",
    DiagnosticKind.NUMERIC_CONVERSION: "invalid number {text} at line {line}",
    DiagnosticKind.REP_FIELD_CONVERSION: "invalid rep count {text} at line {line}",
    DiagnosticKind.UNRECOGNIZED_REPS: "unrecognized reps {text} at line {line}",
    DiagnosticKind.UNEXPECTED_TOKEN: "unexpected {text} at line {line}",
    DiagnosticKind.MISSING_EXERCISE: "{text} at line {line} has no exercise name before it",
    DiagnosticKind.MISSING_WEIGHT_VALUE: "weight clause {text} at line {line} has no value",
}


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem with the line and source text it was found at."""

    kind: DiagnosticKind
    line: int
    text: str

    @property
    def is_scan_error(self) -> bool:
        return self.kind in SCAN_DIAGNOSTICS

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind].format(text=_quote(self.text), line=self.line)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "line": self.line, "text": self.text, "message": self.message}


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


@dataclass
class ParseResult:
    """Best-effort exercises plus every diagnostic collected on the way."""

    exercises: List[Exercise] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def scan_errors(self) -> List[Diagnostic]:
        return [item for item in self.diagnostics if item.is_scan_error]

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exercises": [exercise.to_dict() for exercise in self.exercises],
            "diagnostics": [item.to_dict() for item in self.diagnostics],
        }
