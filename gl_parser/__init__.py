"""Parse free-form workout log lines into structured exercises."""

from gl_parser.core.models import (
    Diagnostic,
    DiagnosticKind,
    Exercise,
    InvalidUnitConfigurationError,
    ParserConfig,
    ParseResult,
    Token,
    TokenKind,
    Unit,
    Weight,
)
from gl_parser.core.parse import EmptySourceError, ParseError, StrictParseError, parse

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "EmptySourceError",
    "Exercise",
    "InvalidUnitConfigurationError",
    "ParseError",
    "ParseResult",
    "ParserConfig",
    "StrictParseError",
    "Token",
    "TokenKind",
    "Unit",
    "Weight",
    "parse",
]
