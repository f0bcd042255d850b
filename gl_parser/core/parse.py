"""Public entry point gluing the scanner and the interpreter."""

from __future__ import annotations

import logging
from typing import List, Optional

from gl_parser.core.interpreter import Interpreter
from gl_parser.core.models import Diagnostic, Exercise, ParserConfig, ParseResult
from gl_parser.core.scanner import Scanner

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Base class for fatal parse failures."""


class EmptySourceError(ParseError):
    """Raised when the source text is empty."""

    def __init__(self) -> None:
        super().__init__("empty source string")


class StrictParseError(ParseError):
    """Raised in strict mode when any diagnostic was collected."""

    def __init__(self, diagnostics: List[Diagnostic], exercises: List[Exercise]) -> None:
        self.diagnostics = diagnostics
        self.exercises = exercises
        first = diagnostics[0].message if diagnostics else "unknown problem"
        extra = f" (+{len(diagnostics) - 1} more)" if len(diagnostics) > 1 else ""
        super().__init__(f"{first}{extra}")


def parse(source: str, config: Optional[ParserConfig] = None, strict: bool = False) -> ParseResult:
    """Parse a workout log into exercises.

    Character- and field-level problems never abort the parse; they are
    returned in ``ParseResult.diagnostics``. Only an empty ``source`` fails,
    unless ``strict`` is set, in which case any diagnostic raises
    ``StrictParseError``.
    """
    if source == "":
        raise EmptySourceError()

    tokens, scan_errors = Scanner(source).scan()
    for error in scan_errors:
        logger.warning("%s", error)

    interpreter = Interpreter(tokens, config or ParserConfig())
    exercises = interpreter.interpret()
    for diagnostic in interpreter.diagnostics:
        logger.debug("%s", diagnostic)

    result = ParseResult(exercises=exercises, diagnostics=scan_errors + interpreter.diagnostics)
    logger.debug(
        "Parsed %d tokens into %d exercises with %d diagnostics",
        len(tokens),
        len(result.exercises),
        len(result.diagnostics),
    )

    if strict and result.diagnostics:
        raise StrictParseError(result.diagnostics, result.exercises)
    return result
