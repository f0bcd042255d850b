"""Interpreter assembling exercises from a token stream.

The interpreter is a small state machine keyed on the kind of the consumed
token:

* ``STRING``/``HYPHEN`` start an exercise name and always open a new record;
* ``@`` starts a weight clause (``@<number><unit>?``). A later weight clause,
  even one with no value, closes a record that already has a weight and opens
  a new one with the same name;
* ``NUMBER`` starts a reps clause, either ``N*M`` (M reps, N sets) or
  ``N/N/N`` (one count per set, optional trailing slash).

Everything else is skipped. Problems are collected as diagnostics rather than
raised.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from gl_parser.core.constants import (
    MAX_SETS,
    NAME_KINDS,
    REP_FIELD_RE,
    REPS_ENUMERATION_RE,
    REPS_KINDS,
    REPS_MULTIPLIER_RE,
    STRAY_KINDS,
    UNIT_BY_KEYWORD,
)
from gl_parser.core.models import (
    Diagnostic,
    DiagnosticKind,
    Exercise,
    ParserConfig,
    Token,
    TokenKind,
    Unit,
    Weight,
)


def _to_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def parse_multiplier_reps(text: str) -> Tuple[Optional[List[int]], List[str]]:
    """Expand ``"3*10"`` into ``[10, 10, 10]``.

    Returns ``(reps, bad_fields)``; ``reps`` is ``None`` when ``text`` is not
    in multiplier format, one of its two fields cannot be converted, or the
    multiplier exceeds ``MAX_SETS``.
    """
    match = REPS_MULTIPLIER_RE.fullmatch(text)
    if not match:
        return None, []

    fields = (match.group("multiplier"), match.group("count"))
    bad = [field for field in fields if _to_int(field) is None]
    if bad:
        return None, bad
    multiplier, count = (int(field) for field in fields)
    if multiplier > MAX_SETS:
        return None, [fields[0]]
    return [count] * multiplier, []


def parse_enumeration_reps(text: str) -> Tuple[Optional[List[int]], List[str]]:
    """Parse ``"5/5/5"`` or ``"8/8/"`` into one count per set.

    Fields that fail integer conversion are skipped and returned separately.
    """
    if not REPS_ENUMERATION_RE.fullmatch(text):
        return None, []

    reps: List[int] = []
    bad: List[str] = []
    for field in REP_FIELD_RE.findall(text):
        value = _to_int(field)
        if value is None:
            bad.append(field)
            continue
        reps.append(value)
    return reps, bad


REPS_FORMATS: Tuple[Callable[[str], Tuple[Optional[List[int]], List[str]]], ...] = (
    parse_multiplier_reps,
    parse_enumeration_reps,
)


class Interpreter:
    """Walks a token list once; create a new instance per token list."""

    def __init__(self, tokens: Iterable[Token], config: Optional[ParserConfig] = None) -> None:
        self.tokens: List[Token] = list(tokens)
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            last_line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(kind=TokenKind.EOF, lexeme="", line=last_line))
        self.config = config or ParserConfig()
        self.exercises: List[Exercise] = []
        self.diagnostics: List[Diagnostic] = []
        self.current_index: Optional[int] = None
        self.start = 0
        self.current = 0

    @property
    def current_exercise(self) -> Optional[Exercise]:
        if self.current_index is None:
            return None
        return self.exercises[self.current_index]

    def interpret(self) -> List[Exercise]:
        """Run the dispatch loop until ``EOF`` and return the exercises."""
        while not self._is_at_end():
            self.start = self.current
            token = self._advance()

            if token.kind in (TokenKind.STRING, TokenKind.HYPHEN):
                self._exercise_name()
            elif token.kind is TokenKind.ASPERAND:
                self._weight(token)
            elif token.kind is TokenKind.NUMBER:
                self._reps(token)
            elif token.kind in STRAY_KINDS:
                self._report(DiagnosticKind.UNEXPECTED_TOKEN, token.line, token.lexeme)

        return self.exercises

    def _is_at_end(self) -> bool:
        return self._peek().kind is TokenKind.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _advance(self) -> Token:
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _advance_while(self, kinds: frozenset) -> None:
        while self._peek().kind in kinds:
            self._advance()

    def _lexemes(self) -> str:
        return "".join(token.lexeme for token in self.tokens[self.start : self.current])

    def _report(self, kind: DiagnosticKind, line: int, text: str) -> None:
        self.diagnostics.append(Diagnostic(kind=kind, line=line, text=text))

    def _append(self, exercise: Exercise) -> None:
        self.exercises.append(exercise)
        self.current_index = len(self.exercises) - 1

    def _exercise_name(self) -> None:
        self._advance_while(NAME_KINDS)
        name = self._lexemes().strip()
        self._append(Exercise(name=name))

    def _weight(self, marker: Token) -> None:
        value: Optional[float] = None
        unit: Optional[Unit] = None

        if self._peek().kind is TokenKind.NUMBER:
            literal = self._advance().literal
            if isinstance(literal, float):
                value = literal

        if self._peek().kind is TokenKind.WEIGHT_UNIT:
            literal = self._advance().literal
            if isinstance(literal, str):
                unit = UNIT_BY_KEYWORD.get(literal)

        clause = self._lexemes()
        exercise = self.current_exercise
        if exercise is None:
            self._report(DiagnosticKind.MISSING_EXERCISE, marker.line, clause)
            return
        if value is None:
            self._report(DiagnosticKind.MISSING_WEIGHT_VALUE, marker.line, clause)
            # a weighted record is closed by any later weight clause
            if exercise.weight is not None:
                self._append(Exercise(name=exercise.name))
            return

        weight = Weight(value=value, unit=unit or self.config.default_weight_unit)
        if exercise.weight is None:
            exercise.weight = weight
        else:
            self._append(Exercise(name=exercise.name, weight=weight))

    def _reps(self, first: Token) -> None:
        self._advance_while(REPS_KINDS)
        text = self._lexemes()

        exercise = self.current_exercise
        if exercise is None:
            self._report(DiagnosticKind.MISSING_EXERCISE, first.line, text)
            return

        for parse_format in REPS_FORMATS:
            reps, bad_fields = parse_format(text)
            for field in bad_fields:
                self._report(DiagnosticKind.REP_FIELD_CONVERSION, first.line, field)
            if reps is not None:
                exercise.reps = reps
                return
            if bad_fields:
                return

        self._report(DiagnosticKind.UNRECOGNIZED_REPS, first.line, text)


def interpret(tokens: Iterable[Token], config: Optional[ParserConfig] = None) -> List[Exercise]:
    """Build exercises from ``tokens``; diagnostics are dropped, see ``parse``."""
    return Interpreter(tokens, config).interpret()
