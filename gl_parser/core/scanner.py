"""Lexical scanner turning a workout log into tokens.

Single left-to-right pass, no backtracking. Characters that fit no token class
are recorded as diagnostics and skipped, so scanning always reaches the end
and always yields a terminal ``EOF`` token.
"""

from __future__ import annotations

import math
import unicodedata
from typing import List, Tuple

from gl_parser.core.constants import DECIMAL_SEPARATORS, KEYWORD_KINDS, PUNCTUATION_KINDS
from gl_parser.core.models import Diagnostic, DiagnosticKind, Token, TokenKind, TokenLiteral


def is_word_char(char: str) -> bool:
    """Unicode letter or combining mark."""
    return bool(char) and unicodedata.category(char)[0] in ("L", "M")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9" if char else False


class Scanner:
    """Scanner over one source string; create a new instance per input."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: List[Token] = []
        self.errors: List[Diagnostic] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan(self) -> Tuple[List[Token], List[Diagnostic]]:
        """Scan the whole source and return ``(tokens, errors)``."""
        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self._add_token(TokenKind.EOF, "")
        return self.tokens, self.errors

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def _add_token(self, kind: TokenKind, lexeme: str, literal: TokenLiteral = None) -> None:
        self.tokens.append(Token(kind=kind, lexeme=lexeme, literal=literal, line=self.line))
        if kind is TokenKind.NEWLINE:
            self.line += 1

    def _error(self, kind: DiagnosticKind, text: str) -> None:
        self.errors.append(Diagnostic(kind=kind, line=self.line, text=text))

    def _scan_token(self) -> None:
        char = self._advance()

        punctuation = PUNCTUATION_KINDS.get(char)
        if punctuation is not None:
            self._add_token(punctuation, char)
        elif is_word_char(char):
            self._word()
        elif is_digit(char):
            self._number()
        else:
            self._error(DiagnosticKind.UNRECOGNIZED_CHARACTER, char)

    def _word(self) -> None:
        while is_word_char(self._peek()):
            self._advance()

        word = self.source[self.start : self.current]
        self._add_token(KEYWORD_KINDS.get(word, TokenKind.STRING), word, word)

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # a separator only belongs to the number when digits follow it
        if self._peek() in DECIMAL_SEPARATORS and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        text = self.source[self.start : self.current]
        try:
            value = float(text.replace(",", ".", 1))
        except ValueError:
            self._error(DiagnosticKind.NUMERIC_CONVERSION, text)
            return
        if not math.isfinite(value):
            self._error(DiagnosticKind.NUMERIC_CONVERSION, text)
            return
        self._add_token(TokenKind.NUMBER, text, value)


def scan(source: str) -> Tuple[List[Token], List[Diagnostic]]:
    """Tokenize ``source`` and return ``(tokens, errors)``."""
    return Scanner(source).scan()
