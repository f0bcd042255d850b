"""Static lookup tables and patterns for the workout log grammar."""

from __future__ import annotations

import re
from types import MappingProxyType

from gl_parser.core.models import TokenKind, Unit

PUNCTUATION_KINDS = MappingProxyType(
    {
        "@": TokenKind.ASPERAND,
        "*": TokenKind.ASTERISK,
        "/": TokenKind.FORWARD_SLASH,
        "-": TokenKind.HYPHEN,
        "\n": TokenKind.NEWLINE,
        " ": TokenKind.WHITE_SPACE,
        "\r": TokenKind.WHITE_SPACE,
        "\t": TokenKind.WHITE_SPACE,
    }
)

KEYWORD_KINDS = MappingProxyType(
    {
        "kg": TokenKind.WEIGHT_UNIT,
        "lbs": TokenKind.WEIGHT_UNIT,
    }
)

UNIT_BY_KEYWORD = MappingProxyType({unit.value: unit for unit in Unit})

DECIMAL_SEPARATORS = frozenset({".", ","})

NAME_KINDS = frozenset({TokenKind.STRING, TokenKind.HYPHEN, TokenKind.WHITE_SPACE})
REPS_KINDS = frozenset({TokenKind.NUMBER, TokenKind.FORWARD_SLASH, TokenKind.ASTERISK})

# Kinds that mean something only inside a clause; seen on their own they are reported.
STRAY_KINDS = frozenset({TokenKind.ASTERISK, TokenKind.FORWARD_SLASH, TokenKind.WEIGHT_UNIT})

REPS_MULTIPLIER_RE = re.compile(r"^(?P<multiplier>\d+)\*(?P<count>\d+)$", re.ASCII)
REPS_ENUMERATION_RE = re.compile(r"^\d+(?:/\d+)*/?$", re.ASCII)
REP_FIELD_RE = re.compile(r"\d+", re.ASCII)

# Largest set count a multiplier clause may expand to.
MAX_SETS = 1000
