from __future__ import annotations

import pytest

from gl_parser.core.models import DiagnosticKind, TokenKind
from gl_parser.core.scanner import Scanner, is_word_char, scan

K = TokenKind


def _triples(source: str):
    tokens, _ = scan(source)
    return [(token.kind, token.lexeme, token.literal) for token in tokens]


def test_scan_mixed_log_tokens_and_lines() -> None:
    source = "Benchpress @90kg 5*5 \n Benchpress @87,5lbs 5/5 - \r \t $"
    expected = [
        (K.STRING, "Benchpress", "Benchpress", 1),
        (K.WHITE_SPACE, " ", None, 1),
        (K.ASPERAND, "@", None, 1),
        (K.NUMBER, "90", 90.0, 1),
        (K.WEIGHT_UNIT, "kg", "kg", 1),
        (K.WHITE_SPACE, " ", None, 1),
        (K.NUMBER, "5", 5.0, 1),
        (K.ASTERISK, "*", None, 1),
        (K.NUMBER, "5", 5.0, 1),
        (K.WHITE_SPACE, " ", None, 1),
        (K.NEWLINE, "\n", None, 1),
        (K.WHITE_SPACE, " ", None, 2),
        (K.STRING, "Benchpress", "Benchpress", 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.ASPERAND, "@", None, 2),
        (K.NUMBER, "87,5", 87.5, 2),
        (K.WEIGHT_UNIT, "lbs", "lbs", 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.NUMBER, "5", 5.0, 2),
        (K.FORWARD_SLASH, "/", None, 2),
        (K.NUMBER, "5", 5.0, 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.HYPHEN, "-", None, 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.WHITE_SPACE, "\r", None, 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.WHITE_SPACE, "\t", None, 2),
        (K.WHITE_SPACE, " ", None, 2),
        (K.EOF, "", None, 2),
    ]

    tokens, errors = scan(source)

    assert [(t.kind, t.lexeme, t.literal, t.line) for t in tokens] == expected
    assert len(errors) == 1
    assert errors[0].kind is DiagnosticKind.UNRECOGNIZED_CHARACTER
    assert errors[0].line == 2
    assert errors[0].text == "$"
    assert str(errors[0]) == 'unexpected character "$" at line 2'


def test_scan_empty_source_yields_only_eof() -> None:
    tokens, errors = scan("")
    assert [(t.kind, t.line) for t in tokens] == [(K.EOF, 1)]
    assert errors == []


@pytest.mark.parametrize(
    "source",
    [
        "Bench Press @90kg 5/5/5",
        "Squats @100kg 3*10 @140lbs 10\nRows @87,5 8/8/\n",
        "Kniebeuge @102.5kg 5/5\r\n\tÜbung 3*8",
        "--  @@ ** // \n\n",
    ],
)
def test_scan_lexemes_reproduce_input(source: str) -> None:
    tokens, errors = scan(source)
    assert errors == []
    assert tokens[-1].kind is K.EOF
    assert "".join(token.lexeme for token in tokens[:-1]) == source


def test_scan_line_is_one_plus_preceding_newlines() -> None:
    source = "Bench @90kg 5/5\n\nSquats 3*10\r\n Rows @20 8/8\n"
    tokens, _ = scan(source)

    offset = 0
    for token in tokens[:-1]:
        assert token.line == 1 + source.count("\n", 0, offset)
        offset += len(token.lexeme)
    assert tokens[-1].line == 5


def test_scan_decimal_comma_is_normalized_in_literal_only() -> None:
    assert _triples("87,5") == [(K.NUMBER, "87,5", 87.5), (K.EOF, "", None)]
    assert _triples("102.25kg")[0] == (K.NUMBER, "102.25", 102.25)


def test_scan_separator_without_following_digit_is_not_swallowed() -> None:
    tokens, errors = scan("5.kg")
    assert [(t.kind, t.lexeme) for t in tokens] == [(K.NUMBER, "5"), (K.WEIGHT_UNIT, "kg"), (K.EOF, "")]
    assert [(e.text, e.line) for e in errors] == [(".", 1)]

    tokens, errors = scan("8,")
    assert tokens[0].literal == 8.0
    assert [e.text for e in errors] == [","]


def test_scan_only_one_fractional_part() -> None:
    tokens, errors = scan("1.5.5")
    assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [(K.NUMBER, "1.5"), (K.NUMBER, "5")]
    assert [e.text for e in errors] == ["."]


def test_scan_keywords_are_exact_matches() -> None:
    assert _triples("kg lbs kgs Lbs")[:-1] == [
        (K.WEIGHT_UNIT, "kg", "kg"),
        (K.WHITE_SPACE, " ", None),
        (K.WEIGHT_UNIT, "lbs", "lbs"),
        (K.WHITE_SPACE, " ", None),
        (K.STRING, "kgs", "kgs"),
        (K.WHITE_SPACE, " ", None),
        (K.STRING, "Lbs", "Lbs"),
    ]


def test_scan_unicode_letters_and_combining_marks_form_one_word() -> None:
    word = "Cafe\u0301\u00dcbung"
    tokens, errors = scan(word)
    assert errors == []
    assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [(K.STRING, word)]


def test_scan_word_stops_at_digit() -> None:
    assert [t[0] for t in _triples("Row2")] == [K.STRING, K.NUMBER, K.EOF]


def test_scan_collects_every_unrecognized_character_and_keeps_going() -> None:
    tokens, errors = scan("Bench! @90kg #5\n?")
    assert [(e.text, e.line) for e in errors] == [("!", 1), ("#", 1), ("?", 2)]
    assert [t.kind for t in tokens].count(K.NUMBER) == 2
    assert tokens[-1].kind is K.EOF


def test_scanner_instance_state_is_local() -> None:
    first = Scanner("Bench $")
    second = Scanner("Rows")
    first.scan()
    tokens, errors = second.scan()
    assert errors == []
    assert [t.lexeme for t in tokens] == ["Rows", ""]


def test_is_word_char() -> None:
    assert is_word_char("a")
    assert is_word_char("ß")
    assert is_word_char("\u0301")
    assert not is_word_char("1")
    assert not is_word_char("")
    assert not is_word_char("_")


def test_scan_overflowing_number_is_a_conversion_error() -> None:
    digits = "9" * 400
    tokens, errors = scan(f"Bench @{digits} 5")

    assert [(e.kind, e.text, e.line) for e in errors] == [(DiagnosticKind.NUMERIC_CONVERSION, digits, 1)]
    numbers = [t.literal for t in tokens if t.kind is K.NUMBER]
    assert numbers == [5.0]
