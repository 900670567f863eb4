"""Tests for the intcalc lexer."""

from __future__ import annotations

import pytest

from intcalc.errors import NumericOverflow, UnknownCharacter
from intcalc.lexer import Lexer, tokenize
from intcalc.tokens import TokenKind
from intcalc.types import IntRange


def lex(source: str, **kwargs) -> list[tuple[TokenKind, str]]:
    """Helper: lex source and return (kind, value) pairs."""
    return [(t.kind, t.value) for t in tokenize(source, **kwargs)]


def kinds(source: str, **kwargs) -> list[TokenKind]:
    """Helper: lex source and return just the token kinds."""
    return [t.kind for t in tokenize(source, **kwargs)]


class TestLexerBasic:
    def test_empty_source(self):
        assert Lexer("").lex() == []

    def test_whitespace_only(self):
        assert lex("  \t\n  ") == []

    def test_operators(self):
        assert kinds("+ - * / %") == [
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.STAR,
            TokenKind.SLASH,
            TokenKind.PERCENT,
        ]

    def test_brackets(self):
        assert kinds("()") == [TokenKind.LPAREN, TokenKind.RPAREN]

    def test_no_whitespace_needed(self):
        assert kinds("1+2*(3)") == [
            TokenKind.NUMBER,
            TokenKind.PLUS,
            TokenKind.NUMBER,
            TokenKind.STAR,
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
        ]

    def test_fresh_lexer_each_call(self):
        assert lex("1 + 2") == lex("1 + 2")


class TestLexerNumbers:
    def test_single_digit(self):
        assert lex("7") == [(TokenKind.NUMBER, "7")]

    def test_maximal_digit_run(self):
        tokens = tokenize("12345")
        assert len(tokens) == 1
        assert tokens[0].number == 12345

    def test_leading_zeros(self):
        tokens = tokenize("007")
        assert tokens[0].value == "007"
        assert tokens[0].number == 7

    def test_whitespace_splits_numbers(self):
        assert [t.number for t in tokenize("1 2")] == [1, 2]

    def test_number_is_always_an_int(self):
        tokens = tokenize("0 + (")
        assert [t.number for t in tokens] == [0, 0, 0]
        assert all(isinstance(t.number, int) for t in tokens)

    def test_number_at_end_of_input(self):
        tokens = tokenize("3 + 45")
        assert tokens[-1].number == 45

    def test_int32_max_literal(self):
        assert tokenize("2147483647")[0].number == 2147483647

    def test_literal_overflow(self):
        with pytest.raises(NumericOverflow) as exc_info:
            tokenize("2147483648")
        assert exc_info.value.code == "E101"
        assert exc_info.value.value == 2147483648

    def test_unbounded_range_accepts_big_literal(self):
        tokens = tokenize("99999999999999999999", int_range=IntRange.signed(0))
        assert tokens[0].number == 99999999999999999999

    def test_narrow_range(self):
        with pytest.raises(NumericOverflow):
            tokenize("128", int_range=IntRange.signed(8))
        assert tokenize("127", int_range=IntRange.signed(8))[0].number == 127


class TestLexerSilentSkip:
    def test_square_marker(self):
        assert kinds("s") == [TokenKind.SQR]

    def test_sqr_word(self):
        assert kinds("sqr(4)") == [
            TokenKind.SQR,
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
        ]

    def test_other_letters_dropped(self):
        assert lex("abc") == []

    def test_unknown_punctuation_dropped(self):
        assert kinds("1 & 2 ^ 3") == [TokenKind.NUMBER] * 3

    def test_any_word_starting_with_s_is_square(self):
        assert kinds("sum") == [TokenKind.SQR]

    def test_s_inside_word(self):
        assert kinds("abs") == [TokenKind.SQR]

    def test_uppercase_s_is_not_marker(self):
        assert lex("S") == []

    def test_non_ascii_digit_dropped(self):
        assert lex("²") == []


class TestLexerStrict:
    def test_strict_accepts_known_characters(self):
        assert kinds("s(1 + 2)", strict=True)[0] == TokenKind.SQR

    def test_strict_rejects_sqr_spelling(self):
        with pytest.raises(UnknownCharacter) as exc_info:
            tokenize("sqr(4)", strict=True)
        assert exc_info.value.char == "q"
        assert exc_info.value.span.start_col == 2

    def test_strict_rejects_punctuation(self):
        with pytest.raises(UnknownCharacter, match="unexpected character"):
            tokenize("1 & 2", strict=True)


class TestLexerSpans:
    def test_columns(self):
        tokens = tokenize("12 + 3")
        assert (tokens[0].span.start_col, tokens[0].span.end_col) == (1, 2)
        assert (tokens[1].span.start_col, tokens[1].span.end_col) == (4, 4)
        assert (tokens[2].span.start_col, tokens[2].span.end_col) == (6, 6)

    def test_columns_count_skipped_characters(self):
        tokens = tokenize("sqr(4)")
        assert tokens[1].span.start_col == 4

    def test_newline_advances_line(self):
        tokens = tokenize("1 +\n 2")
        assert tokens[2].span.start_line == 2
        assert tokens[2].span.start_col == 2

    def test_filename(self):
        tokens = Lexer("1", "calc.txt").lex()
        assert str(tokens[0].span) == "calc.txt:1:1"
