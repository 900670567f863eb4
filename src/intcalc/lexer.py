"""Lexer for intcalc expressions.

Scans the whole input into a list of tokens before parsing starts. By
default any character that is not whitespace, a digit, an operator, a
bracket or the square marker is dropped silently; ``strict=True`` turns
those characters into UnknownCharacter errors instead.
"""

from __future__ import annotations

from intcalc.errors import UnknownCharacter
from intcalc.source import Span
from intcalc.tokens import SINGLE_CHAR_TOKENS, Token, TokenKind
from intcalc.types import INT32, IntRange

_DIGITS = frozenset("0123456789")


class Lexer:
    """Tokenizes an arithmetic expression."""

    def __init__(
        self,
        source: str,
        filename: str = "<expr>",
        *,
        strict: bool = False,
        int_range: IntRange = INT32,
    ) -> None:
        self.source = source
        self.filename = filename
        self.strict = strict
        self.int_range = int_range
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def lex(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if ch.isspace():
                self._advance()
            elif ch in _DIGITS:
                self._lex_number()
            elif ch in SINGLE_CHAR_TOKENS:
                start_line, start_col = self.line, self.col
                self._advance()
                self._emit(SINGLE_CHAR_TOKENS[ch], ch, start_line, start_col)
            else:
                self._skip_unknown(ch)
        return self.tokens

    # ── Helpers ───────────────────────────────────────────────────

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _span(self, start_line: int, start_col: int) -> Span:
        end_col = self.col - 1 if self.col > 1 else 1
        return Span(self.filename, start_line, start_col, self.line, end_col)

    def _emit(
        self, kind: TokenKind, value: str, start_line: int, start_col: int,
        number: int = 0,
    ) -> Token:
        tok = Token(kind, value, self._span(start_line, start_col), number)
        self.tokens.append(tok)
        return tok

    # ── Numbers ──────────────────────────────────────────────────

    def _lex_number(self) -> None:
        start_line = self.line
        start_col = self.col
        text = []
        while self.pos < len(self.source) and self.source[self.pos] in _DIGITS:
            text.append(self._advance())
        digits = ''.join(text)
        span = self._span(start_line, start_col)
        try:
            value = int(digits)
        except ValueError as exc:
            # Past the interpreter's int/str conversion digit limit
            raise self.int_range.overflow(digits, span, code="E101") from exc
        self.int_range.check(value, span, code="E101")
        self._emit(TokenKind.NUMBER, digits, start_line, start_col, value)

    # ── Unrecognized characters ──────────────────────────────────

    def _skip_unknown(self, ch: str) -> None:
        start_line = self.line
        start_col = self.col
        self._advance()
        if self.strict:
            raise UnknownCharacter(ch, self._span(start_line, start_col))


def tokenize(
    text: str,
    *,
    strict: bool = False,
    int_range: IntRange = INT32,
    filename: str = "<expr>",
) -> list[Token]:
    """Tokenize *text* in one call."""
    return Lexer(text, filename, strict=strict, int_range=int_range).lex()
