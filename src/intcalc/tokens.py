"""Token kinds and token representation for the intcalc lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intcalc.source import Span


class TokenKind(Enum):
    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()

    # Functions
    SQR = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    span: Span
    number: int = 0  # value of a NUMBER token


# Reserved letter that spells the square function; the remaining letters of
# "sqr" are dropped by the lexer like any other unrecognized character.
SQUARE_MARKER = "s"

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    SQUARE_MARKER: TokenKind.SQR,
}

TERM_OPERATORS: frozenset[TokenKind] = frozenset({
    TokenKind.STAR,
    TokenKind.SLASH,
    TokenKind.PERCENT,
})

EXPRESSION_OPERATORS: frozenset[TokenKind] = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
})
