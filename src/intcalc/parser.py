"""Parser for intcalc expressions.

Recursive descent over three precedence tiers:

    Expression := Term { ('+' | '-') Term }
    Term       := Factor { ('*' | '/' | '%') Factor }
    Factor     := Number
                | '(' Expression ')'
                | '+' Factor
                | '-' Factor
                | 's' '(' Expression ')'

Binary operators fold to the left, so ``9 - 3 - 2`` is ``(9 - 3) - 2``.

Unary minus keeps its historical two-way behavior: directly before a
number it yields ``0 - n``; before anything else it parses a factor *and*
the following term and subtracts them, so ``-(5) 2`` evaluates to 3 and
``-(5)`` alone is an error.
"""

from __future__ import annotations

import sys

from intcalc.ast_nodes import (
    BINARY_KIND_FOR_TOKEN,
    BinaryKind,
    BinaryOp,
    Constant,
    Expr,
    Square,
)
from intcalc.errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from intcalc.source import Span
from intcalc.tokens import (
    EXPRESSION_OPERATORS,
    TERM_OPERATORS,
    Token,
    TokenKind,
)

DEFAULT_MAX_DEPTH = 100
# A nesting level costs up to four interpreter frames.
MAX_DEPTH_LIMIT = sys.getrecursionlimit() // 5


class Parser:
    """Parses a list of tokens into an expression tree."""

    def __init__(
        self,
        tokens: list[Token],
        filename: str = "<expr>",
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.tokens = tokens
        self.filename = filename
        self.max_depth = min(max_depth, MAX_DEPTH_LIMIT)
        self.pos = 0
        self.depth = 0

    # ── Token access ─────────────────────────────────────────────

    def _current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _end_span(self) -> Span:
        """Zero-width span just past the last token."""
        if not self.tokens:
            return Span(self.filename, 1, 1, 1, 1)
        last = self.tokens[-1].span
        return Span(
            self.filename,
            last.end_line, last.end_col + 1,
            last.end_line, last.end_col + 1,
        )

    def _expect(self, kind: TokenKind, context: str) -> Token:
        tok = self._current()
        if tok is None:
            raise UnexpectedEndOfInput(context, self._end_span())
        if tok.kind != kind:
            raise UnexpectedToken(f"{context}, got {tok.value!r}", tok.span)
        return self._advance()

    # ── Entry point ──────────────────────────────────────────────

    def parse(self) -> Expr:
        """Parse the whole token list; every token must be consumed."""
        if not self.tokens:
            raise UnexpectedEndOfInput("expected an expression", self._end_span())
        expr = self._parse_expression()
        tok = self._current()
        if tok is not None:
            raise UnexpectedToken(f"trailing input {tok.value!r}", tok.span)
        return expr

    # ── Grammar rules ────────────────────────────────────────────

    def _parse_expression(self) -> Expr:
        expr = self._parse_term()
        while (tok := self._current()) is not None and tok.kind in EXPRESSION_OPERATORS:
            self._advance()
            right = self._parse_term()
            expr = BinaryOp(
                BINARY_KIND_FOR_TOKEN[tok.kind], expr, right,
                expr.span.to(right.span),
            )
        return expr

    def _parse_term(self) -> Expr:
        expr = self._parse_factor()
        while (tok := self._current()) is not None and tok.kind in TERM_OPERATORS:
            self._advance()
            right = self._parse_factor()
            expr = BinaryOp(
                BINARY_KIND_FOR_TOKEN[tok.kind], expr, right,
                expr.span.to(right.span),
            )
        return expr

    def _parse_factor(self) -> Expr:
        tok = self._current()
        if tok is None:
            raise UnexpectedEndOfInput("expected an operand", self._end_span())
        if self.depth >= self.max_depth:
            raise NestingTooDeep(self.max_depth, tok.span)
        self.depth += 1
        try:
            return self._parse_factor_at(tok)
        finally:
            self.depth -= 1

    def _parse_factor_at(self, tok: Token) -> Expr:
        match tok.kind:
            case TokenKind.NUMBER:
                self._advance()
                return Constant(tok.number, tok.span)

            case TokenKind.LPAREN:
                self._advance()
                expr = self._parse_expression()
                self._expect(TokenKind.RPAREN, "expected ')'")
                return expr

            case TokenKind.PLUS:
                self._advance()
                return self._parse_factor()

            case TokenKind.MINUS:
                return self._parse_negation(tok)

            case TokenKind.SQR:
                self._advance()
                self._expect(TokenKind.LPAREN, "expected '(' after 'sqr'")
                operand = self._parse_expression()
                close = self._expect(
                    TokenKind.RPAREN, "expected ')' after expression inside 'sqr'",
                )
                return Square(operand, tok.span.to(close.span))

            case TokenKind.STAR | TokenKind.SLASH | TokenKind.PERCENT:
                raise UnexpectedToken(
                    f"operator {tok.value!r} cannot start an operand", tok.span,
                )

            case TokenKind.RPAREN:
                raise UnexpectedToken("expected an operand, got ')'", tok.span)

        raise UnexpectedToken(f"unexpected {tok.kind.name}", tok.span)

    def _parse_negation(self, minus: Token) -> Expr:
        self._advance()
        nxt = self._current()
        if nxt is not None and nxt.kind == TokenKind.NUMBER:
            self._advance()
            return BinaryOp(
                BinaryKind.SUBTRACT,
                Constant(0, minus.span),
                Constant(nxt.number, nxt.span),
                minus.span.to(nxt.span),
            )
        left = self._parse_factor()
        right = self._parse_term()
        return BinaryOp(
            BinaryKind.SUBTRACT, left, right, minus.span.to(right.span),
        )


def parse(
    tokens: list[Token],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    filename: str = "<expr>",
) -> Expr:
    """Parse *tokens* in one call."""
    return Parser(tokens, filename, max_depth=max_depth).parse()
