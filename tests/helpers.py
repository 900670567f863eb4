"""Shared test helpers for the intcalc test suite."""

from __future__ import annotations

from intcalc.ast_nodes import Expr
from intcalc.lexer import Lexer
from intcalc.parser import Parser
from intcalc.source import Span

SPAN = Span("<test>", 1, 1, 1, 1)


def parse(source: str, *, max_depth: int | None = None) -> Expr:
    """Lex and parse source, return the expression tree."""
    tokens = Lexer(source, "<test>").lex()
    if max_depth is None:
        return Parser(tokens, "<test>").parse()
    return Parser(tokens, "<test>", max_depth=max_depth).parse()
