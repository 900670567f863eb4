"""Single-call entry points: text in, integer (or error) out."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from intcalc.config import CalcConfig
from intcalc.errors import CalcError
from intcalc.evaluator import Evaluator
from intcalc.lexer import Lexer
from intcalc.parser import Parser

logger = logging.getLogger("intcalc.calculator")


@dataclass
class CalcResult:
    """Outcome of a calculation: a value or the error that aborted it."""

    ok: bool
    value: int | None = None
    error: CalcError | None = None


def calculate(
    text: str,
    *,
    strict: bool | None = None,
    config: CalcConfig | None = None,
    filename: str = "<expr>",
) -> int:
    """Lex, parse and evaluate *text*.

    Raises a CalcError subclass on the first failure; nothing partial is
    ever returned. *strict* overrides ``config.lexer.strict`` when given.
    """
    config = config or CalcConfig()
    if strict is None:
        strict = config.lexer.strict
    int_range = config.arithmetic.int_range

    tokens = Lexer(text, filename, strict=strict, int_range=int_range).lex()
    logger.debug("lexed %d token(s) from %r", len(tokens), text)
    expr = Parser(tokens, filename, max_depth=config.parser.max_depth).parse()
    logger.debug("parsed %s", type(expr).__name__)
    value = Evaluator(int_range).evaluate(expr)
    logger.debug("evaluated %r -> %d", text, value)
    return value


def calculate_result(
    text: str,
    *,
    strict: bool | None = None,
    config: CalcConfig | None = None,
    filename: str = "<expr>",
) -> CalcResult:
    """Like calculate(), but reports failure in the result instead of raising."""
    try:
        value = calculate(text, strict=strict, config=config, filename=filename)
    except CalcError as e:
        logger.debug("calculation failed: [%s] %s", e.code, e.message)
        return CalcResult(ok=False, error=e)
    return CalcResult(ok=True, value=value)
