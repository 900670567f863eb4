"""Evaluator: reduces an expression tree to a single integer.

Arithmetic follows fixed-width machine integers: division truncates toward
zero, the remainder takes the sign of the dividend, and every intermediate
result must stay inside the configured IntRange.
"""

from __future__ import annotations

from intcalc.ast_nodes import BinaryKind, BinaryOp, Constant, Expr, Square, fold
from intcalc.errors import DivisionByZero
from intcalc.types import INT32, IntRange


def truncating_div(lhs: int, rhs: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        return -quotient
    return quotient


def truncating_mod(lhs: int, rhs: int) -> int:
    """Remainder whose sign follows the dividend."""
    return lhs - rhs * truncating_div(lhs, rhs)


class Evaluator:
    """Evaluates expression trees within a fixed integer range."""

    def __init__(self, int_range: IntRange = INT32) -> None:
        self.int_range = int_range

    def evaluate(self, expr: Expr) -> int:
        return fold(
            expr,
            constant=self._eval_constant,
            binary=self._eval_binary,
            square=self._eval_square,
        )

    def _eval_constant(self, node: Constant) -> int:
        return self.int_range.check(node.value, node.span)

    def _eval_binary(self, node: BinaryOp, lhs: int, rhs: int) -> int:
        match node.kind:
            case BinaryKind.SUM:
                result = lhs + rhs
            case BinaryKind.SUBTRACT:
                result = lhs - rhs
            case BinaryKind.MULTIPLY:
                result = lhs * rhs
            case BinaryKind.DIVIDE:
                if rhs == 0:
                    raise DivisionByZero("/", node.right.span)
                result = truncating_div(lhs, rhs)
            case BinaryKind.MODULO:
                if rhs == 0:
                    raise DivisionByZero("%", node.right.span)
                result = truncating_mod(lhs, rhs)
            case _:
                raise TypeError(f"unknown binary operator: {node.kind!r}")
        return self.int_range.check(result, node.span)

    def _eval_square(self, node: Square, operand: int) -> int:
        return self.int_range.check(operand * operand, node.span)


def evaluate(expr: Expr, *, int_range: IntRange = INT32) -> int:
    """Evaluate *expr* in one call."""
    return Evaluator(int_range).evaluate(expr)
