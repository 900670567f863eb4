"""AST-walking pretty-printer for intcalc expressions.

Produces canonical text: single spaces around binary operators, the square
function spelled ``sqr(...)``, and parentheses only where precedence or
left-associativity needs them. Re-parsing the output yields the same tree.
"""

from __future__ import annotations

from intcalc.ast_nodes import BinaryKind, BinaryOp, Constant, Expr, Square, fold

_PRECEDENCE: dict[BinaryKind, int] = {
    BinaryKind.SUM: 1,
    BinaryKind.SUBTRACT: 1,
    BinaryKind.MULTIPLY: 2,
    BinaryKind.DIVIDE: 2,
    BinaryKind.MODULO: 2,
}
_ATOM = 3


class CalcFormatter:
    """Formats expression trees back into source text."""

    def format(self, expr: Expr) -> str:
        text, _ = fold(
            expr,
            constant=self._format_constant,
            binary=self._format_binary,
            square=self._format_square,
        )
        return text

    def _format_constant(self, node: Constant) -> tuple[str, int]:
        return str(node.value), _ATOM

    def _format_binary(
        self, node: BinaryOp, left: tuple[str, int], right: tuple[str, int],
    ) -> tuple[str, int]:
        if _is_negated_literal(node):
            return f"-{right[0]}", _ATOM
        prec = _PRECEDENCE[node.kind]
        left_text, left_prec = left
        right_text, right_prec = right
        if left_prec < prec:
            left_text = f"({left_text})"
        if right_prec <= prec:
            right_text = f"({right_text})"
        return f"{left_text} {node.kind.symbol} {right_text}", prec

    def _format_square(self, node: Square, operand: tuple[str, int]) -> tuple[str, int]:
        return f"sqr({operand[0]})", _ATOM


def _is_negated_literal(node: BinaryOp) -> bool:
    """``0 - n`` with a literal n reads back identically as ``-n``."""
    return (
        node.kind is BinaryKind.SUBTRACT
        and isinstance(node.left, Constant)
        and node.left.value == 0
        and isinstance(node.right, Constant)
        and node.right.value >= 0
    )
