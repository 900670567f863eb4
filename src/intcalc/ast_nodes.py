"""AST node definitions for intcalc expressions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Union

from intcalc.source import Span
from intcalc.tokens import TokenKind

T = TypeVar("T")


class BinaryKind(Enum):
    SUM = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"

    @property
    def symbol(self) -> str:
        return self.value


BINARY_KIND_FOR_TOKEN: dict[TokenKind, BinaryKind] = {
    TokenKind.PLUS: BinaryKind.SUM,
    TokenKind.MINUS: BinaryKind.SUBTRACT,
    TokenKind.STAR: BinaryKind.MULTIPLY,
    TokenKind.SLASH: BinaryKind.DIVIDE,
    TokenKind.PERCENT: BinaryKind.MODULO,
}


# ── Expressions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Constant:
    value: int
    span: Span


@dataclass(frozen=True)
class BinaryOp:
    kind: BinaryKind
    left: Expr
    right: Expr
    span: Span


@dataclass(frozen=True)
class Square:
    operand: Expr
    span: Span


Expr = Union[Constant, BinaryOp, Square]


# ── Traversal ────────────────────────────────────────────────────


def fold(
    expr: Expr,
    *,
    constant: Callable[[Constant], T],
    binary: Callable[[BinaryOp, T, T], T],
    square: Callable[[Square, T], T],
) -> T:
    """Reduce *expr* bottom-up, children left to right.

    Uses an explicit stack, so left-folded chains of any length are safe.
    """
    stack: list[tuple[Expr, bool]] = [(expr, False)]
    results: list[T] = []
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Constant):
            results.append(constant(node))
        elif isinstance(node, BinaryOp):
            if expanded:
                right = results.pop()
                left = results.pop()
                results.append(binary(node, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        elif isinstance(node, Square):
            if expanded:
                results.append(square(node, results.pop()))
            else:
                stack.append((node, True))
                stack.append((node.operand, False))
        else:
            raise TypeError(f"not an expression node: {type(node).__name__}")
    return results.pop()


def walk(expr: Expr) -> Iterator[tuple[Expr, int]]:
    """Yield (node, depth) pairs in pre-order."""
    stack: list[tuple[Expr, int]] = [(expr, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if isinstance(node, BinaryOp):
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        elif isinstance(node, Square):
            stack.append((node.operand, depth + 1))
