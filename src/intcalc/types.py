"""Fixed-width integer ranges used by the lexer and evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from intcalc.errors import NumericOverflow

if TYPE_CHECKING:
    from intcalc.source import Span


@dataclass(frozen=True)
class IntRange:
    """Inclusive bounds of a machine integer; None means unbounded."""

    low: int | None
    high: int | None

    @classmethod
    def signed(cls, bits: int) -> IntRange:
        """Two's-complement range for *bits*; 0 gives an unbounded range."""
        if bits < 0:
            raise ValueError(f"bit width must be non-negative, got {bits}")
        if bits == 0:
            return cls(None, None)
        return cls(-(1 << (bits - 1)), (1 << (bits - 1)) - 1)

    def contains(self, value: int) -> bool:
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True

    def overflow(
        self, value: int | str, span: Span | None = None, *, code: str | None = None,
    ) -> NumericOverflow:
        """Build the error reported when *value* falls outside this range."""
        return NumericOverflow(value, self.low, self.high, span, code=code)

    def check(self, value: int, span: Span | None = None, *, code: str | None = None) -> int:
        """Return *value* unchanged, or raise NumericOverflow if out of range."""
        if not self.contains(value):
            raise self.overflow(value, span, code=code)
        return value


INT32 = IntRange.signed(32)
