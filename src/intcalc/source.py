"""Span tracking for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A range within an input expression (1-indexed, inclusive)."""

    file: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def __str__(self) -> str:
        return f"{self.file}:{self.start_line}:{self.start_col}"

    def to(self, end: Span) -> Span:
        """Return a span covering from the start of self to the end of *end*."""
        return Span(
            self.file,
            self.start_line, self.start_col,
            end.end_line, end.end_col,
        )


def line_at(source: str, n: int) -> str | None:
    """Return the 1-indexed line of *source*, or None if out of range."""
    lines = source.splitlines()
    if 1 <= n <= len(lines):
        return lines[n - 1]
    return None
