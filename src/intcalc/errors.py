"""Error taxonomy and rust-style colored diagnostic rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from intcalc.source import line_at

if TYPE_CHECKING:
    from intcalc.source import Span


class Severity(Enum):
    ERROR = "error"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",  # bold red
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points to a specific location in the input."""

    span: Span
    message: str
    style: str = "primary"  # "primary" or "secondary"


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and notes."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color
        self._sources: dict[str, str] = {}

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def add_source(self, filename: str, text: str) -> None:
        """Register the text behind *filename* so labels can quote it."""
        self._sources[filename] = text

    def _get_source_line(self, filename: str, line_num: int) -> str | None:
        text = self._sources.get(filename)
        if text is None:
            return None
        return line_at(text, line_num)

    def render(self, diag: Diagnostic) -> str:
        lines: list[str] = []
        sev = diag.severity
        color = _COLORS[sev]

        # Header: error[E202]: message
        lines.append(
            f"{self._c(color)}{sev.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        for label in diag.labels:
            span = label.span
            loc = f"{span.file}:{span.start_line}:{span.start_col}"
            lines.append(
                f"  {self._c(_BLUE)}-->{self._c(_RESET)} {loc}"
            )
            gutter = f"{span.start_line:>4}"
            lines.append(f"  {self._c(_BLUE)}   |{self._c(_RESET)}")

            source_line = self._get_source_line(span.file, span.start_line)
            if source_line is not None:
                lines.append(
                    f"  {self._c(_BLUE)}{gutter} |{self._c(_RESET)} {source_line}"
                )

            if span.start_line == span.end_line:
                caret_len = max(1, span.end_col - span.start_col + 1)
                padding = " " * (span.start_col - 1)
                carets = "^" * caret_len
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)} "
                    f"{padding}{self._c(color)}{carets}{self._c(_RESET)}"
                )

            if label.message:
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)}   "
                    f"{self._c(color)}{label.message}{self._c(_RESET)}"
                )

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        return "\n".join(lines)


# ── Error taxonomy ───────────────────────────────────────────────


class CalcError(Exception):
    """Base class for every lexing, parsing and evaluation failure."""

    code = "E000"

    def __init__(
        self,
        message: str,
        span: Span | None = None,
        *,
        notes: list[str] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.span = span
        self.notes = notes or []
        if code is not None:
            self.code = code

    def to_diagnostic(self) -> Diagnostic:
        labels = []
        if self.span is not None:
            labels.append(DiagnosticLabel(span=self.span, message=""))
        return Diagnostic(
            severity=Severity.ERROR,
            code=self.code,
            message=self.message,
            labels=labels,
            notes=list(self.notes),
        )


class UnknownCharacter(CalcError):
    """An unrecognized character, reported only by the strict lexer."""

    code = "E102"

    def __init__(self, char: str, span: Span | None = None) -> None:
        super().__init__(f"unexpected character: {char!r}", span)
        self.char = char


class UnexpectedEndOfInput(CalcError):
    """A grammar rule needed a token but the input was exhausted."""

    code = "E201"

    def __init__(self, expected: str = "", span: Span | None = None) -> None:
        message = "unexpected end of expression"
        if expected:
            message = f"{message}: {expected}"
        super().__init__(message, span)
        self.expected = expected


class UnexpectedToken(CalcError):
    """A token that cannot start or continue the current grammar rule."""

    code = "E202"

    def __init__(self, context: str, span: Span | None = None) -> None:
        super().__init__(f"unexpected token: {context}", span)
        self.context = context


class NestingTooDeep(CalcError):
    code = "E203"

    def __init__(self, limit: int, span: Span | None = None) -> None:
        super().__init__(
            f"expression nested deeper than {limit} levels", span,
        )
        self.limit = limit


class DivisionByZero(CalcError):
    code = "E301"

    def __init__(self, op: str = "/", span: Span | None = None) -> None:
        super().__init__(
            "division by zero", span,
            notes=[f"the right-hand operand of `{op}` evaluated to 0"],
        )
        self.op = op


class NumericOverflow(CalcError):
    """A literal or computed value left the representable integer range."""

    code = "E302"

    def __init__(
        self,
        value: int | str,
        low: int | None,
        high: int | None,
        span: Span | None = None,
        *,
        code: str | None = None,
    ) -> None:
        shown = str(value)
        if len(shown) > 40:
            shown = f"{shown[:20]}...{shown[-10:]}"
        notes = []
        if low is not None and high is not None:
            notes.append(f"values must lie within {low}..{high}")
        super().__init__(
            f"integer overflow: {shown} does not fit",
            span,
            notes=notes,
            code=code,
        )
        self.value = value
