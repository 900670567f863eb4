"""intcalc: an integer arithmetic expression calculator."""

from intcalc.calculator import CalcResult, calculate, calculate_result
from intcalc.errors import (
    CalcError,
    DivisionByZero,
    NestingTooDeep,
    NumericOverflow,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnknownCharacter,
)

__version__ = "0.1.0"

__all__ = [
    "CalcError",
    "CalcResult",
    "DivisionByZero",
    "NestingTooDeep",
    "NumericOverflow",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UnknownCharacter",
    "calculate",
    "calculate_result",
]
