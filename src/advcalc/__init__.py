"""
Stateful calculator with an arithmetic layer and a number-theory layer.

Accumulator applies + - * / to a running value. ExtendedAccumulator wraps it
and adds integer exponentiation, factorial, and Armstrong/perfect number
classification. Entry points return Ok/Err results instead of raising.
"""

from advcalc.core import Accumulator, CalculatorState, ExtendedAccumulator
from advcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    NumberOutOfRangeError,
    UnsupportedActionError,
    UnsupportedOperatorError,
    UnsupportedParameterError,
    UnsupportedSymbolError,
)
from advcalc.logging_config import configure_logging
from advcalc.operations import (
    digit_count,
    factorial,
    is_armstrong,
    is_perfect,
    power,
    truncate_to_int,
)
from advcalc.result import Err, Ok, Result

__all__ = [
    "Accumulator",
    "CalculatorError",
    "CalculatorState",
    "DivisionByZeroError",
    "Err",
    "ExtendedAccumulator",
    "InvalidInputError",
    "NumberOutOfRangeError",
    "Ok",
    "Result",
    "UnsupportedActionError",
    "UnsupportedOperatorError",
    "UnsupportedParameterError",
    "UnsupportedSymbolError",
    "configure_logging",
    "digit_count",
    "factorial",
    "is_armstrong",
    "is_perfect",
    "power",
    "truncate_to_int",
]

__version__ = "0.1.0"
