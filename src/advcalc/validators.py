"""Input validation functions with strict type checking."""

import math
from typing import TypeVar

from advcalc.exceptions import (
    InvalidInputError,
    NumberOutOfRangeError,
    UnsupportedSymbolError,
)

T = TypeVar("T", int, float)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, not a number, or an
            integer too large to convert to float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, int):
        try:
            float(value)
        except OverflowError as exc:
            raise InvalidInputError(
                f"{value.bit_length()}-bit integer", "Integer too large to convert to float"
            ) from exc

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_symbol(
    symbol: str, allowed: str, error: type[UnsupportedSymbolError]
) -> str:
    """
    Validate that a symbol is one of the characters in ``allowed``.

    Args:
        symbol: The operator, action or parameter supplied by the caller
        allowed: String of accepted single-character symbols
        error: Exception class raised for anything else

    Returns:
        The validated symbol

    Raises:
        UnsupportedSymbolError: The ``error`` subclass, naming the symbol
    """
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in allowed:
        raise error(symbol)

    return symbol


def validate_range(
    value: T,
    min_val: float | None = None,
    max_val: float | None = None,
    reason: str | None = None,
) -> T:
    """
    Validate that a value is within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        reason: Message for the raised error (a generic one if omitted)

    Returns:
        The validated value

    Raises:
        NumberOutOfRangeError: If value is NaN or outside the range
    """
    # NaN compares false against both bounds
    if isinstance(value, float) and math.isnan(value):
        raise NumberOutOfRangeError(value, min_val, max_val, reason)

    if min_val is not None and value < min_val:
        raise NumberOutOfRangeError(value, min_val, max_val, reason)

    if max_val is not None and value > max_val:
        raise NumberOutOfRangeError(value, min_val, max_val, reason)

    return value
