"""Binary arithmetic operators and number-theory helpers."""

import math

from advcalc.config import INT_MAX, INT_MIN
from advcalc.exceptions import DivisionByZeroError, NumberOutOfRangeError


def add(a: float, b: float) -> float:
    """Return a + b."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return a * b."""
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Accumulator.apply reports a zero divisor before dispatching here; the
    guard below serves direct callers.

    Properties:
        - Identity: divide(a, 1) == a
        - Zero dividend: divide(0, b) == 0 (for b != 0)

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def truncate_to_int(value: float) -> int:
    """
    Drop the fractional part of value, rounding toward zero.

    This is not floor: truncate_to_int(-5.5) == -5.

    Raises:
        NumberOutOfRangeError: If value is NaN, infinite, or its integer
            part does not fit a signed 32-bit integer
    """
    if not math.isfinite(value):
        raise NumberOutOfRangeError(value, reason=f"Number {value} has no integer part")

    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise NumberOutOfRangeError(
            value,
            INT_MIN,
            INT_MAX,
            reason=f"Integer part of {value:.2f} is outside [{INT_MIN}, {INT_MAX}]",
        )

    return number


def power(base: int, exponent: int) -> int:
    """
    Raise base to a non-negative integer exponent by binary exponentiation.

    The bits of exponent are consumed right to left: the running result is
    multiplied by the current square of base whenever the low bit is set.

    Properties:
        - Zero exponent: power(a, 0) == 1 (including power(0, 0))
        - Identity: power(a, 1) == a

    Args:
        base: The base number
        exponent: The exponent, must be >= 0

    Returns:
        base raised to exponent
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = 1
    while True:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent == 0:
            return result
        base *= base


def factorial(n: int) -> int:
    """Return n! with 0! == 1! == 1."""
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def digit_count(n: int) -> int:
    """Count the decimal digits of n. digit_count(0) == 0."""
    n = abs(n)
    count = 0
    while n != 0:
        count += 1
        n //= 10
    return count


def is_armstrong(n: int) -> bool:
    """
    Check whether n equals the sum of its digits each raised to the digit count.

    Every single-digit positive number is an Armstrong number; 153, 370, 371
    and 407 are the three-digit ones.
    """
    digits = digit_count(n)
    total = 0
    remaining = n
    while remaining > 0:
        total += power(remaining % 10, digits)
        remaining //= 10
    return total == n


def is_perfect(n: int) -> bool:
    """
    Check whether n equals the sum of its divisors in [1, n).

    1 is never perfect since it has no such divisors. Divisors are found in
    pairs (i, n // i) with i <= sqrt(n), so the check is O(sqrt(n)).
    """
    if n < 2:
        return False

    total = 1
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            total += i
            if i != n // i:
                total += n // i
    return total == n
