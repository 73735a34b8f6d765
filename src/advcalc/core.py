"""Accumulators applying arithmetic and number-theory operations to a running value."""

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

from advcalc.config import (
    ARMSTRONG,
    BINARY_OPERATORS,
    CLASSIFY_MIN,
    FACTORIAL_ACTION,
    FACTORIAL_MAX,
    FACTORIAL_MIN,
    INT_MAX,
    INT_MIN,
    PERFECT,
)
from advcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    NumberOutOfRangeError,
    UnsupportedActionError,
    UnsupportedOperatorError,
    UnsupportedParameterError,
)
from advcalc.operations import (
    add,
    divide,
    factorial,
    is_armstrong,
    is_perfect,
    multiply,
    power,
    subtract,
    truncate_to_int,
)
from advcalc.result import Err, Ok, Result
from advcalc.validators import validate_number, validate_range, validate_symbol

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}

_UNARY_ACTIONS = string.digits + FACTORIAL_ACTION


@dataclass
class CalculatorState:
    """The single value an accumulator works on."""

    value: float = 0.0


class Accumulator:
    """
    Holds one floating-point value and applies binary operators to it in place.

    Every entry point returns a Result; a failed operation leaves the value
    exactly as it was.

    Example:
        >>> acc = Accumulator()
        >>> acc.apply(5, "+").is_ok()
        True
        >>> acc.apply(0, "/").is_ok()
        False
        >>> acc.value
        5.0
    """

    def __init__(self, initial_value: float = 0.0) -> None:
        self._state = CalculatorState(float(initial_value))

    @property
    def value(self) -> float:
        """Current accumulated value."""
        return self._state.value

    @value.setter
    def value(self, value: float) -> None:
        self._state.value = float(value)

    def set(self, value: float) -> Accumulator:
        """Replace the accumulated value without validation."""
        self.value = value
        return self

    def apply(self, operand: float, operator: str) -> Result[None]:
        """
        Apply ``value <operator> operand`` and store the result.

        Args:
            operand: Right-hand operand
            operator: One of ``+ - * /``

        Returns:
            Ok(None) on success, otherwise Err with one of
            DivisionByZeroError, UnsupportedOperatorError, InvalidInputError,
            or NumberOutOfRangeError when the result is not finite
        """
        try:
            result = self._compute(operand, operator)
        except CalculatorError as error:
            logger.info("Rejected %r %s %r: %s", self.value, operator, operand, error)
            return Err(error)

        logger.debug("%r %s %r = %r", self.value, operator, operand, result)
        self._state.value = result
        return Ok(None)

    def _compute(self, operand: float, operator: str) -> float:
        # Zero divisor is reported ahead of any other problem with the call.
        if operator == "/" and operand == 0:
            raise DivisionByZeroError(self.value)

        validate_symbol(operator, BINARY_OPERATORS, UnsupportedOperatorError)
        validate_number(operand)
        result = _BINARY[operator](self.value, operand)
        if not math.isfinite(result):
            raise NumberOutOfRangeError(
                result,
                reason=f"{self.value!r} {operator} {operand!r} does not give a finite number",
            )
        return result

    def __repr__(self) -> str:
        return f"Accumulator(value={self.value})"


class ExtendedAccumulator:
    """
    Accumulator with exponentiation, factorial and number classification.

    Wraps a base Accumulator and delegates binary operations to it. The unary
    operations and the classification query work on the value truncated
    toward zero, so -5.56 is treated as -5, not -6.

    Example:
        >>> calc = ExtendedAccumulator(3.7)
        >>> calc.apply_unary("2").is_ok()
        True
        >>> calc.value
        9.0
        >>> calc.classify("A").unwrap()
        True
    """

    def __init__(
        self, initial_value: float | None = None, accumulator: Accumulator | None = None
    ) -> None:
        """
        Create an accumulator, or wrap an existing one.

        Args:
            initial_value: Starting value for a new base accumulator (default 0.0)
            accumulator: Existing base accumulator to wrap, keeping its value

        Raises:
            ValueError: If both initial_value and accumulator are given
        """
        if accumulator is None:
            accumulator = Accumulator(0.0 if initial_value is None else initial_value)
        elif initial_value is not None:
            raise ValueError("Pass either initial_value or accumulator, not both")
        self._accumulator = accumulator

    @property
    def accumulator(self) -> Accumulator:
        """The wrapped base accumulator."""
        return self._accumulator

    @property
    def value(self) -> float:
        """Current accumulated value."""
        return self._accumulator.value

    @value.setter
    def value(self, value: float) -> None:
        self._accumulator.value = value

    def set(self, value: float) -> ExtendedAccumulator:
        """Replace the accumulated value without validation."""
        self._accumulator.set(value)
        return self

    def apply(self, operand: float, operator: str) -> Result[None]:
        """Apply a binary operator; see Accumulator.apply."""
        return self._accumulator.apply(operand, operator)

    def apply_unary(self, action: str) -> Result[None]:
        """
        Replace the value with a power or the factorial of its integer part.

        Args:
            action: A digit ``0``-``9`` raises the integer part to that power;
                ``!`` takes its factorial, which needs 0 <= value <= 10

        Returns:
            Ok(None) on success, otherwise Err with UnsupportedActionError or
            NumberOutOfRangeError
        """
        try:
            result = self._compute_unary(action)
        except CalculatorError as error:
            logger.info("Rejected action %r on %r: %s", action, self.value, error)
            return Err(error)

        logger.debug("action %r on %r = %r", action, self.value, result)
        self._accumulator.value = result
        return Ok(None)

    def _compute_unary(self, action: str) -> float:
        validate_symbol(action, _UNARY_ACTIONS, UnsupportedActionError)
        current = self.value

        if action == FACTORIAL_ACTION:
            validate_range(
                current,
                FACTORIAL_MIN,
                FACTORIAL_MAX,
                reason=(
                    f"Number '{current:.2f}' can't be used to calculate a factorial "
                    f"because it's not in a range [{FACTORIAL_MIN:g}, {FACTORIAL_MAX:g}]"
                ),
            )
            return float(factorial(truncate_to_int(current)))

        result = power(truncate_to_int(current), int(action))
        validate_range(
            result,
            INT_MIN,
            INT_MAX,
            reason=(
                f"Number '{current:.2f}' raised to {action} is outside "
                f"[{INT_MIN}, {INT_MAX}]"
            ),
        )
        return float(result)

    def classify(self, kind: str) -> Result[bool]:
        """
        Check whether the integer part of the value is an Armstrong or perfect number.

        Does not modify the value.

        Args:
            kind: ``A`` for Armstrong, ``P`` for perfect

        Returns:
            Ok(bool) on success, otherwise Err with NumberOutOfRangeError when
            the integer part is below 1, or UnsupportedParameterError
        """
        current = self.value
        try:
            number = truncate_to_int(current)
            validate_range(
                number,
                CLASSIFY_MIN,
                reason=(
                    f"Integer part of current value ({current:.2f}) can't be smaller "
                    f"than {CLASSIFY_MIN} when checking Armstrong or perfect numbers"
                ),
            )
            validate_symbol(kind, ARMSTRONG + PERFECT, UnsupportedParameterError)
        except CalculatorError as error:
            logger.info("Rejected classification %r of %r: %s", kind, current, error)
            return Err(error)

        check = is_armstrong if kind == ARMSTRONG else is_perfect
        return Ok(check(number))

    def __repr__(self) -> str:
        return f"ExtendedAccumulator(value={self.value})"
