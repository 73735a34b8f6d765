"""Explicit success/failure values returned by calculator entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from advcalc.exceptions import CalculatorError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that stopped the operation."""

    error: CalculatorError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Re-raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
