"""Operation providers for basic and scientific calculators.

Every operation follows IEEE-754 floating point semantics: division by zero
produces an infinity (or NaN for ``0 / 0``) and invalid powers such as a
negative base with a fractional exponent produce NaN. None of them raise.
"""

import math
from typing import Protocol

import numpy as np

BASIC_OPERATIONS = ("add", "subtract", "multiply", "power", "divide")
SCIENTIFIC_OPERATIONS = BASIC_OPERATIONS + ("sin", "cos", "tan")


def as_float(value: float) -> float:
    """Convert a number to a float, saturating values beyond the float range to an infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _float(value: float) -> np.float64:
    return np.float64(as_float(value))


class BasicOperations(Protocol):
    """Capability set of a basic calculator."""

    def add(self, value1: float, value2: float) -> float: ...

    def subtract(self, value1: float, value2: float) -> float: ...

    def multiply(self, value1: float, value2: float) -> float: ...

    def power(self, value1: float, value2: float) -> float: ...

    def divide(self, value1: float, value2: float) -> float: ...


class ScientificOperations(BasicOperations, Protocol):
    """Capability set of a scientific calculator, a superset of the basic one."""

    def sin(self, value: float) -> float: ...

    def cos(self, value: float) -> float: ...

    def tan(self, value: float) -> float: ...


class BasicOperationProvider:
    """Arithmetic on two operands."""

    def add(self, value1: float, value2: float) -> float:
        """Add two numbers.

        Args:
            value1: First addend
            value2: Second addend
        """
        with np.errstate(all="ignore"):
            return float(_float(value1) + _float(value2))

    def subtract(self, value1: float, value2: float) -> float:
        """Subtract the second number from the first.

        Args:
            value1: Minuend
            value2: Subtrahend
        """
        with np.errstate(all="ignore"):
            return float(_float(value1) - _float(value2))

    def multiply(self, value1: float, value2: float) -> float:
        """Multiply two numbers.

        Args:
            value1: First factor
            value2: Second factor
        """
        with np.errstate(all="ignore"):
            return float(_float(value1) * _float(value2))

    def power(self, value1: float, value2: float) -> float:
        """Raise the first number to the power of the second.

        Args:
            value1: Base
            value2: Exponent, may be fractional or negative
        """
        with np.errstate(all="ignore"):
            return float(np.power(_float(value1), _float(value2)))

    def divide(self, value1: float, value2: float) -> float:
        """Divide the first number by the second.

        Args:
            value1: Dividend
            value2: Divisor, zero yields an infinity or NaN
        """
        with np.errstate(all="ignore"):
            return float(np.divide(_float(value1), _float(value2)))


class ScientificOperationProvider:
    """Trigonometric operations plus the basic ones of a wrapped provider."""

    def __init__(self, basic: BasicOperations | None = None):
        self._basic = basic if basic is not None else BasicOperationProvider()

    @property
    def basic(self) -> BasicOperations:
        return self._basic

    def add(self, value1: float, value2: float) -> float:
        """Add two numbers."""
        return self._basic.add(value1, value2)

    def subtract(self, value1: float, value2: float) -> float:
        """Subtract the second number from the first."""
        return self._basic.subtract(value1, value2)

    def multiply(self, value1: float, value2: float) -> float:
        """Multiply two numbers."""
        return self._basic.multiply(value1, value2)

    def power(self, value1: float, value2: float) -> float:
        """Raise the first number to the power of the second."""
        return self._basic.power(value1, value2)

    def divide(self, value1: float, value2: float) -> float:
        """Divide the first number by the second."""
        return self._basic.divide(value1, value2)

    def sin(self, value: float) -> float:
        """Sine of an angle.

        Args:
            value: Angle in radians
        """
        with np.errstate(all="ignore"):
            return float(np.sin(_float(value)))

    def cos(self, value: float) -> float:
        """Cosine of an angle.

        Args:
            value: Angle in radians
        """
        with np.errstate(all="ignore"):
            return float(np.cos(_float(value)))

    def tan(self, value: float) -> float:
        """Tangent of an angle.

        Args:
            value: Angle in radians
        """
        with np.errstate(all="ignore"):
            return float(np.tan(_float(value)))
