"""Value types for the drills exercises.

Rectangle, ComplexNumber, Operator, Calculation — the small typed records
that flow through the scalar demos, the calculator and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from drills.display import fmt_number


class Operator(str, Enum):
    """Calculator operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, a: float, b: float) -> float:
        """Apply the operator to two operands.

        Raises ZeroDivisionError for DIVIDE with b == 0; callers that need an
        error outcome instead check the divisor first.
        """
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        return a / b


ALL_OPERATORS = [Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle. Dimensions are stored verbatim, negatives included."""

    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height

    def perimeter(self) -> int:
        return 2 * (self.width + self.height)

    def is_square(self) -> bool:
        return self.width == self.height


@dataclass(frozen=True)
class ComplexNumber:
    """Complex number with a real and an imaginary part."""

    real: float
    imaginary: float

    def add(self, other: ComplexNumber) -> ComplexNumber:
        """Component-wise sum as a new instance."""
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def format(self) -> str:
        """Render as 'a + bi', or 'a - bi' when the imaginary part is negative."""
        if self.imaginary >= 0:
            return f"{fmt_number(self.real)} + {fmt_number(self.imaginary)}i"
        return f"{fmt_number(self.real)} - {fmt_number(-self.imaginary)}i"

    def __str__(self) -> str:
        return self.format()


@dataclass
class Calculation:
    """Outcome of one calculator dispatch.

    Exactly one of value/error is set. The operator is kept as the raw symbol
    so invalid operators can be echoed back.
    """

    a: float
    op: str
    b: float
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def line(self) -> str:
        """The single output line for this outcome."""
        if self.error is not None:
            return f"Error: {self.error}"
        return f"{fmt_number(self.a)} {self.op} {fmt_number(self.b)} = {fmt_number(self.value)}"

