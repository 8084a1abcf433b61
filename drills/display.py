"""Output line formats for the drills exercises.

Every line a demo or CLI command prints to stdout is built here so the wording
stays identical across the tour, the subcommands and the tests.
"""

from __future__ import annotations

from typing import Sequence, Union

from rich.console import Console

Number = Union[int, float]


def emit(console: Console, *lines: str, end: str = "\n") -> None:
    """Write lines exactly as given: no markup, emoji codes, highlighting or wrapping."""
    for line in lines:
        console.print(line, end=end, markup=False, emoji=False, highlight=False, soft_wrap=True)


def fmt_number(x: Number) -> str:
    """Format a number the way a default C++ ostream does.

    Ints print in full. Floats get six significant digits with trailing zeros
    dropped, so 15.0 -> '15', 10/3 -> '3.33333', 1e6 -> '1e+06'.
    """
    if isinstance(x, int):
        return str(x)
    return f"{x:g}"


def temperature_line(celsius: Number, fahrenheit: Number) -> str:
    return f"{fmt_number(celsius)} Celsius is {fmt_number(fahrenheit)} Fahrenheit."


def swap_lines(before: tuple, after: tuple) -> list[str]:
    return [
        f"Before swap: x = {fmt_number(before[0])}, y = {fmt_number(before[1])}",
        f"After swap: x = {fmt_number(after[0])}, y = {fmt_number(after[1])}",
    ]


def sum_line(total: Number, label: str = "Sum of array elements") -> str:
    return f"{label}: {fmt_number(total)}"


def count_line(text: str, target: str, count: int) -> str:
    return f"Number of '{target}' in \"{text}\": {count}"


def factorial_line(n: int, result: int) -> str:
    return f"Factorial of {n} is {result}"


def max_line(x: Number, y: Number, largest: Number) -> str:
    return f"Max of {fmt_number(x)} and {fmt_number(y)} is {fmt_number(largest)}"


def element_lines(values: Sequence[Number]) -> list[str]:
    """One value per line."""
    return [fmt_number(v) for v in values]


def rectangle_lines(width: int, height: int, area: int, perimeter: int, square: bool) -> list[str]:
    label = f"{width}x{height} rectangle"
    return [
        f"Area of {label}: {area}",
        f"Perimeter of {label}: {perimeter}",
        f"{label} is {'a square' if square else 'not a square'}",
    ]


def complex_sum_line(left: str, right: str, total: str) -> str:
    return f"({left}) + ({right}) = {total}"
