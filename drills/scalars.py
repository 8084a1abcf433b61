"""Scalar utilities: single-pass computations over primitive inputs."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T", int, float)


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit.

    Formula: F = C * 9/5 + 32
    """
    return c * 9.0 / 5.0 + 32.0


def swap(a, b) -> tuple:
    """Return the pair exchanged."""
    return b, a


def sum_of_sequence(values: Sequence[int]) -> int:
    """Sum all elements. An empty sequence sums to 0."""
    total = 0
    for n in values:
        total += n
    return total


def count_occurrences(text: Sequence[str], target: str) -> int:
    """Count the positions in text equal to target.

    Args:
        text: A string, or any sequence of single characters.
        target: The character to look for.

    Raises:
        ValueError: if target is not exactly one character.
    """
    if len(target) != 1:
        raise ValueError(f"target must be a single character, got {target!r}")
    return sum(1 for ch in text if ch == target)


def factorial(n: int) -> int:
    """n! with factorial(0) == 1.

    Raises:
        ValueError: for negative n.
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    # Iterative so large n doesn't hit the recursion limit
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def maximum(x: T, y: T) -> T:
    """Return x if x >= y, else y."""
    if x >= y:
        return x
    return y


def double_elements(values: Sequence[int]) -> list[int]:
    """Each element times two, in order."""
    return [v * 2 for v in values]
