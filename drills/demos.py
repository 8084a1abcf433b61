"""Walkthrough steps, one per exercise.

Each demo takes (console, stream, settings), writes its lines to the console
and returns True on success. Only the steps that read from the stream can
fail; they report the problem on the console and return False.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from drills import display
from drills.calculator import run_calculator
from drills.config import TourSettings
from drills.display import emit
from drills.models import ComplexNumber, Rectangle
from drills.scalars import (
    celsius_to_fahrenheit,
    count_occurrences,
    double_elements,
    factorial,
    maximum,
    sum_of_sequence,
    swap,
)


def demo_temperature(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    emit(console, "Temperature Converter")
    celsius = settings.celsius
    if celsius is None:
        emit(console, "Enter temperature in Celsius: ", end="")
        raw = stream.readline()
        try:
            celsius = float(raw)
        except ValueError:
            emit(console, f"Error: malformed input '{raw.strip()}'")
            return False
    emit(console, display.temperature_line(celsius, celsius_to_fahrenheit(celsius)))
    return True


def demo_swap(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    before = (settings.x, settings.y)
    emit(console, *display.swap_lines(before, swap(*before)))
    return True


def demo_sum(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    total = sum_of_sequence(settings.values)
    emit(
        console,
        display.sum_line(total),
        display.sum_line(total, label="Sum of array elements using pointer"),
    )
    return True


def demo_count(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    n = count_occurrences(settings.text, settings.target)
    emit(console, display.count_line(settings.text, settings.target, n))
    return True


def demo_factorial(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    n = settings.factorial_n
    emit(console, display.factorial_line(n, factorial(n)))
    return True


def demo_max(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    for x, y in (settings.max_ints, settings.max_floats):
        emit(console, display.max_line(x, y, maximum(x, y)))
    return True


def demo_double(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    emit(console, *display.element_lines(double_elements(settings.values)))
    return True


def demo_calculator(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    emit(console, "", "Mini Calculator")
    return run_calculator(console, stream) is not None


def demo_rectangle(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    r = Rectangle(*settings.rectangle)
    emit(console, *display.rectangle_lines(r.width, r.height, r.area(), r.perimeter(), r.is_square()))
    return True


def demo_complex(console: Console, stream: TextIO, settings: TourSettings) -> bool:
    left = ComplexNumber(*settings.complex_left)
    right = ComplexNumber(*settings.complex_right)
    emit(console, display.complex_sum_line(str(left), str(right), str(left + right)))
    return True
