"""Exercise catalog and chapter tours.

Each exercise belongs to a chapter and carries the demo that replays it.
A tour runs every demo of one chapter in registration order:

    chapter 1 — functions and basic types, ending with the mini calculator
    chapter 2 — user-defined types (rectangle, complex)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from rich.console import Console

from drills import demos
from drills.config import TourSettings
from drills.display import emit

Demo = Callable[[Console, TextIO, TourSettings], bool]

CHAPTERS: dict[int, str] = {
    1: "Chapter 1: Functions and Basic Types",
    2: "Chapter 2: User-Defined Types",
}


@dataclass
class ExerciseInfo:
    """Metadata about a registered exercise."""

    name: str
    chapter: int
    description: str
    demo: Demo
    interactive: bool = False


_EXERCISES: list[ExerciseInfo] = [
    ExerciseInfo("temperature", 1, "Convert Celsius to Fahrenheit", demos.demo_temperature, interactive=True),
    ExerciseInfo("swap", 1, "Exchange two values", demos.demo_swap),
    ExerciseInfo("sum", 1, "Sum the elements of an array", demos.demo_sum),
    ExerciseInfo("count", 1, "Count occurrences of a character in a string", demos.demo_count),
    ExerciseInfo("factorial", 1, "Factorial of a non-negative integer", demos.demo_factorial),
    ExerciseInfo("max", 1, "Larger of two ints, then of two floats", demos.demo_max),
    ExerciseInfo("double", 1, "Double every element of an array", demos.demo_double),
    ExerciseInfo("calculator", 1, "Evaluate 'a op b' for + - * /", demos.demo_calculator, interactive=True),
    ExerciseInfo("rectangle", 2, "Rectangle area, perimeter and squareness", demos.demo_rectangle),
    ExerciseInfo("complex", 2, "Add two complex numbers and format the sum", demos.demo_complex),
]


def list_exercises(chapter: Optional[int] = None) -> list[ExerciseInfo]:
    """All registered exercises, ordered by chapter then registration order.

    Args:
        chapter: Restrict to one chapter. None lists every chapter.
    """
    found = [e for e in _EXERCISES if chapter is None or e.chapter == chapter]
    # sorted() is stable, so registration order holds within a chapter
    return sorted(found, key=lambda e: e.chapter)


def load_exercise(name: str) -> Optional[ExerciseInfo]:
    """Look up a single exercise by name, None if it doesn't exist."""
    for e in _EXERCISES:
        if e.name == name:
            return e
    return None


def run_tour(
    chapter: int,
    console: Console,
    stream: TextIO,
    settings: Optional[TourSettings] = None,
) -> bool:
    """Run every demo of a chapter, stopping at the first one that fails.

    Returns True if all demos completed.

    Raises:
        ValueError: for an unknown chapter, or a demo rejecting its settings.
    """
    if chapter not in CHAPTERS:
        raise ValueError(f"unknown chapter: {chapter}. Choose: {', '.join(map(str, CHAPTERS))}")
    settings = settings or TourSettings()

    title = CHAPTERS[chapter]
    emit(console, title, "=" * len(title), "")

    for exercise in list_exercises(chapter):
        if not exercise.demo(console, stream, settings):
            return False
    return True
