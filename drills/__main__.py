"""CLI for the drills exercises.

Usage:
    python -m drills list                     # Show exercises
    python -m drills tour 1                   # Replay chapter 1 (prompts for Celsius)
    python -m drills tour 2                   # Replay chapter 2
    python -m drills convert 100              # 100 Celsius is 212 Fahrenheit.
    python -m drills count "hello world" -c l # Number of 'l' in "hello world": 3
    python -m drills calc 10 + 5              # 10 + 5 = 15
    python -m drills calc                     # Prompt for an expression on stdin
"""

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from drills import display
from drills.calculator import evaluate_expression, run_calculator
from drills.config import DEFAULT_TARGET, DEFAULT_TEXT, TourSettings
from drills.exercises import CHAPTERS, list_exercises, run_tour
from drills.models import ALL_OPERATORS, ComplexNumber, Rectangle
from drills.scalars import (
    celsius_to_fahrenheit,
    count_occurrences,
    double_elements,
    factorial,
    maximum,
    sum_of_sequence,
    swap,
)

app = typer.Typer(
    name="drills",
    help="Introductory programming exercises",
    no_args_is_help=True,
)
# Status and errors on stderr; exercise output on stdout, printed verbatim
console = Console(stderr=True)
out = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def _emit(*lines: str) -> None:
    for line in lines:
        out.print(line)


def _report(e: Exception) -> None:
    """Print a rejected argument in red. The message may quote user text."""
    console.print(f"[red]{escape(str(e))}[/red]")


@app.command("list")
def cmd_list(
    chapter: Optional[int] = typer.Option(None, "--chapter", "-c", help="Only show one chapter"),
) -> None:
    """Show available exercises."""
    exercises = list_exercises(chapter)
    if not exercises:
        console.print(f"[yellow]No exercises found for chapter {chapter}.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Exercises", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Chapter", justify="right")
    table.add_column("Description", min_width=30)
    table.add_column("Input", style="dim")

    for e in exercises:
        table.add_row(e.name, str(e.chapter), e.description, "stdin" if e.interactive else "")

    console.print()
    console.print(table)
    console.print()


@app.command("tour")
def cmd_tour(
    chapter: int = typer.Argument(1, help=f"Chapter to replay: {', '.join(map(str, CHAPTERS))}"),
    celsius: Optional[float] = typer.Option(None, "--celsius", help="Skip the temperature prompt"),
    text: str = typer.Option(DEFAULT_TEXT, "--text", help="String for the character count"),
    char: str = typer.Option(DEFAULT_TARGET, "--char", help="Character to count"),
) -> None:
    """Replay every exercise of a chapter in order."""
    settings = TourSettings(celsius=celsius, text=text, target=char)
    try:
        ok = run_tour(chapter, out, sys.stdin, settings)
    except ValueError as e:
        _report(e)
        raise typer.Exit(1)
    if not ok:
        raise typer.Exit(1)


@app.command("convert")
def cmd_convert(
    celsius: float = typer.Argument(help="Temperature in Celsius (use -- before negatives)"),
) -> None:
    """Convert Celsius to Fahrenheit."""
    _emit(display.temperature_line(celsius, celsius_to_fahrenheit(celsius)))


@app.command("swap")
def cmd_swap(
    x: float = typer.Argument(help="First value"),
    y: float = typer.Argument(help="Second value"),
) -> None:
    """Show two values before and after swapping."""
    _emit(*display.swap_lines((x, y), swap(x, y)))


@app.command("sum")
def cmd_sum(
    values: Optional[List[int]] = typer.Argument(None, help="Integers to add up"),
) -> None:
    """Sum a list of integers (0 when none are given)."""
    _emit(display.sum_line(sum_of_sequence(values or [])))


@app.command("count")
def cmd_count(
    text: str = typer.Argument(DEFAULT_TEXT, help="String to scan"),
    char: str = typer.Option(DEFAULT_TARGET, "--char", "-c", help="Character to count"),
) -> None:
    """Count occurrences of a character in a string."""
    try:
        n = count_occurrences(text, char)
    except ValueError as e:
        _report(e)
        raise typer.Exit(1)
    _emit(display.count_line(text, char, n))


@app.command("factorial")
def cmd_factorial(
    n: int = typer.Argument(help="Non-negative integer"),
) -> None:
    """Compute n!."""
    try:
        result = factorial(n)
    except ValueError as e:
        _report(e)
        raise typer.Exit(1)
    _emit(display.factorial_line(n, result))


@app.command("max")
def cmd_max(
    x: float = typer.Argument(help="First number"),
    y: float = typer.Argument(help="Second number"),
) -> None:
    """Show the larger of two numbers."""
    _emit(display.max_line(x, y, maximum(x, y)))


@app.command("double")
def cmd_double(
    values: Optional[List[int]] = typer.Argument(None, help="Integers to double"),
) -> None:
    """Print every value doubled, one per line."""
    _emit(*display.element_lines(double_elements(values or [])))


@app.command("rect")
def cmd_rect(
    width: int = typer.Argument(help="Rectangle width"),
    height: int = typer.Argument(help="Rectangle height"),
) -> None:
    """Show a rectangle's area, perimeter and whether it is a square."""
    r = Rectangle(width, height)
    _emit(*display.rectangle_lines(r.width, r.height, r.area(), r.perimeter(), r.is_square()))


@app.command("complex")
def cmd_complex(
    real1: float = typer.Argument(help="Real part of the first number"),
    imag1: float = typer.Argument(help="Imaginary part of the first number"),
    real2: float = typer.Argument(help="Real part of the second number"),
    imag2: float = typer.Argument(help="Imaginary part of the second number"),
) -> None:
    """Add two complex numbers."""
    left = ComplexNumber(real1, imag1)
    right = ComplexNumber(real2, imag2)
    _emit(display.complex_sum_line(str(left), str(right), str(left + right)))


@app.command("calc")
def cmd_calc(
    expr: Optional[List[str]] = typer.Argument(
        None,
        help=f"Expression 'a op b' with op one of {' '.join(o.value for o in ALL_OPERATORS)}; "
             "read from stdin when omitted",
    ),
) -> None:
    """Evaluate one arithmetic expression."""
    if not expr:
        if run_calculator(out, sys.stdin) is None:
            raise typer.Exit(1)
        return

    try:
        calc = evaluate_expression(" ".join(expr))
    except ValueError as e:
        _emit(f"Error: {e}")
        raise typer.Exit(1)
    _emit(calc.line)


if __name__ == "__main__":
    app()
