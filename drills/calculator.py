"""Mini calculator — one expression in, one line out.

Data flow per run:
1. Write the prompt to the console sink
2. Read one line from the input stream
3. Parse it into (a, operator symbol, b)
4. Dispatch on the operator, producing a Calculation
5. Write the Calculation's line to the sink

Division by zero and unknown operators are outcomes, not exceptions: they
come back as a Calculation with `error` set. Only input that cannot be parsed
at all is a failure (no Calculation is returned).
"""

from __future__ import annotations

import re
from typing import Optional, TextIO

from rich.console import Console

from drills.display import emit
from drills.models import Calculation, Operator

PROMPT = "Enter expression (e.g., 10 + 5): "

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
# Operands may touch the operator ("10+5"); the operator is any single
# symbol that cannot start a number.
_EXPR_RE = re.compile(rf"^\s*({_NUMBER})\s*([^\s\d.])\s*({_NUMBER})\s*$")


def parse_expression(text: str) -> tuple[float, str, float]:
    """Split 'a op b' into its operands and operator symbol.

    The operator symbol is returned as-is, valid or not; validation happens
    at dispatch so an unknown symbol can still be reported back.

    Raises:
        ValueError: if text is not two numbers around a single symbol.
    """
    m = _EXPR_RE.match(text)
    if not m:
        raise ValueError(f"malformed input '{text.strip()}'")
    return float(m.group(1)), m.group(2), float(m.group(3))


def evaluate(a: float, symbol: str, b: float) -> Calculation:
    """Dispatch one operation and return its outcome."""
    try:
        op = Operator(symbol)
    except ValueError:
        return Calculation(a=a, op=symbol, b=b, error=f"invalid operator '{symbol}'")

    if op is Operator.DIVIDE and b == 0:
        return Calculation(a=a, op=symbol, b=b, error="division by zero")

    return Calculation(a=a, op=op.value, b=b, value=op.apply(a, b))


def evaluate_expression(text: str) -> Calculation:
    """Parse and dispatch a single expression string without prompting."""
    a, symbol, b = parse_expression(text)
    return evaluate(a, symbol, b)


def run_calculator(console: Console, stream: TextIO) -> Optional[Calculation]:
    """Prompt, read one expression from stream and write the result to console.

    Returns the Calculation, or None if the input line was malformed (the
    error has already been written to the console).
    """
    emit(console, PROMPT, end="")
    line = stream.readline()

    try:
        calc = evaluate_expression(line)
    except ValueError as e:
        emit(console, f"Error: {e}")
        return None

    emit(console, calc.line)
    return calc
