"""Tests for the mini calculator driver.

The driver writes to a rich Console; each test builds one over a string
buffer and reads back what was printed.
"""

import io

import pytest
from rich.console import Console

from drills.calculator import PROMPT, evaluate, evaluate_expression, parse_expression, run_calculator


@pytest.fixture
def sink():
    """Console writing into a buffer, plus the buffer."""
    buf = io.StringIO()
    return Console(file=buf, width=120), buf


def run(sink, text):
    console, buf = sink
    calc = run_calculator(console, io.StringIO(text))
    return calc, buf.getvalue()


# --- Scenarios from the original program (3 tests) ---

def test_addition_line(sink):
    calc, output = run(sink, "10 + 5\n")
    assert "10 + 5 = 15" in output
    assert calc.value == pytest.approx(15.0)


def test_division_by_zero(sink):
    calc, output = run(sink, "4 / 0\n")
    assert "Error: division by zero" in output
    assert calc.value is None


def test_invalid_operator(sink):
    calc, output = run(sink, "3 & 2\n")
    assert "Error: invalid operator '&'" in output
    assert not calc.ok


# --- Arithmetic (4 tests) ---

@pytest.mark.parametrize("text, line", [
    ("7 - 10", "7 - 10 = -3"),
    ("2 * -3", "2 * -3 = -6"),
    ("10 / 4", "10 / 4 = 2.5"),
    ("10 / 3", "10 / 3 = 3.33333"),
])
def test_operations(text, line):
    assert evaluate_expression(text).line == line


def test_decimal_operands():
    assert evaluate_expression("1.5 + 2.25").line == "1.5 + 2.25 = 3.75"


def test_operator_without_spaces():
    assert evaluate_expression("10+5").line == "10 + 5 = 15"


def test_evaluate_direct():
    calc = evaluate(9, "*", 3)
    assert calc.value == pytest.approx(27.0)
    assert calc.op == "*"


# --- Parsing (3 tests) ---

def test_parse_keeps_unknown_symbol():
    assert parse_expression(" 3 & 2 ") == (3.0, "&", 2.0)


@pytest.mark.parametrize("text", ["", "abc", "2 + + 3", "10 5", "1 + 2 + 3"])
def test_parse_malformed(text):
    with pytest.raises(ValueError, match="malformed"):
        parse_expression(text)


def test_malformed_input_is_reported(sink):
    calc, output = run(sink, "ten plus five\n")
    assert calc is None
    assert "Error: malformed input 'ten plus five'" in output


# --- Prompt and end of input (2 tests) ---

def test_prompt_is_written(sink):
    _, output = run(sink, "1 + 1\n")
    assert output.startswith(PROMPT.rstrip())


def test_empty_stream(sink):
    calc, output = run(sink, "")
    assert calc is None
    assert "Error: malformed input ''" in output


# --- Verbatim output (2 tests) ---

def test_narrow_console_does_not_wrap():
    buf = io.StringIO()
    calc = run_calculator(Console(file=buf, width=10), io.StringIO("1000000 + 2000000\n"))
    assert calc is not None
    assert "1e+06 + 2e+06 = 3e+06" in buf.getvalue()


def test_emoji_codes_are_echoed(sink):
    calc, output = run(sink, ":thumbs_up:\n")
    assert calc is None
    assert "Error: malformed input ':thumbs_up:'" in output
