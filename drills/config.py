"""Sample inputs for the chapter walkthroughs.

Defaults reproduce the values the original demo programs were written
against; CLI options override individual fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_VALUES = (1, 2, 3, 4, 5)
DEFAULT_TEXT = "hello world"
DEFAULT_TARGET = "l"


@dataclass
class TourSettings:
    """Inputs fed to each demo during a tour."""

    # None means prompt on the input stream
    celsius: Optional[float] = None

    x: int = 5
    y: int = 10
    values: list[int] = field(default_factory=lambda: list(DEFAULT_VALUES))
    text: str = DEFAULT_TEXT
    target: str = DEFAULT_TARGET
    factorial_n: int = 5
    max_ints: tuple[int, int] = (7, 10)
    max_floats: tuple[float, float] = (5.5, 3.3)

    rectangle: tuple[int, int] = (2, 3)
    complex_left: tuple[float, float] = (2.0, 3.0)
    complex_right: tuple[float, float] = (1.0, -5.0)
