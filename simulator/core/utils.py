"""
Utilities module for the simulator.

Provides common utility functions and helpers, including console printing
with rich formatting, the singleton metaclass, and the integer rounding
rules used by the stat formulas.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


# ---- Singleton Metaclass ----


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass that returns the same instance every time."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        elif args or kwargs:
            # Later calls with arguments re-initialize, e.g. a new data directory.
            cls._instances[cls].__init__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls) -> None:
        """Forgets the shared instance of this class."""
        cls._instances.pop(cls, None)


# ---- Numeric Helpers ----


def percent_of(value: float, pct: float) -> int:
    """
    Applies a percentage change to a value and floors the result.

    Args:
        value (float): The value to change.
        pct (float): The percentage to add (negative to subtract).

    Returns:
        int: floor(value * (1 + pct / 100)).

    """
    # Multiply before dividing so integer inputs floor exactly.
    return math.floor(value * (100 + pct) / 100)


def round_half_up(value: float | Fraction) -> int:
    """Rounds to the nearest integer, halves away from zero for positives. Exact for Fractions."""
    return math.floor(value + Fraction(1, 2))


def make_bar(current: float, maximum: float, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (float): The current value.
        maximum (float): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    # Compute the filled part of the bar.
    filled = int((current / max(1, maximum)) * length)
    filled = min(max(filled, 0), length)
    # Compute the empty part of the bar.
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
