"""Solved option, string, list and generic exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None for invalid hours."""
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!'."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' with 'balloons'."""
    return text.replace("cars", "balloons")


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T