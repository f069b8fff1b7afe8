"""Solved quizzes: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(enum.Enum):
    """What to do to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; count is how many times 'bar' is appended."""

    kind: CommandKind
    count: int = 0


def _apply(text: str, command: Command) -> str:
    if command.kind is CommandKind.UPPERCASE:
        return text.upper()
    if command.kind is CommandKind.TRIM:
        return text.strip()
    return text + "bar" * command.count


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        grade = self.grade
        if isinstance(grade, float) and grade.is_integer():
            grade = int(grade)
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {grade}"