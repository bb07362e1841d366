"""A student record ordered by score, then by name."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass
class Student:
    """A named student with an integer score."""

    name: str
    score: int

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self.score, self.name) < (other.score, other.name)

    def __str__(self) -> str:
        return f"Student: {self.name} {self.score}"