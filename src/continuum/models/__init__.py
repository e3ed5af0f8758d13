"""SQLModel table exports."""

from .habit import CheckIn, Habit

__all__ = [
    "CheckIn",
    "Habit",
]
