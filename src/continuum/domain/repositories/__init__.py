"""Repository protocol definitions for domain layer."""

from .habit import HabitNotFoundError, HabitRepository

__all__ = [
    "HabitNotFoundError",
    "HabitRepository",
]
