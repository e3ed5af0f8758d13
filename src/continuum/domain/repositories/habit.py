"""Habit repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.habit import Habit
from ...services.streaks import StreakStats


class HabitNotFoundError(LookupError):
    """Raised when a habit id does not resolve to a stored habit."""

    def __init__(self, habit_id: int):
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id


class HabitRepository(Protocol):
    """Repository for managing habits and their check-ins."""

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_all(self) -> list[Habit]:
        """List habits in creation order."""
        ...

    def create(self, habit: Habit) -> Habit:
        """Create a new habit."""
        ...

    def update(self, habit: Habit) -> Habit:
        """Update an existing habit."""
        ...

    def delete(self, habit_id: int) -> None:
        """Delete a habit and its check-ins."""
        ...

    # Check-in operations
    def toggle_check_in(self, habit_id: int, day: str) -> bool:
        """Flip the check-in for ``day``; return True when now checked."""
        ...

    def list_check_in_days(self, habit_id: int, since: Optional[str] = None) -> list[str]:
        """Return check-in day-keys, newest first."""
        ...

    def get_streak_stats(self, habit_id: int, *, today: str, window_days: int) -> StreakStats:
        """Compute streaks over the window ending at ``today``."""
        ...
