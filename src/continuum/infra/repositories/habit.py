"""SQLModel implementation of Habit repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.repositories.habit import HabitNotFoundError
from ...logging_config import get_logger
from ...models.habit import CheckIn, Habit
from ...services.days import is_valid_day_key
from ...services.habits import habit_schedule, streak_window_start
from ...services.streaks import StreakStats, compute_schedule_streak_stats

logger = get_logger(__name__)


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with self.session_factory() as session:
            obj = session.get(Habit, habit_id)
            if obj:
                session.expunge(obj)
            return obj

    def get_or_raise(self, habit_id: int) -> Habit:
        """Retrieve a habit by ID or raise ``HabitNotFoundError``."""
        habit = self.get_by_id(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    def list_all(self) -> list[Habit]:
        """List habits in creation order."""
        with self.session_factory() as session:
            statement = select(Habit).order_by(Habit.created_at, Habit.id)  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, habit: Habit) -> Habit:
        """Create a new habit."""
        with self.session_factory() as session:
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
        logger.info(
            "Habit created",
            extra={"habit_id": habit.id, "schedule_type": habit.schedule_type},
        )
        return habit

    def update(self, habit: Habit) -> Habit:
        """Update an existing habit's name and schedule."""
        if habit.id is None:
            raise HabitNotFoundError(-1)
        with self.session_factory() as session:
            existing = session.get(Habit, habit.id)
            if existing is None:
                raise HabitNotFoundError(habit.id)
            existing.name = habit.name
            existing.schedule_type = habit.schedule_type
            existing.days_of_week = habit.days_of_week
            session.add(existing)
            session.commit()
            session.refresh(existing)
            session.expunge(existing)
        logger.info("Habit updated", extra={"habit_id": existing.id})
        return existing

    def delete(self, habit_id: int) -> None:
        """Delete a habit and its check-ins."""
        with self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                raise HabitNotFoundError(habit_id)
            session.delete(habit)
            session.commit()
        logger.info("Habit deleted", extra={"habit_id": habit_id})

    # Check-in operations
    def toggle_check_in(self, habit_id: int, day: str) -> bool:
        """Flip the check-in for ``day``; return True when now checked."""
        if not is_valid_day_key(day):
            raise ValueError(f"Invalid day key: {day!r}")

        with self.session_factory() as session:
            if session.get(Habit, habit_id) is None:
                raise HabitNotFoundError(habit_id)

            existing = session.exec(
                select(CheckIn).where(CheckIn.habit_id == habit_id).where(CheckIn.day == day)
            ).first()
            if existing:
                session.delete(existing)
                checked = False
            else:
                session.add(CheckIn(habit_id=habit_id, day=day))
                checked = True
            session.commit()

        logger.info(
            "Check-in toggled",
            extra={"habit_id": habit_id, "day": day, "checked": checked},
        )
        return checked

    def list_check_in_days(self, habit_id: int, since: Optional[str] = None) -> list[str]:
        """Return check-in day-keys, newest first."""
        with self.session_factory() as session:
            statement = select(CheckIn.day).where(CheckIn.habit_id == habit_id)
            if since is not None:
                statement = statement.where(CheckIn.day >= since)
            statement = statement.order_by(CheckIn.day.desc())  # type: ignore
            return list(session.exec(statement).all())

    def get_streak_stats(self, habit_id: int, *, today: str, window_days: int) -> StreakStats:
        """Compute streaks over the window ending at ``today``."""
        habit = self.get_or_raise(habit_id)
        min_day = streak_window_start(today, window_days)
        days = self.list_check_in_days(habit_id, since=min_day)
        return compute_schedule_streak_stats(days, habit_schedule(habit), today, min_day)
