"""Habit summaries built on top of the schedule and streak helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..models.habit import Habit
from .days import add_days
from .schedule import HabitSchedule, format_valid_days, is_scheduled_day
from .streaks import StreakStats, compute_schedule_streak_stats

STREAK_WINDOW_DAYS = 365  # How far back streaks are evaluated
HISTORY_LIMIT = 30  # Number of check-ins listed in habit history


@dataclass(frozen=True)
class HistoryItem:
    """One recorded check-in, flagged when it falls on an unscheduled day."""

    day: str
    is_today: bool
    counts_toward_streak: bool


@dataclass(frozen=True)
class HabitSummary:
    """Everything the habit list and detail views show for a habit."""

    habit_id: int
    name: str
    schedule: HabitSchedule
    stats: StreakStats
    checked_in_today: bool
    valid_days: str
    total_in_window: int
    history: list[HistoryItem] = field(default_factory=list)

    def as_dict(self) -> dict:
        """Return a JSON-friendly representation."""

        return {
            "id": self.habit_id,
            "name": self.name,
            "schedule_type": self.schedule.schedule_type.value,
            "days_of_week": list(self.schedule.days_of_week),
            "valid_days": self.valid_days,
            "current_streak": self.stats.current,
            "longest_streak": self.stats.longest,
            "checked_in_today": self.checked_in_today,
            "total_in_window": self.total_in_window,
            "history": [
                {
                    "day": item.day,
                    "today": item.is_today,
                    "excluded": not item.counts_toward_streak,
                }
                for item in self.history
            ],
        }


def streak_window_start(today: str, days: int = STREAK_WINDOW_DAYS) -> str:
    """Return the inclusive lower bound of the streak window ending at ``today``."""

    return add_days(today, -days)


def habit_schedule(habit: Habit) -> HabitSchedule:
    """Return the schedule stored on ``habit``."""

    return HabitSchedule.from_storage(habit.schedule_type, habit.days_of_week)


def summarize_habit(
    habit: Habit,
    check_in_days: Iterable[str],
    *,
    today: str,
    min_day: str,
    history_limit: int = HISTORY_LIMIT,
) -> HabitSummary:
    """Summarize a habit from the check-ins recorded in ``[min_day, today]``."""

    days = sorted({day for day in check_in_days if min_day <= day <= today}, reverse=True)
    schedule = habit_schedule(habit)
    stats = compute_schedule_streak_stats(days, schedule, today, min_day)
    history = [
        HistoryItem(
            day=day,
            is_today=day == today,
            counts_toward_streak=is_scheduled_day(day, schedule),
        )
        for day in days[:history_limit]
    ]
    return HabitSummary(
        habit_id=habit.id or 0,
        name=habit.name,
        schedule=schedule,
        stats=stats,
        checked_in_today=today in days,
        valid_days=format_valid_days(schedule),
        total_in_window=len(days),
        history=history,
    )


def today_progress(summaries: Sequence[HabitSummary]) -> tuple[int, int]:
    """Return (habits checked in today, total habits)."""

    return sum(1 for summary in summaries if summary.checked_in_today), len(summaries)


__all__ = [
    "HISTORY_LIMIT",
    "STREAK_WINDOW_DAYS",
    "HabitSummary",
    "HistoryItem",
    "habit_schedule",
    "streak_window_start",
    "summarize_habit",
    "today_progress",
]
