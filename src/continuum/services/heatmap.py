"""Activity heatmap helpers: per-day status and the week grid."""

from __future__ import annotations

from enum import Enum
from typing import Collection

from .days import add_days, weekday_of_day_key
from .schedule import HabitSchedule, is_scheduled_day


class DayStatus(str, Enum):
    """How a single day looks on the activity heatmap."""

    CHECKED_SCHEDULED = "checked-scheduled"
    MISSED_SCHEDULED = "missed-scheduled"
    CHECKED_BONUS = "checked-bonus"
    NOT_SCHEDULED = "not-scheduled"


def get_day_status(
    day: str, checked: Collection[str], schedule: HabitSchedule, today: str
) -> DayStatus:
    """Classify ``day``; days after ``today`` are never colored."""

    if day > today:
        return DayStatus.NOT_SCHEDULED

    scheduled = is_scheduled_day(day, schedule)
    is_checked = day in checked
    if scheduled:
        return DayStatus.CHECKED_SCHEDULED if is_checked else DayStatus.MISSED_SCHEDULED
    return DayStatus.CHECKED_BONUS if is_checked else DayStatus.NOT_SCHEDULED


def week_start(day: str) -> str:
    """Return the Monday of the week containing ``day``."""

    # weekday index 0 is Sunday, which closes a Monday-first week
    offset = (weekday_of_day_key(day) + 6) % 7
    return add_days(day, -offset)


def generate_date_grid(weeks: int, today: str) -> list[list[str]]:
    """Return ``weeks`` columns of Monday..Sunday keys ending with the current week."""

    if weeks <= 0:
        return []

    first = add_days(week_start(today), -7 * (weeks - 1))
    return [[add_days(first, 7 * col + row) for row in range(7)] for col in range(weeks)]


__all__ = ["DayStatus", "generate_date_grid", "get_day_status", "week_start"]
