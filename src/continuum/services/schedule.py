"""Habit schedules: which calendar days count toward a streak."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .days import weekday_of_day_key

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
WEEKDAY_INDEXES = frozenset({1, 2, 3, 4, 5})
# ASCII digits with an optional sign; rejects "0_1" and non-Latin numerals.
INTEGER_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)


class ScheduleType(str, Enum):
    """Supported recurrence rules."""

    DAILY = "DAILY"
    WEEKDAYS = "WEEKDAYS"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class HabitSchedule:
    """Recurrence rule for a habit.

    ``days_of_week`` holds weekday indexes (0 = Sunday ... 6 = Saturday) and is
    only consulted for ``CUSTOM`` schedules.
    """

    schedule_type: ScheduleType = ScheduleType.DAILY
    days_of_week: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "schedule_type", ScheduleType(self.schedule_type))
        object.__setattr__(self, "days_of_week", tuple(self.days_of_week))

    @property
    def has_scheduled_days(self) -> bool:
        """False only for a CUSTOM schedule with no valid weekday selected."""

        if self.schedule_type is not ScheduleType.CUSTOM:
            return True
        return any(_in_range(day) for day in self.days_of_week)

    @classmethod
    def from_storage(cls, schedule_type: str, days_csv: str | None) -> "HabitSchedule":
        """Build a schedule from the persisted type name and CSV day list."""

        return cls(ScheduleType(schedule_type), tuple(parse_days_of_week(days_csv)))


def _in_range(value: int) -> bool:
    return 0 <= value <= 6


def parse_days_of_week(csv: str | None) -> list[int]:
    """Parse a comma-separated weekday list, silently dropping invalid tokens."""

    if not csv:
        return []

    days: list[int] = []
    for token in (part.strip() for part in csv.split(",")):
        if not token or not INTEGER_TOKEN.fullmatch(token):
            continue
        value = int(token)
        if _in_range(value) and value not in days:
            days.append(value)
    return days


def days_of_week_to_csv(days: Iterable[int]) -> str:
    """Normalize weekday indexes (dedupe, range-filter, sort) into CSV form."""

    return ",".join(str(day) for day in sorted({d for d in days if _in_range(d)}))


def is_scheduled_day(day: str, schedule: HabitSchedule) -> bool:
    """Return whether ``day`` counts toward streaks under ``schedule``."""

    if schedule.schedule_type is ScheduleType.DAILY:
        return True

    weekday = weekday_of_day_key(day)
    if schedule.schedule_type is ScheduleType.WEEKDAYS:
        return weekday in WEEKDAY_INDEXES
    return weekday in set(schedule.days_of_week)


def format_valid_days(schedule: HabitSchedule) -> str:
    """Describe the days a schedule covers, e.g. ``"Monday, Wednesday, and Friday"``."""

    if schedule.schedule_type is ScheduleType.DAILY:
        return "Every day"
    if schedule.schedule_type is ScheduleType.WEEKDAYS:
        return "Monday, Tuesday, Wednesday, Thursday, Friday"

    names = [DAY_NAMES[day] for day in sorted(schedule.days_of_week) if _in_range(day)]
    if not names:
        return "No days selected"
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


__all__ = [
    "DAY_NAMES",
    "HabitSchedule",
    "ScheduleType",
    "days_of_week_to_csv",
    "format_valid_days",
    "is_scheduled_day",
    "parse_days_of_week",
]
