"""Calendar day-key helpers.

A day-key is a ``YYYY-MM-DD`` string in the local calendar. Zero-padded keys
sort lexicographically in chronological order, which the streak engine relies
on when it compares keys as plain strings.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

DAY_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def day_key(value: date | datetime | None = None) -> str:
    """Render ``value`` (default: now, local clock) as a ``YYYY-MM-DD`` key."""

    value = value or datetime.now()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_day_key(day: str) -> date:
    """Parse a day-key into a calendar date."""

    year, month, dom = (int(part) for part in day.split("-"))
    return date(year, month, dom)


def weekday_of_day_key(day: str) -> int:
    """Return the weekday index for ``day`` where 0 is Sunday and 6 is Saturday."""

    # date.weekday() counts from Monday=0
    return (parse_day_key(day).weekday() + 1) % 7


def add_days(day: str, delta: int) -> str:
    """Offset ``day`` by ``delta`` days (negative moves backwards)."""

    return day_key(parse_day_key(day) + timedelta(days=delta))


def is_valid_day_key(value: object) -> bool:
    """Return True when ``value`` is a well-formed key naming a real date."""

    if not isinstance(value, str) or not DAY_KEY_PATTERN.match(value):
        return False
    try:
        parse_day_key(value)
    except ValueError:
        return False
    return True


__all__ = [
    "DAY_KEY_PATTERN",
    "add_days",
    "day_key",
    "is_valid_day_key",
    "parse_day_key",
    "weekday_of_day_key",
]
