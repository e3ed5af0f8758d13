"""Schedule-aware streak calculation.

Streaks walk over *scheduled* days only. Unscheduled days are transparent:
they neither extend nor break a run, and check-ins recorded on them ("bonus"
days) never count. Day-keys are compared as strings, which matches
chronological order for ``YYYY-MM-DD`` keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .days import add_days
from .schedule import HabitSchedule, is_scheduled_day


@dataclass(frozen=True)
class StreakStats:
    """Current and longest streak lengths for a habit."""

    current: int = 0
    longest: int = 0


def _current_streak(
    checked: set[str], schedule: HabitSchedule, today: str, min_day: Optional[str]
) -> int:
    current = 0
    cursor = today
    while min_day is None or cursor >= min_day:
        if not is_scheduled_day(cursor, schedule):
            cursor = add_days(cursor, -1)
            continue
        if cursor not in checked:
            break
        current += 1
        cursor = add_days(cursor, -1)
    return current


def _longest_streak(checked: set[str], schedule: HabitSchedule, start: str, today: str) -> int:
    longest = 0
    run = 0
    scan = start
    while scan <= today:
        if is_scheduled_day(scan, schedule):
            if scan in checked:
                run += 1
                longest = max(longest, run)
            else:
                run = 0
        scan = add_days(scan, 1)
    return longest


def compute_schedule_streak_stats(
    checked_days: Iterable[str],
    schedule: HabitSchedule,
    today: str,
    min_day: Optional[str] = None,
) -> StreakStats:
    """Return current and longest streaks over the scheduled days up to ``today``.

    ``min_day`` is an inclusive lower bound on both scans. Without it the
    backward scan runs until the first missed scheduled day and the forward
    scan starts at the earliest check-in (or ``today`` when there are none).
    """

    checked = set(checked_days)

    # Nothing is ever scheduled, so neither scan can find a hit (or a break).
    if not schedule.has_scheduled_days:
        return StreakStats()

    current = _current_streak(checked, schedule, today, min_day)

    if min_day is not None:
        start = min_day
    else:
        start = min(checked) if checked else today
    longest = _longest_streak(checked, schedule, start, today)

    return StreakStats(current=current, longest=longest)


__all__ = ["StreakStats", "compute_schedule_streak_stats"]
