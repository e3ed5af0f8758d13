"""Service module exports."""

from . import days, habits, heatmap, schedule, streaks

__all__ = [
    "days",
    "habits",
    "heatmap",
    "schedule",
    "streaks",
]
