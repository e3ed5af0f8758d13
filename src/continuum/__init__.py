"""Continuum habit tracker package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, TestConfig
from .services.schedule import HabitSchedule, ScheduleType
from .services.streaks import StreakStats, compute_schedule_streak_stats

__all__ = [
    "BaseConfig",
    "DevConfig",
    "HabitSchedule",
    "ScheduleType",
    "StreakStats",
    "TestConfig",
    "compute_schedule_streak_stats",
]
