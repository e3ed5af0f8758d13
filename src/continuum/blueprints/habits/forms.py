"""Habit form definitions."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ...services.days import is_valid_day_key
from ...services.schedule import HabitSchedule, ScheduleType, days_of_week_to_csv, parse_days_of_week


def structure_errors(exc: ValidationError) -> dict[str, list[str]]:
    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


class HabitForm(BaseModel):
    """Form model for creating or editing a habit."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default="", description="Short label for the habit")
    schedule_type: ScheduleType = Field(default=ScheduleType.DAILY, description="Recurrence rule")
    days_of_week: list[int] = Field(
        default_factory=list, description="Weekday indexes (0 = Sunday) for custom schedules"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a habit name.")
        if len(value) > 50:
            raise ValueError("Habit names are limited to 50 characters.")
        return value

    @field_validator("days_of_week", mode="before")
    @classmethod
    def normalize_days(cls, value: Any) -> list[int]:
        """Accept a CSV string or a list; drop anything outside 0..6."""

        if value is None:
            return []
        if isinstance(value, str):
            return parse_days_of_week(value)
        if not isinstance(value, (list, tuple)):
            raise ValueError("Days of week must be a list or a comma-separated string.")
        return sorted(parse_days_of_week(",".join(str(item) for item in value)))

    @model_validator(mode="after")
    def ensure_custom_days(self) -> "HabitForm":
        """Require at least one weekday when custom schedule is selected."""

        if self.schedule_type is ScheduleType.CUSTOM and not self.days_of_week:
            raise ValueError("Please select at least one day for custom schedule.")
        return self

    def days_csv(self) -> Optional[str]:
        """CSV value to persist; only custom schedules store days."""

        if self.schedule_type is ScheduleType.CUSTOM:
            return days_of_week_to_csv(self.days_of_week)
        return None

    def to_schedule(self) -> HabitSchedule:
        return HabitSchedule(self.schedule_type, tuple(sorted(self.days_of_week)))

    @classmethod
    def validation_errors(cls, payload: dict[str, Any]) -> dict[str, list[str]]:
        """Return validation errors for ``payload`` (empty when valid)."""

        try:
            cls.model_validate(payload)
        except ValidationError as exc:
            return structure_errors(exc)
        return {}


class CheckInForm(BaseModel):
    """Payload for toggling a check-in; ``day`` defaults to today."""

    day: Optional[str] = None

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_day_key(value):
            raise ValueError("Invalid date format, expected YYYY-MM-DD.")
        return value


__all__ = ["CheckInForm", "HabitForm", "structure_errors"]
