"""Habit tracking data structures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class Habit(SQLModel, table=True):
    """A user-defined habit with a recurrence schedule."""

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=50, index=True)
    schedule_type: str = Field(default="DAILY", nullable=False, max_length=16)
    # Comma-separated weekday indexes (0 = Sunday); only set for CUSTOM schedules.
    days_of_week: Optional[str] = Field(default=None, max_length=32)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    check_ins: list["CheckIn"] = Relationship(
        back_populates="habit",
        sa_relationship=relationship(
            "CheckIn", back_populates="habit", cascade="all, delete-orphan"
        ),
    )


class CheckIn(SQLModel, table=True):
    """Completion of a habit on one calendar day."""

    __tablename__: ClassVar[str] = "check_in"
    __table_args__ = (UniqueConstraint("habit_id", "day", name="uq_check_in_habit_day"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    habit_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("habit.id", ondelete="CASCADE"), nullable=False, index=True
        )
    )
    # Local calendar day key, YYYY-MM-DD.
    day: str = Field(nullable=False, max_length=10, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    habit: "Habit" = Relationship(
        back_populates="check_ins",
        sa_relationship=relationship("Habit", back_populates="check_ins"),
    )
