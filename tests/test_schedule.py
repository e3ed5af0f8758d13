"""Tests for schedule evaluation, description and CSV parsing."""

from __future__ import annotations

import pytest

from continuum.services.schedule import (
    HabitSchedule,
    ScheduleType,
    days_of_week_to_csv,
    format_valid_days,
    is_scheduled_day,
    parse_days_of_week,
)

# 2024-03-10 is a Sunday
WEEK = [f"2024-03-{d:02d}" for d in range(10, 17)]


class TestIsScheduledDay:
    def test_daily_covers_every_day(self):
        schedule = HabitSchedule(ScheduleType.DAILY)
        assert all(is_scheduled_day(day, schedule) for day in WEEK)

    def test_weekdays_cover_monday_to_friday(self):
        schedule = HabitSchedule(ScheduleType.WEEKDAYS)
        assert [is_scheduled_day(day, schedule) for day in WEEK] == [
            False, True, True, True, True, True, False,
        ]

    def test_custom_uses_selected_days(self):
        schedule = HabitSchedule(ScheduleType.CUSTOM, (1, 3, 5))
        scheduled = [day for day in WEEK if is_scheduled_day(day, schedule)]
        assert scheduled == ["2024-03-11", "2024-03-13", "2024-03-15"]

    def test_residual_days_ignored_for_non_custom(self):
        daily = HabitSchedule(ScheduleType.DAILY, (2,))
        weekdays = HabitSchedule(ScheduleType.WEEKDAYS, (0, 6))
        assert is_scheduled_day("2024-03-11", daily)
        assert not is_scheduled_day("2024-03-10", weekdays)
        assert is_scheduled_day("2024-03-12", weekdays)

    def test_custom_with_no_days_never_scheduled(self):
        schedule = HabitSchedule(ScheduleType.CUSTOM, ())
        assert not any(is_scheduled_day(day, schedule) for day in WEEK)
        assert not schedule.has_scheduled_days

    def test_plain_string_type_is_coerced(self):
        schedule = HabitSchedule("WEEKDAYS")
        assert schedule.schedule_type is ScheduleType.WEEKDAYS


class TestFormatValidDays:
    def test_daily_and_weekdays(self):
        assert format_valid_days(HabitSchedule(ScheduleType.DAILY)) == "Every day"
        assert (
            format_valid_days(HabitSchedule(ScheduleType.WEEKDAYS))
            == "Monday, Tuesday, Wednesday, Thursday, Friday"
        )

    @pytest.mark.parametrize(
        "days, expected",
        [
            ((), "No days selected"),
            ((2,), "Tuesday"),
            ((6, 0), "Sunday and Saturday"),
            ((5, 1, 3), "Monday, Wednesday, and Friday"),
            ((0, 1, 2, 3), "Sunday, Monday, Tuesday, and Wednesday"),
        ],
    )
    def test_custom_joining(self, days, expected):
        assert format_valid_days(HabitSchedule(ScheduleType.CUSTOM, days)) == expected

    def test_does_not_reorder_schedule(self):
        schedule = HabitSchedule(ScheduleType.CUSTOM, (5, 1))
        format_valid_days(schedule)
        assert schedule.days_of_week == (5, 1)


class TestDaysOfWeekCsv:
    @pytest.mark.parametrize("csv", [None, "", " , ,"])
    def test_empty_inputs(self, csv):
        assert parse_days_of_week(csv) == []

    def test_drops_invalid_tokens(self):
        assert parse_days_of_week(" 1, x ,7,-1, 3,2.5,5 ") == [1, 3, 5]
        assert parse_days_of_week("0_1,\u0663,4") == [4]

    def test_signed_ascii_integers_accepted(self):
        assert parse_days_of_week("+2,-0") == [2, 0]

    def test_dedupes(self):
        assert parse_days_of_week("3,3,1,3") == [3, 1]

    def test_to_csv_normalizes(self):
        assert days_of_week_to_csv([5, 1, 9, 3, 1, -2]) == "1,3,5"
        assert days_of_week_to_csv([]) == ""

    @pytest.mark.parametrize(
        "days",
        [[], [6, 0, 6], [3, 2, 1, 0], [10, -1, 4], list(range(-3, 12))],
    )
    def test_csv_round_trip_returns_normalized_days(self, days):
        expected = sorted({d for d in days if 0 <= d <= 6})
        assert parse_days_of_week(days_of_week_to_csv(days)) == expected

    def test_from_storage(self):
        schedule = HabitSchedule.from_storage("CUSTOM", "5,1,x")
        assert schedule == HabitSchedule(ScheduleType.CUSTOM, (5, 1))
