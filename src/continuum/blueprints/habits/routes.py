"""Habit routes (JSON)."""

from __future__ import annotations

from flask import current_app, jsonify, request
from pydantic import ValidationError

from ...domain.repositories.habit import HabitNotFoundError
from ...extensions import habit_repository, today_key
from ...logging_config import get_logger
from ...models.habit import Habit
from ...services.habits import (
    HabitSummary,
    habit_schedule,
    streak_window_start,
    summarize_habit,
    today_progress,
)
from ...services.heatmap import generate_date_grid, get_day_status
from . import bp
from .forms import CheckInForm, HabitForm, structure_errors

logger = get_logger(__name__)


def _payload() -> dict:
    """Merge JSON body or form fields into one dict."""

    if request.is_json:
        body = request.get_json(silent=True)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object.")
        return body
    data: dict = {key: request.form.get(key) for key in request.form}
    if "days_of_week" in request.form:
        data["days_of_week"] = request.form.getlist("days_of_week")
    return data


def _summary(habit: Habit, today: str) -> HabitSummary:
    min_day = streak_window_start(today, current_app.config["STREAK_WINDOW_DAYS"])
    days = habit_repository().list_check_in_days(habit.id, since=min_day)
    return summarize_habit(habit, days, today=today, min_day=min_day)


@bp.errorhandler(HabitNotFoundError)
def handle_not_found(exc: HabitNotFoundError):
    return jsonify({"error": str(exc)}), 404


@bp.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError):
    return jsonify({"error": "Invalid input", "errors": structure_errors(exc)}), 400


@bp.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    logger.warning("Rejected habit request", extra={"path": request.path, "reason": str(exc)})
    return jsonify({"error": str(exc)}), 400


@bp.get("/")
def list_habits():
    """Show habits overview with streaks and today's progress."""

    today = today_key()
    summaries = [_summary(habit, today) for habit in habit_repository().list_all()]
    checked, total = today_progress(summaries)
    return jsonify(
        {
            "today": today,
            "progress": {"checked": checked, "total": total},
            "habits": [summary.as_dict() for summary in summaries],
        }
    )


@bp.post("/")
def create_habit():
    """Create a habit from a validated form."""

    form = HabitForm.model_validate(_payload())
    habit = habit_repository().create(
        Habit(name=form.name, schedule_type=form.schedule_type.value, days_of_week=form.days_csv())
    )
    return jsonify(_summary(habit, today_key()).as_dict()), 201


@bp.get("/<int:habit_id>")
def habit_detail(habit_id: int):
    habit = habit_repository().get_or_raise(habit_id)
    return jsonify(_summary(habit, today_key()).as_dict())


@bp.put("/<int:habit_id>")
def update_habit(habit_id: int):
    """Rename a habit or change its schedule."""

    repo = habit_repository()
    habit = repo.get_or_raise(habit_id)
    form = HabitForm.model_validate(_payload())
    habit.name = form.name
    habit.schedule_type = form.schedule_type.value
    habit.days_of_week = form.days_csv()
    habit = repo.update(habit)
    return jsonify(_summary(habit, today_key()).as_dict())


@bp.delete("/<int:habit_id>")
def delete_habit(habit_id: int):
    habit_repository().delete(habit_id)
    return "", 204


@bp.post("/<int:habit_id>/toggle")
def toggle_check_in(habit_id: int):
    """Toggle the check-in for ``day`` (default today)."""

    form = CheckInForm.model_validate(_payload())
    day = form.day or today_key()
    checked = habit_repository().toggle_check_in(habit_id, day)
    return jsonify({"habit_id": habit_id, "day": day, "checked": checked})


@bp.get("/<int:habit_id>/heatmap")
def habit_heatmap(habit_id: int):
    """Return the activity grid, one column per week."""

    repo = habit_repository()
    habit = repo.get_or_raise(habit_id)
    weeks = request.args.get("weeks", default=current_app.config["HEATMAP_WEEKS"], type=int)
    if weeks <= 0:
        raise ValueError("weeks must be positive")

    today = today_key()
    schedule = habit_schedule(habit)
    grid = generate_date_grid(weeks, today)
    checked = set(repo.list_check_in_days(habit_id, since=grid[0][0]))
    return jsonify(
        {
            "habit_id": habit_id,
            "today": today,
            "weeks": [
                [
                    {"day": day, "status": get_day_status(day, checked, schedule, today).value}
                    for day in column
                ]
                for column in grid
            ],
        }
    )
