"""Flask CLI commands for Continuum."""

from __future__ import annotations

import click

from .services.days import add_days, day_key, is_valid_day_key


def _validate_day(_ctx, _param, value):
    if value is not None and not is_valid_day_key(value):
        raise click.BadParameter("expected YYYY-MM-DD")
    return value


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("continuum-init-db")
    def continuum_init_db() -> None:
        """Create database tables."""

        from .extensions import EXTENSION_KEY
        from .infra.database import init_database

        init_database(app.extensions[EXTENSION_KEY]["engine"])
        click.echo(f"Database ready: {app.config['DATABASE_URL']}")

    @app.cli.command("continuum-seed")
    @click.option("--days", default=21, show_default=True, help="Days of history to generate")
    def continuum_seed(days: int) -> None:
        """Seed demo habits with a few weeks of check-ins."""

        from .extensions import habit_repository, today_key
        from .models.habit import Habit

        repo = habit_repository()
        today = today_key()
        demo = [
            Habit(name="Read 20 pages", schedule_type="DAILY"),
            Habit(name="Stand-up notes", schedule_type="WEEKDAYS"),
            Habit(name="Gym", schedule_type="CUSTOM", days_of_week="1,3,5"),
        ]
        for habit in demo:
            habit = repo.create(habit)
            for offset in range(days):
                # leave every fifth day empty so streaks have breaks
                if offset % 5 == 4:
                    continue
                repo.toggle_check_in(habit.id, add_days(today, -offset))
        click.echo(f"Seeded {len(demo)} habits with {days} days of history.")

    @app.cli.command("continuum-stats")
    @click.option("--today", "today_opt", default=None, callback=_validate_day, help="Override today (YYYY-MM-DD)")
    def continuum_stats(today_opt: str | None) -> None:
        """Print current and longest streaks for every habit."""

        from .extensions import habit_repository

        repo = habit_repository()
        today = today_opt or day_key(app.config["CLOCK"]())
        habits = repo.list_all()
        if not habits:
            click.echo("No habits yet.")
            return
        for habit in habits:
            stats = repo.get_streak_stats(
                habit.id, today=today, window_days=app.config["STREAK_WINDOW_DAYS"]
            )
            click.echo(f"{habit.name}: current {stats.current} · longest {stats.longest}")
