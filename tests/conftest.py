"""Pytest configuration and shared fixtures for Continuum tests.

Provides an isolated SQLite database per test, a repository-style session
factory, a habit factory and a Flask test client whose clock is pinned to a
known day.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from continuum.app import create_app
from continuum.config import TestConfig
from continuum.infra.database import create_db_engine, create_session_factory, init_database
from continuum.infra.repositories.habit import SQLModelHabitRepository
from continuum.models import CheckIn, Habit

# Wednesday
FIXED_NOW = datetime(2024, 3, 13, 9, 30)
FIXED_TODAY = "2024-03-13"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def test_config(tmp_path) -> TestConfig:
    """Configuration rooted in a per-test temporary directory."""
    return TestConfig(data_dir=tmp_path)


@pytest.fixture
def db_engine(test_config):
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    engine = create_db_engine(test_config)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Transactional session factory matching what repositories expect."""
    return create_session_factory(db_engine)


@pytest.fixture
def habit_repo(session_factory) -> SQLModelHabitRepository:
    return SQLModelHabitRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(session_factory):
    """Factory for creating habits, optionally with check-ins.

    Returns:
        Callable: Function that persists a Habit and returns it detached
    """

    def _create_habit(
        name: str = "Exercise",
        schedule_type: str = "DAILY",
        days_of_week: str | None = None,
        check_ins: list[str] | tuple[str, ...] = (),
    ) -> Habit:
        with session_factory() as session:
            habit = Habit(name=name, schedule_type=schedule_type, days_of_week=days_of_week)
            session.add(habit)
            session.flush()
            for day in check_ins:
                session.add(CheckIn(habit_id=habit.id, day=day))
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    return _create_habit


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(test_config):
    """Flask app wired to the per-test database with a pinned clock."""
    flask_app = create_app(test_config)
    flask_app.config["CLOCK"] = lambda: FIXED_NOW
    yield flask_app
    flask_app.extensions["continuum"]["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()
