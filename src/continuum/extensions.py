"""Database and clock wiring for the Flask app."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories.habit import SQLModelHabitRepository
from .services.days import day_key

EXTENSION_KEY = "continuum"


def init_app(app: Flask, config: BaseConfig) -> None:
    """Bootstrap the database and attach the habit repository to ``app``."""

    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
        "habits": SQLModelHabitRepository(session_factory),
    }
    app.config.setdefault("CLOCK", datetime.now)


def habit_repository() -> SQLModelHabitRepository:
    """Return the repository bound to the current app."""

    return current_app.extensions[EXTENSION_KEY]["habits"]


def today_key() -> str:
    """Read the app clock and return today's day-key; never cached."""

    clock: Callable[[], datetime] = current_app.config["CLOCK"]
    return day_key(clock())
