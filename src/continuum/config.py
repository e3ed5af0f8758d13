"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    parsed = int(value)
    if parsed <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}.")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Continuum"
    DB_FILENAME = "continuum.db"
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("CONTINUUM_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("CONTINUUM_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("CONTINUUM_DATABASE_URL", self._build_sqlite_url())
        self.STREAK_WINDOW_DAYS = _env_int("CONTINUUM_STREAK_WINDOW_DAYS", 365)
        self.HEATMAP_WEEKS = _env_int("CONTINUUM_HEATMAP_WEEKS", 24)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("CONTINUUM_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("CONTINUUM_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Isolated configuration for the test suite."""

    TESTING = True
    __test__ = False  # not a pytest test class

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir
        super().__init__()
        self.DATABASE_URL = f"sqlite:///{self.DATA_DIR / 'test.db'}"

    def _resolve_data_dir(self) -> Path:
        if self._data_dir is None:
            return super()._resolve_data_dir()
        path = Path(self._data_dir)
        path.mkdir(parents=True, exist_ok=True)
        return path


__all__ = ["BaseConfig", "DevConfig", "TestConfig"]
