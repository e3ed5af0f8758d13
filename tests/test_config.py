"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from continuum.config import BaseConfig, TestConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in (
        "CONTINUUM_SECRET_KEY",
        "CONTINUUM_DATABASE_URL",
        "CONTINUUM_DEV_MODE",
        "CONTINUUM_STREAK_WINDOW_DAYS",
        "CONTINUUM_HEATMAP_WEEKS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CONTINUUM_DATA_DIR", str(tmp_path / "data"))


def test_defaults(tmp_path):
    config = BaseConfig()
    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DATABASE_URL.endswith("continuum.db")
    assert config.STREAK_WINDOW_DAYS == 365
    assert config.HEATMAP_WEEKS == 24
    assert config.sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONTINUUM_STREAK_WINDOW_DAYS", "90")
    monkeypatch.setenv("CONTINUUM_DATABASE_URL", "postgresql://localhost/continuum")
    config = BaseConfig()
    assert config.STREAK_WINDOW_DAYS == 90
    assert config.DATABASE_URL == "postgresql://localhost/continuum"
    assert config.sqlalchemy_engine_options() == {}


def test_non_positive_window_rejected(monkeypatch):
    monkeypatch.setenv("CONTINUUM_STREAK_WINDOW_DAYS", "0")
    with pytest.raises(ValueError):
        BaseConfig()


def test_secret_required_outside_dev(monkeypatch):
    monkeypatch.setenv("CONTINUUM_DEV_MODE", "false")
    with pytest.raises(ValueError):
        BaseConfig()
    monkeypatch.setenv("CONTINUUM_SECRET_KEY", "s3cret")
    assert BaseConfig().DEV_MODE is False


def test_test_config_uses_given_directory(tmp_path):
    config = TestConfig(data_dir=tmp_path / "isolated")
    assert config.TESTING is True
    assert config.DATABASE_URL.endswith("test.db")
    assert (tmp_path / "isolated").is_dir()
