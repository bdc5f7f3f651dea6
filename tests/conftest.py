import pytest

from date_tasks.config import AppConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without DATE_TASKS_* variables or a stray .env file."""
    for name in ("DATE_TASKS_DEFAULT_TIMEZONE", "DATE_TASKS_NEGATIVE_SPAN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def utc_config() -> AppConfig:
    return AppConfig(default_timezone="UTC")
