from datetime import datetime, timedelta, timezone

import pytest

from todocli.models import TaskList

BASE_TIME = datetime(2025, 1, 25, 10, 15, 30, 123456, tzinfo=timezone(timedelta(hours=1)))


class FakeClock:
    """Clock that advances one minute on every call."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = value + timedelta(minutes=1)
        return value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Keep the caller's environment from leaking into settings
    for name in ("TODO_FILE", "TODO_LOG_LEVEL", "TODO_JSON_INDENT", "TODO_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def tasks(clock):
    return TaskList(now=clock)


@pytest.fixture()
def task_file(tmp_path):
    return tmp_path / "todo.json"
