import pytest

from docsource.settings import get_settings


def test_default_max_tasks(monkeypatch):
    monkeypatch.delenv("CONNECTOR_MAX_TASKS", raising=False)

    assert get_settings().default_max_tasks == 1


def test_max_tasks_from_env(monkeypatch):
    monkeypatch.setenv("CONNECTOR_MAX_TASKS", "8")

    assert get_settings().default_max_tasks == 8


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_invalid_max_tasks(monkeypatch, value):
    monkeypatch.setenv("CONNECTOR_MAX_TASKS", value)

    with pytest.raises(RuntimeError):
        get_settings()
