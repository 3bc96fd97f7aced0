import pytest


@pytest.fixture(autouse=True)
def _clear_worker_env(monkeypatch):
    monkeypatch.delenv("BRUH_WORKERS", raising=False)
