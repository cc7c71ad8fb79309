import pytest

@pytest.fixture(autouse=True)
def _no_scope_env(monkeypatch):
    monkeypatch.delenv("PERMALINK_SCOPE", raising=False)
