import pytest
from fastapi.testclient import TestClient

from student_api.config import Settings
from student_api.main import create_app
from student_api.store import StudentStore


@pytest.fixture
def store():
    """An empty store shared with the app built by `client`."""
    return StudentStore()


@pytest.fixture
def app_settings(monkeypatch):
    """Settings built from a clean environment (port 3000, docs at /api-docs)."""
    for name in ("ENV", "HOST", "PORT", "LOG_LEVEL", "DOCS_PATH", "PUBLIC_URL", "ALLOW_DEV_CORS"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def client(store, app_settings):
    """A client talking to a fresh application, so every test starts empty."""
    return TestClient(create_app(store=store, app_settings=app_settings))
