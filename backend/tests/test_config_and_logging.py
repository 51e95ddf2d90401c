import logging

import pytest

from student_api.config import Settings


def test_defaults(app_settings):
    assert app_settings.PORT == 3000
    assert app_settings.DOCS_PATH == "/api-docs"
    assert app_settings.PUBLIC_URL == "http://localhost:3000"
    assert app_settings.ALLOW_DEV_CORS is True


def test_port_drives_public_url(monkeypatch):
    monkeypatch.delenv("PUBLIC_URL", raising=False)
    monkeypatch.setenv("PORT", "8080")
    s = Settings()
    assert s.PORT == 8080
    assert s.PUBLIC_URL == "http://localhost:8080"


def test_invalid_settings_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(RuntimeError):
        Settings()
    monkeypatch.setenv("PORT", "3000")
    monkeypatch.setenv("DOCS_PATH", "api-docs")
    with pytest.raises(RuntimeError):
        Settings()


def test_request_id_header_exists(client):
    r = client.get("/students")
    assert r.status_code == 200
    assert r.headers["X-Request-ID"]


def test_request_id_is_propagated_and_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="student_api.api")
    r = client.post("/students", json={"name": "Alice"}, headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    done = [rec.getMessage() for rec in caplog.records if rec.getMessage().startswith("request_done")]
    assert any('"request_id": "abc123"' in m and '"status_code": 201' in m for m in done)


def test_store_logs_mutations(client, caplog):
    caplog.set_level(logging.DEBUG, logger="student_api.store")
    client.post("/students", json={"name": "Alice"})
    client.delete("/students/1")
    messages = [rec.getMessage() for rec in caplog.records if rec.name == "student_api.store"]
    assert "student created id=1" in messages
    assert "student deleted id=1" in messages
