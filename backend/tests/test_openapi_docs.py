from fastapi.testclient import TestClient

from student_api.config import Settings
from student_api.main import create_app


def test_openapi_describes_student_routes(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    spec = r.json()
    assert spec["openapi"] == "3.1.0"
    assert spec["info"]["title"] == "Student CRUD API"
    assert spec["info"]["version"] == "1.0.0"
    assert spec["servers"][0]["url"] == "http://localhost:3000"

    paths = spec["paths"]
    assert set(paths["/students"]) == {"get", "post"}
    assert set(paths["/students/{student_id}"]) == {"get", "put", "delete"}


def test_openapi_request_bodies_and_responses(client):
    paths = client.get("/openapi.json").json()["paths"]

    create = paths["/students"]["post"]
    body = create["requestBody"]["content"]["application/json"]
    assert {"name", "age"} <= set(body["schema"]["properties"])
    assert body["examples"]["NewStudent"]["value"] == {"name": "Charlie", "age": 21}
    assert "201" in create["responses"]

    update = paths["/students/{student_id}"]["put"]
    body = update["requestBody"]["content"]["application/json"]
    assert body["examples"]["UpdatedStudent"]["value"] == {"name": "Alice Smith", "age": 21}
    assert {"200", "404"} <= set(update["responses"])

    get_one = paths["/students/{student_id}"]["get"]
    assert {"200", "404"} <= set(get_one["responses"])
    param = get_one["parameters"][0]
    assert param["in"] == "path" and param["required"] is True

    delete = paths["/students/{student_id}"]["delete"]
    assert "204" in delete["responses"]


def test_swagger_ui_served_at_api_docs(client):
    r = client.get("/api-docs")
    assert r.status_code == 200
    assert "swagger-ui" in r.text
    assert "/openapi.json" in r.text


def test_docs_path_and_public_url_are_configurable(monkeypatch):
    monkeypatch.setenv("DOCS_PATH", "/docs")
    monkeypatch.setenv("PUBLIC_URL", "https://students.example.com/")
    c = TestClient(create_app(app_settings=Settings()))
    assert c.get("/docs").status_code == 200
    assert c.get("/api-docs").status_code == 404
    assert c.get("/openapi.json").json()["servers"][0]["url"] == "https://students.example.com"


def test_home_links_to_docs(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'href="/api-docs"' in r.text
