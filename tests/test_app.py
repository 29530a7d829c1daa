import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core import database
from main import create_app


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


def test_request_id_echoed(client):
    res = client.get("/api/recipes", headers={"X-Request-ID": "abc-123"})
    assert res.headers["X-Request-ID"] == "abc-123"
    assert "X-Process-Time" in res.headers

    generated = client.get("/api/recipes")
    assert generated.headers["X-Request-ID"]


def test_security_headers(client):
    res = client.get("/api/recipes")
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "DENY"
    assert "no-store" in res.headers["Cache-Control"]


def test_errors_use_message_envelope(client):
    res = client.get("/api/no-such-route")
    assert res.status_code == 404
    assert "message" in res.json()

    res = client.get("/api/recipes/not-a-number")
    assert res.status_code == 400
    assert "message" in res.json()


def test_unexpected_error_is_generic_500(settings, monkeypatch):
    app = create_app(settings)

    async def broken(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(app.state.recipe_service, "list_recipes", broken)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        res = test_client.get("/api/recipes")

    assert res.status_code == 500
    body = res.json()
    assert body["message"] == "An unexpected error occurred"
    assert "request_id" in body
    assert "disk on fire" not in res.text


class RecordingLogger:
    def __init__(self):
        self.errors = []

    def error(self, event, *args, **kwargs):
        self.errors.append(event)

    def info(self, *args, **kwargs):
        pass


def test_http_errors_are_not_logged_as_database_errors(client, register, monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(database, "logger", recorder)

    assert client.delete("/api/recipes/1", headers=register("alice")).status_code == 403
    assert client.get("/api/recipes/999").status_code == 404
    assert recorder.errors == []


def test_database_errors_are_logged(client, monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(database, "logger", recorder)

    async def query_missing_table():
        async with client.app.state.db.session() as session:
            await session.execute(text("SELECT * FROM no_such_table"))

    with pytest.raises(SQLAlchemyError):
        client.portal.call(query_missing_table)
    assert len(recorder.errors) == 1
    assert recorder.errors[0].startswith("Database session error")
