from io import BytesIO

import pytest
from PIL import Image
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from core.config import Settings
from main import create_app

PASSWORD = "correct-horse-9"


def _png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (2, 2), (200, 120, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


PNG_BYTES = _png_bytes()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENVIRONMENT="testing",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        JWT_SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        SEED_DEFAULT_RECIPES=False,
        LOG_LEVEL="WARNING",
        LOG_FORMAT="console",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(settings):
    seeded = settings.model_copy(update={"SEED_DEFAULT_RECIPES": True})
    with TestClient(create_app(seeded)) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an account and return its Authorization headers"""
    def _register(username, email=None, password=PASSWORD):
        res = client.post("/api/auth/register", json={
            "username": username,
            "email": email or f"{username}@zerowaste.org",
            "password": password,
            "name": username.title(),
            "family_name": "Tester",
        })
        assert res.status_code == 201, res.text
        return auth_headers(res.json()["token"])
    return _register


@pytest.fixture
def make_admin(settings):
    """Promote an account directly in storage; there is no API for it"""
    def _make_admin(username):
        engine = create_engine(settings.DATABASE_URL.replace("+aiosqlite", ""))
        try:
            with engine.begin() as conn:
                conn.execute(
                    text("UPDATE users SET role = 'admin' WHERE username = :username"),
                    {"username": username},
                )
        finally:
            engine.dispose()
    return _make_admin


@pytest.fixture
def create_recipe(client):
    def _create_recipe(headers, name="Fried Eggs", ingredients="eggs, butter, salt",
                       category="Breakfast", files=None):
        res = client.post(
            "/api/recipes",
            data={
                "name": name,
                "category": category,
                "ingredients": ingredients,
                "instructions": "Cook it.",
                "prep_time": "5",
                "cook_time": "10",
            },
            files=files,
            headers=headers,
        )
        assert res.status_code == 201, res.text
        return res.json()["id"]
    return _create_recipe


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
