from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fitclub_server.config import Settings
from fitclub_server.main import create_app


ADMIN_EMAIL = "admin@kelfit.com"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a fresh SQLite file, with an admin account to seed.
    """
    return Settings(
        jwt_secret="test-secret",
        database_url=f"sqlite:///{tmp_path / 'fitclub.db'}",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        app_env="test",
    )


@pytest.fixture()
def app(settings):
    app = create_app(settings)
    yield app
    app.state.db.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(app):
    session = app.state.db.SessionLocal()
    yield session
    session.close()


def register(client, email="a@x.com", password="pw", name="A"):
    return client.post("/api/auth/register", json={"email": email, "password": password, "name": name})


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user_token(client) -> str:
    r = register(client, email="member@x.com", password="member-pass", name="Member")
    assert r.status_code == 200
    return r.json()["token"]


@pytest.fixture()
def admin_token(client) -> str:
    r = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return r.json()["token"]
