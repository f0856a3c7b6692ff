import os
import tempfile
from datetime import date
from typing import Generator

import pytest

os.environ["DATABASE_URL"] = "sqlite:///./test_eco_collect.db"
os.environ["RATE_LIMITING_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_PASSWORD"] = "admin-test-pass"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="eco-collect-uploads-")
os.environ["LOG_FILE"] = "test.log"

from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402

ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(setup_database) -> Generator[TestClient, None, None]:
    # Entering the client runs the lifespan, which seeds the admin and the catalog
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_token(client) -> str:
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture()
def admin_headers(admin_token) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


def register_and_login(client, name="Ann Lee", email="ann@x.com", password="secret1"):
    response = client.post(
        "/api/users/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201
    response = client.post("/api/users/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()


@pytest.fixture()
def user_token(client) -> str:
    return register_and_login(client)["token"]


@pytest.fixture()
def user_headers(user_token) -> dict:
    return {"Authorization": f"Bearer {user_token}"}


def booking_form(**overrides) -> dict:
    form = {
        "name": "Ann Lee",
        "email": "ann@x.com",
        "address": "12 Green Street, Springfield",
        "date": date.today().isoformat(),
        "time": "09:30",
    }
    form.update(overrides)
    return form


def photo_file(content: bytes = b"\xff\xd8\xff\xe0fake-jpeg-bytes", content_type: str = "image/jpeg"):
    return {"photo": ("waste.jpg", content, content_type)}
