"""Pytest fixtures — fresh SQLite database per test, API client with get_db overridden."""
import os

# Settings are read at import time, so the test environment must be in place first.
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from todo_api.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from todo_api.main import app  # noqa: E402

# Import all models so they register with Base.metadata
from todo_api.models.user import User  # noqa: E402,F401
from todo_api.models.task import Task  # noqa: E402,F401

SQLITE_URL = "sqlite:///./test.db"
DEFAULT_PASSWORD = "secret123"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
    enable_sqlite_foreign_keys(engine)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session for direct inspection of stored rows."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: drive the API the way the front end does
# ---------------------------------------------------------------------------
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def signup_user(client: TestClient, name: str = "Test User", email: str = "test@example.com",
                password: str = DEFAULT_PASSWORD) -> dict:
    """Helper — POST /api/auth/signup and return response JSON (token + user)."""
    resp = client.post("/api/auth/signup", json={
        "name": name,
        "email": email,
        "password": password,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_task(client: TestClient, account: dict, **fields) -> dict:
    """Helper — POST a task for ``account`` (a signup response) and return the task JSON."""
    payload = {"title": "Test Task", **fields}
    resp = client.post(
        f"/api/users/{account['user']['id']}/tasks",
        json=payload,
        headers=auth_headers(account["token"]),
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["task"]
