"""
Shared fixtures: an in-memory SQLite database behind the real app.

Environment is set before alumni_portal is imported so the cached
Settings never point at PostgreSQL.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from alumni_portal import models  # noqa: F401
from alumni_portal.db.session import Base, enable_sqlite_foreign_keys, get_db
from alumni_portal.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client):
    """POST a user; approve it unless approved=False. Returns the item."""
    counter = {"n": 0}

    def _make(approved: bool = True, **overrides):
        counter["n"] += 1
        n = counter["n"]
        body = {
            "firstName": f"User{n}",
            "lastName": "Test",
            "email": f"user{n}@example.com",
            "mobile": f"98765{n:05d}",
            "enrollmentNumber": f"ENR{n:04d}",
            "password": "secret-password",
            "branch": "CSE",
            "passingYear": 2022,
            "role": "STUDENT",
        }
        body.update(overrides)
        resp = client.post("/api/users", json=body)
        assert resp.status_code == 201, resp.text
        item = resp.json()["item"]
        if approved:
            resp = client.put(f"/api/users/{item['userId']}", json={"isApproved": True})
            assert resp.status_code == 200, resp.text
            item = resp.json()["item"]
        return item

    return _make
