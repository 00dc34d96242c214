"""
Shared pytest fixtures.

Uses a SQLite database file so no Postgres is required for tests.
Every test works with its own user id, so rows left by one test never
affect another.
"""
import os
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_wellness.db")
os.environ.setdefault("ADMIN_TOKEN", "test-admin-token")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from wellness.core.clock import FixedClock, get_clock
from wellness.db.base import Base, get_db
from wellness.main import app
from wellness.store import InMemoryStore, SqlAlchemyStore

SQLITE_URL = "sqlite:///./test_wellness.db"
ADMIN_TOKEN = "test-admin-token"

# 2026-02-20 00:00:00 UTC plus ten hours
DAY_ONE = 1771545600 + 10 * 3600

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def clock():
    return FixedClock(DAY_ONE)


@pytest.fixture()
def user_id():
    return f"user-{uuid.uuid4().hex[:12]}"


@pytest.fixture()
def memory_store():
    return InMemoryStore()


@pytest.fixture(params=["memory", "sql"])
def store(request, db):
    """The same behavior is expected from both backends."""
    if request.param == "memory":
        return InMemoryStore()
    return SqlAlchemyStore(db)


@pytest.fixture()
def client(clock):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def headers(user_id):
    return {"X-User-Id": user_id}
