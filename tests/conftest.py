"""Pytest fixtures for the seeding service tests.

Uses a file-backed SQLite database and FastAPI TestClient. Overrides the
`get_engine` dependency so tests are isolated from any real database, and
lowers the bcrypt cost so hashing stays fast.
"""

import os

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_acme.db")
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

import acme.database as database
import acme.models  # noqa: F401  registers the tables on Base.metadata
from acme.database import Base, make_engine
from acme.main import app
from acme.schemas import SeedDataset


# Test engine (foreign keys enforced, same as the app engine)
engine = make_engine(TEST_DATABASE_URL)


@pytest.fixture(autouse=True)
def clean_database():
    """Start and finish every test without the seeded tables."""
    Base.metadata.drop_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


app.dependency_overrides[database.get_engine] = lambda: engine

# Tests hit /seed repeatedly; disable the global rate limiter for the test run.
app.state.limiter.enabled = False


@pytest.fixture()
def db_engine():
    return engine


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def count_rows():
    def _count_rows(table: str) -> int:
        with engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()

    return _count_rows


@pytest.fixture()
def small_dataset() -> SeedDataset:
    """One row per table: the minimal end-to-end scenario."""
    return SeedDataset(
        users=[{"id": "U1", "name": "Test User", "email": "a@test.com", "password": "secret"}],
        customers=[{"id": "C1", "name": "Test Customer", "email": "c1@test.com", "image_url": "/customers/c1.png"}],
        invoices=[{"customer_id": "C1", "amount": 1000, "status": "paid", "date": "2024-01-01"}],
        revenue=[{"month": "Jan", "revenue": 5000}],
    )
