from sqlalchemy import text

import acme.database as database
from acme.database import make_engine, normalize_url


def test_normalize_url_maps_postgres_schemes_to_psycopg():
    assert normalize_url("postgres://u:p@host:5432/db") == "postgresql+psycopg://u:p@host:5432/db"
    assert normalize_url("postgresql://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
    assert normalize_url("postgresql+psycopg://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
    assert normalize_url("sqlite:///./x.db") == "sqlite:///./x.db"


def test_sqlite_engine_enforces_foreign_keys(db_engine):
    with db_engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_make_engine_builds_postgres_engine_without_connecting():
    engine = make_engine("postgres://u:p@localhost:5432/acme", sslmode="disable")
    assert engine.dialect.name == "postgresql"
    assert engine.url.drivername == "postgresql+psycopg"
    engine.dispose()


def test_make_engine_passes_sslmode_to_postgres_driver(monkeypatch):
    calls = []

    def _fake_create_engine(url, **kwargs):
        calls.append((url, kwargs))
        return "engine"

    monkeypatch.setattr(database, "create_engine", _fake_create_engine)
    monkeypatch.setattr(database, "DB_SSLMODE", "require")

    make_engine("postgres://u:p@db.example.com/acme")
    make_engine("postgres://u:p@db.example.com/acme", sslmode="verify-full")

    assert calls[0][0] == "postgresql+psycopg://u:p@db.example.com/acme"
    assert calls[0][1]["connect_args"] == {"sslmode": "require"}
    assert calls[1][1]["connect_args"] == {"sslmode": "verify-full"}
