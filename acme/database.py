"""Database configuration and engine management for the Acme dashboard.

Exports:
- Base: declarative base for models
- engine: SQLAlchemy engine built from the environment
- make_engine(url): build an engine for a given URL (used by scripts and tests)
- get_engine: FastAPI dependency returning the shared engine

Behavior:
- Reads DATABASE_URL, then POSTGRES_URL, falling back to a local SQLite file `acme.db` in the project root.
- PostgreSQL URLs are normalized to the psycopg driver and connect with `sslmode` from DB_SSLMODE (default `require`).
- SQLite connections enable foreign key enforcement so cascades behave like PostgreSQL.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

DB_SSLMODE: str = os.getenv("DB_SSLMODE", "require")


def _default_sqlite_url() -> str:
    db_path = PROJECT_ROOT / "acme.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path.as_posix()}"


def normalize_url(url: str) -> str:
    """Map `postgres://` style URLs (as handed out by hosting providers) to the psycopg driver."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def make_engine(url: str, sslmode: Optional[str] = None) -> Engine:
    """Create an engine for `url` with the per-dialect options the seeder relies on."""
    url = normalize_url(url)
    engine_kwargs = {"future": True}
    if url.startswith("sqlite"):
        # SQLite requires `check_same_thread=False` when used from the server threadpool
        new_engine = create_engine(url, connect_args={"check_same_thread": False}, **engine_kwargs)
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine
    if url.startswith("postgresql"):
        return create_engine(url, connect_args={"sslmode": sslmode or DB_SSLMODE}, pool_pre_ping=True, **engine_kwargs)
    return create_engine(url, **engine_kwargs)


DATABASE_URL: str = os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL") or _default_sqlite_url()

engine = make_engine(DATABASE_URL)

# Declarative base for models
Base = declarative_base()


def get_engine() -> Engine:
    """Return the shared engine for FastAPI dependencies.

    Usage:
        def endpoint(engine: Engine = Depends(get_engine)):
            ...
    """
    return engine


__all__ = ["Base", "DATABASE_URL", "engine", "make_engine", "normalize_url", "get_engine"]
