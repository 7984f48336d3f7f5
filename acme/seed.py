"""Seed routine for the dashboard database.

`seed_database` opens one connection, then runs four steps in order:
users, customers, invoices, revenue. Each step creates its table when it is
missing and inserts the dataset rows with ``INSERT ... ON CONFLICT DO NOTHING``
inside its own transaction, so existing rows are left untouched and a failing
step leaves the earlier ones committed.

The step functions are public and take an open connection so they can be run
one at a time (scripts, tests).
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from sqlalchemy import Table, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection, Engine

from acme import models
from acme.errors import SeedError
from acme.placeholder_data import load_placeholder_dataset
from acme.schemas import CustomerSeed, InvoiceSeed, RevenueSeed, SeedDataset, UserSeed
from acme.security import get_password_hash

logger = logging.getLogger(__name__)

SEED_MAX_WORKERS = int(os.getenv("SEED_MAX_WORKERS", "8"))

STEPS = ("users", "customers", "invoices", "revenue")

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class StepResult:
    step: str
    processed: int
    inserted: int


@dataclass
class SeedReport:
    steps: List[StepResult] = field(default_factory=list)
    success: bool = False

    def counts(self) -> Dict[str, Dict[str, int]]:
        return {s.step: {"processed": s.processed, "inserted": s.inserted} for s in self.steps}

    @property
    def inserted(self) -> int:
        return sum(s.inserted for s in self.steps)


def _fan_out(fn: Callable[[T], R], items: Sequence[T], max_workers: Optional[int] = None) -> List[R]:
    """Run `fn` over `items` on a bounded thread pool and wait for all results.

    Results keep the order of `items`. The first exception raised by `fn` is
    re-raised once every submitted call has finished.
    """
    if not items:
        return []
    workers = max(1, min(max_workers or SEED_MAX_WORKERS, len(items)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="seed") as pool:
        return list(pool.map(fn, items))


def _insert_ignore(conn: Connection, table: Table, rows: List[dict]) -> None:
    """Insert `rows`, skipping any row that hits a primary key or unique conflict."""
    if not rows:
        return
    dialect = conn.dialect.name
    if dialect == "postgresql":
        stmt = postgresql.insert(table).on_conflict_do_nothing()
    elif dialect == "sqlite":
        stmt = sqlite.insert(table).on_conflict_do_nothing()
    else:
        raise ValueError(f"Unsupported database dialect for seeding: {dialect}")
    conn.execute(stmt, rows)


def _count(conn: Connection, table: Table) -> int:
    return conn.execute(select(func.count()).select_from(table)).scalar_one()


def _write_step(conn: Connection, step: str, table: Table, rows: List[dict]) -> StepResult:
    with conn.begin():
        table.create(bind=conn, checkfirst=True)
        before = _count(conn, table)
        _insert_ignore(conn, table, rows)
        inserted = _count(conn, table) - before
    result = StepResult(step=step, processed=len(rows), inserted=inserted)
    logger.info("Seeded %d %s (%d new)", result.processed, step, result.inserted)
    return result


def _run_step(conn: Connection, step: str, table: Table, build_rows: Callable[[], List[dict]]) -> StepResult:
    try:
        return _write_step(conn, step, table, build_rows())
    except Exception as exc:
        logger.exception("Error seeding %s", step)
        raise SeedError(step, exc) from exc


def seed_users(
    conn: Connection,
    users: Iterable[UserSeed],
    rounds: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> StepResult:
    users = list(users)

    def _row(user: UserSeed) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password": get_password_hash(user.password, rounds=rounds),
        }

    return _run_step(conn, "users", models.UserModel.__table__, lambda: _fan_out(_row, users, max_workers))


def seed_customers(conn: Connection, customers: Iterable[CustomerSeed]) -> StepResult:
    rows = [c.model_dump() for c in customers]
    return _run_step(conn, "customers", models.CustomerModel.__table__, lambda: rows)


def seed_invoices(conn: Connection, invoices: Iterable[InvoiceSeed]) -> StepResult:
    rows = [
        {
            "id": inv.id,
            "customer_id": inv.customer_id,
            "amount": inv.amount,
            "status": inv.status.value,
            "date": inv.date,
        }
        for inv in invoices
    ]
    return _run_step(conn, "invoices", models.InvoiceModel.__table__, lambda: rows)


def seed_revenue(conn: Connection, revenue: Iterable[RevenueSeed]) -> StepResult:
    rows = [r.model_dump() for r in revenue]
    return _run_step(conn, "revenue", models.RevenueModel.__table__, lambda: rows)


def seed_database(
    engine: Engine,
    dataset: Optional[SeedDataset] = None,
    *,
    rounds: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> SeedReport:
    """Create the dashboard tables if missing and insert the dataset.

    Safe to call repeatedly: rows whose key already exists are skipped, so a
    second run reports zero inserted rows. Raises `SeedError` naming the
    failing step; the connection is closed on every path.
    """
    if dataset is None:
        try:
            dataset = load_placeholder_dataset()
        except Exception as exc:
            logger.exception("Invalid seed dataset")
            raise SeedError("dataset", exc) from exc

    logger.info("Starting database seeding")
    try:
        conn = engine.connect()
    except Exception as exc:
        logger.exception("Could not connect to the database")
        raise SeedError("connect", exc) from exc

    report = SeedReport()
    try:
        # customers before invoices: invoices.customer_id references customers.id
        report.steps.append(seed_users(conn, dataset.users, rounds=rounds, max_workers=max_workers))
        report.steps.append(seed_customers(conn, dataset.customers))
        report.steps.append(seed_invoices(conn, dataset.invoices))
        report.steps.append(seed_revenue(conn, dataset.revenue))
    finally:
        conn.close()

    report.success = True
    logger.info("Database seeded successfully: %s", report.counts())
    return report


__all__ = [
    "STEPS",
    "StepResult",
    "SeedReport",
    "seed_users",
    "seed_customers",
    "seed_invoices",
    "seed_revenue",
    "seed_database",
]
