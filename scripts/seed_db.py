"""Seed the dashboard database from the command line.

Runs the same routine as `GET /seed` without starting the web server.

Usage:
    python scripts/seed_db.py [--database-url URL] [--sslmode MODE] [--rounds N] [--workers N]

Exits with code 1 when a seeding step fails.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from acme.database import DATABASE_URL, make_engine
from acme.errors import SeedError
from acme.seed import seed_database


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create the dashboard tables and insert the placeholder dataset.")
    parser.add_argument("--database-url", default=DATABASE_URL, help="Database URL (default: DATABASE_URL / POSTGRES_URL)")
    parser.add_argument("--sslmode", default=None, help="libpq sslmode for PostgreSQL (default: DB_SSLMODE or 'require')")
    parser.add_argument("--rounds", type=int, default=None, help="bcrypt cost factor (default: BCRYPT_ROUNDS or 10)")
    parser.add_argument("--workers", type=int, default=None, help="password hashing threads (default: SEED_MAX_WORKERS or 8)")
    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)

    engine = make_engine(args.database_url, sslmode=args.sslmode)
    try:
        report = seed_database(engine, rounds=args.rounds, max_workers=args.workers)
    except SeedError as exc:
        print(f"Seeding failed at step '{exc.step}': {exc}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    for step in report.steps:
        print(f"{step.step}: {step.processed} processed, {step.inserted} inserted")
    print("Database seeded successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
