"""System routes: database seeding and health.

`GET /seed` runs `acme.seed.seed_database` against the configured engine. It
is safe to call multiple times: rows that already exist are skipped.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from acme import schemas
from acme.database import get_engine
from acme.errors import SeedError, make_error_response
from acme.seed import seed_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


@router.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get(
    "/seed",
    response_model=schemas.SeedResponse,
    responses={500: {"model": schemas.SeedErrorResponse, "description": "Seeding failed"}},
)
def seed_data(engine: Engine = Depends(get_engine)):
    """Create the dashboard tables if missing and insert the placeholder dataset.

    Runs in the threadpool: password hashing and the inserts block.
    """
    try:
        report = seed_database(engine)
    except SeedError:
        # handled by the app-level SeedError handler
        raise
    except Exception as exc:
        logger.exception("Error seeding database: %s", exc)
        return JSONResponse(status_code=500, content=make_error_response(exc))

    logger.info("Seed request completed: %s", report.counts())
    return schemas.SeedResponse()
