"""FastAPI application factory and app configuration for the Acme dashboard backend.

This module creates the FastAPI `app`, configures middleware (CORS, rate limiting),
registers the error handlers and includes the routers under `acme.routers.*`.
The database is not touched on startup; tables are created by `GET /seed`.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from acme.database import engine
from acme.errors import SeedError, make_error_response
from acme.routers import system

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))


DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "10/minute")
limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan startup: database %s", engine.url.render_as_string(hide_password=True))
    yield
    logger.info("Lifespan shutdown: disposing engine")
    engine.dispose()


app = FastAPI(title="Acme Dashboard Backend", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS (developer friendly defaults)
origins = os.getenv("CORS_ORIGINS", "*")
if origins == "*":
    allowed_origins: List[str] = ["*"]
else:
    # comma separated list
    allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content={"error": "Rate limit exceeded"})


@app.exception_handler(SeedError)
async def seed_error_handler(request: Request, exc: SeedError):
    logger.error("Error seeding database (step=%s): %s", exc.step, exc)
    return JSONResponse(status_code=500, content=make_error_response(exc))


app.include_router(system.router)


__all__ = ["app", "limiter"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
