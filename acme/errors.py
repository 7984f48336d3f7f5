"""Seeding errors and the standard error payload.

Provides:
- SeedError: raised by the seeder, carries the failing step and the original exception
- error_message(exc) -> str: flatten any exception to a user-facing message
- make_error_response(exc) -> dict payload: {"error": str}
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import DBAPIError

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class SeedError(Exception):
    """A seeding step failed.

    `step` is one of ``dataset``, ``connect``, ``users``, ``customers``,
    ``invoices`` or ``revenue``; `cause` is the exception raised by the
    database driver, the hasher or the dataset validation.
    """

    def __init__(self, step: str, cause: Optional[BaseException] = None) -> None:
        self.step = step
        self.cause = cause
        super().__init__(error_message(cause) if cause is not None else f"Seeding step '{step}' failed")

    def __repr__(self) -> str:
        return f"SeedError(step={self.step!r}, cause={self.cause!r})"


def error_message(exc: Optional[BaseException]) -> str:
    if exc is None:
        return UNKNOWN_ERROR_MESSAGE
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        # driver message only; the wrapper also carries the statement and bound parameters
        exc = exc.orig
    message = str(exc).strip()
    return message or UNKNOWN_ERROR_MESSAGE


def make_error_response(exc: Optional[BaseException]) -> dict:
    return {"error": error_message(exc)}


__all__ = ["UNKNOWN_ERROR_MESSAGE", "SeedError", "error_message", "make_error_response"]
