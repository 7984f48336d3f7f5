"""Password hashing helpers (passlib + bcrypt)."""

from __future__ import annotations

import os
from typing import Optional

from passlib.context import CryptContext

# bcrypt cost factor (work factor 2**rounds)
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """Hash `password` with bcrypt.

    `rounds` overrides the configured cost factor for a single call; tests pass
    the bcrypt minimum (4) to keep runs fast.
    """
    if rounds is None:
        return pwd_context.hash(password)
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)


__all__ = ["BCRYPT_ROUNDS", "pwd_context", "verify_password", "get_password_hash"]
