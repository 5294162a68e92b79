"""Bcrypt password hashing and verification."""

from __future__ import annotations

from passlib.context import CryptContext

_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    """Hash a plaintext password with bcrypt."""
    return _ctx.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return _ctx.verify(plain, hashed)
    except ValueError:
        return False


def dummy_verify() -> None:
    """Burn one bcrypt verification so unknown usernames cost the same as wrong passwords."""
    _ctx.dummy_verify()
