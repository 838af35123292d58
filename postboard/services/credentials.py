"""Password hashing and verification (bcrypt).

Hashing is deliberately expensive (BCRYPT_ROUNDS, default 10), so both calls
run in a worker thread to keep the event loop free.
"""

import asyncio

import bcrypt

from postboard.errors import ValidationError
from postboard.settings import get_settings

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def check_password_length(plaintext: str) -> None:
    """Reject passwords bcrypt cannot hash in full."""
    if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
        )


def _hash(plaintext: str, rounds: int) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("ascii")


def _verify(plaintext: str, password_hash: str) -> bool:
    encoded = plaintext.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("ascii"))


async def hash_password(plaintext: str, rounds: int | None = None) -> str:
    """Hash a password with a fresh salt.

    Args:
        plaintext: Raw password.
        rounds: bcrypt cost factor; defaults to settings.bcrypt_rounds.

    Returns:
        bcrypt hash string (salt and cost embedded).
    """
    check_password_length(plaintext)
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    return await asyncio.to_thread(_hash, plaintext, rounds)


async def verify_password(plaintext: str, password_hash: str) -> bool:
    """Check a password against a stored hash.

    A mismatch is a normal False, not an error.
    """
    return await asyncio.to_thread(_verify, plaintext, password_hash)
