"""Unit tests for password hashing and verification."""

import pytest

from postboard.errors import ValidationError
from postboard.services.credentials import hash_password, verify_password


@pytest.mark.asyncio
async def test_hash_then_verify() -> None:
    hashed = await hash_password("s3cret", rounds=4)
    assert hashed != "s3cret"
    assert hashed.startswith("$2")
    assert await verify_password("s3cret", hashed) is True
    assert await verify_password("wrong", hashed) is False


@pytest.mark.asyncio
async def test_hash_is_salted() -> None:
    assert await hash_password("same", rounds=4) != await hash_password("same", rounds=4)


@pytest.mark.asyncio
async def test_hash_uses_configured_rounds() -> None:
    # conftest sets BCRYPT_ROUNDS=4
    hashed = await hash_password("pw")
    assert hashed.split("$")[2] == "04"


@pytest.mark.asyncio
async def test_overlong_password_rejected_on_hash() -> None:
    with pytest.raises(ValidationError):
        await hash_password("x" * 73, rounds=4)


@pytest.mark.asyncio
async def test_overlong_password_never_verifies() -> None:
    hashed = await hash_password("x" * 72, rounds=4)
    assert await verify_password("x" * 73, hashed) is False
