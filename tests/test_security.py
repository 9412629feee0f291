"""
Taskboard Backend — Password Hasher Tests
===========================================

What:  Real bcrypt hashing through passlib (no doubles).
Note:  Cost 10 keeps each hash in the tens of milliseconds.
"""

import pytest

from taskboard.security import BCRYPT_ROUNDS, PasswordHasher


@pytest.fixture
def real_hasher():
    return PasswordHasher()


@pytest.mark.asyncio
async def test_hash_uses_cost_ten(real_hasher):
    hashed = await real_hasher.hash("password123")

    assert BCRYPT_ROUNDS == 10
    assert hashed.startswith("$2b$10$")
    assert hashed != "password123"


@pytest.mark.asyncio
async def test_same_password_hashes_differently(real_hasher):
    first = await real_hasher.hash("password123")
    second = await real_hasher.hash("password123")

    assert first != second
    assert await real_hasher.verify("password123", first)
    assert await real_hasher.verify("password123", second)


@pytest.mark.asyncio
async def test_wrong_password_does_not_verify(real_hasher):
    hashed = await real_hasher.hash("password123")

    assert not await real_hasher.verify("password124", hashed)
