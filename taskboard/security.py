"""
Taskboard Backend — Password Hasher
=====================================

What:  One-way salted password hashing and verification (bcrypt).
How:   passlib's CryptContext with a fixed bcrypt cost factor of 10. Each
       hash embeds its own random salt, so hashing the same plaintext twice
       yields different strings that both verify.
Why threadpool:
    bcrypt at cost 10 takes tens of milliseconds of pure CPU. Running it on
    the event loop would stall every other request for that long, so both
    operations are handed to Starlette's threadpool and awaited.
"""

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

BCRYPT_ROUNDS = 10


class PasswordHasher:
    """Async facade over a bcrypt CryptContext."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, plaintext: str) -> str:
        """Return a salted bcrypt hash of `plaintext`."""
        return await run_in_threadpool(self.context.hash, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """True if `plaintext` matches `hashed`."""
        return await run_in_threadpool(self.context.verify, plaintext, hashed)


password_hasher = PasswordHasher()
