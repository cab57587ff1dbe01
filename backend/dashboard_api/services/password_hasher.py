"""bcrypt password hashing.

bcrypt is CPU-bound, so the async helpers push each hash onto a worker
thread and let independent passwords hash concurrently.
"""

from __future__ import annotations

import asyncio

import bcrypt


class PasswordHasher:
    """Salted one-way password transform with a configurable cost factor."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        """Return True if *password* matches the stored bcrypt *hashed* value."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def hash_many(self, passwords: list[str]) -> list[str]:
        """Hash *passwords* concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.hash_async(p) for p in passwords)))
