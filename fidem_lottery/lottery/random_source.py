"""
Random sources for the ball machine.

A lottery's fairness depends on unbiased, unpredictable ball selection, so the
default source draws from the OS CSPRNG through ``secrets`` rather than the
Mersenne Twister behind ``random``.
"""

from __future__ import annotations

import asyncio
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Produces uniformly distributed integers in ``[minimum, maximum]``."""

    async def randint(self, minimum: int, maximum: int) -> int:
        ...


class SecureRandomSource:
    """Cryptographically secure source backed by the OS entropy pool."""

    async def randint(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise ValueError(f"Invalid range [{minimum}, {maximum}]")
        # The last ball in the machine needs no entropy.
        if minimum == maximum:
            return minimum
        # os.urandom may block while the pool initializes; keep it off the loop.
        offset = await asyncio.to_thread(secrets.randbelow, maximum - minimum + 1)
        return minimum + offset
