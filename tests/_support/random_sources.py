"""Deterministic random sources for driving the ball machine in tests."""

from __future__ import annotations

from typing import List


class ScriptedRandomSource:
    """Answers a fixed list of indexes, recording every requested range."""

    def __init__(self, answers: List[int]):
        self.answers = list(answers)
        self.calls = []

    async def randint(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        return self.answers.pop(0)


class FailingRandomSource:
    """Succeeds ``successes`` times, then raises OSError."""

    def __init__(self, successes: int = 0):
        self.successes = successes
        self.calls = 0

    async def randint(self, minimum: int, maximum: int) -> int:
        self.calls += 1
        if self.calls > self.successes:
            raise OSError("entropy unavailable")
        return minimum


class FixedIndexRandomSource:
    """Deterministic source that always answers the same index.

    The index is clamped into the requested range, so ``FixedIndexRandomSource(0)``
    always picks the first remaining ball. Records every requested range in
    ``calls``.
    """

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    async def randint(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise ValueError(f"Invalid range [{minimum}, {maximum}]")
        self.calls.append((minimum, maximum))
        return max(minimum, min(self.index, maximum))
