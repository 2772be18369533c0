"""Lottery error kinds."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class LotteryErrorKind(Enum):
    """Closed set of failures the lottery reports"""
    SOLD_OUT = "sold_out"                                                  # Recoverable
    RANDOM_SOURCE_FAILURE = "random_source_failure"                        # Aborts the draw
    CONFIGURATION_CONTRACT_VIOLATION = "configuration_contract_violation"  # Fatal


_DEFAULT_MESSAGES = {
    LotteryErrorKind.SOLD_OUT: "Lottery is sold out.",
    LotteryErrorKind.RANDOM_SOURCE_FAILURE: "Secure random source failed during the draw.",
    LotteryErrorKind.CONFIGURATION_CONTRACT_VIOLATION: "Lottery configuration violates the engine contract.",
}


class LotteryError(Exception):
    """Error raised by the lottery, tagged with its ``kind``.

    Callers branch on ``error.kind`` rather than on subclasses::

        try:
            engine.sell_ticket(owner)
        except LotteryError as exc:
            if exc.kind is not LotteryErrorKind.SOLD_OUT:
                raise
    """

    def __init__(self, kind: LotteryErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @classmethod
    def sold_out(cls) -> "LotteryError":
        return cls(LotteryErrorKind.SOLD_OUT)

    @classmethod
    def random_source_failure(cls, detail: str) -> "LotteryError":
        return cls(
            LotteryErrorKind.RANDOM_SOURCE_FAILURE,
            f"Secure random source failed during the draw: {detail}",
        )

    @classmethod
    def contract_violation(cls, detail: str) -> "LotteryError":
        return cls(LotteryErrorKind.CONFIGURATION_CONTRACT_VIOLATION, detail)

    @property
    def recoverable(self) -> bool:
        return self.kind is LotteryErrorKind.SOLD_OUT

    def __repr__(self) -> str:
        return f"LotteryError({self.kind.name}, {self.message!r})"
