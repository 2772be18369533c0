"""Fidem Lottery - numbered-ticket lottery with tiered prizes."""

from .lottery import (
    LotteryConfig,
    LotteryEngine,
    LotteryError,
    LotteryErrorKind,
    WinnerRecord,
)

__all__ = [
    "LotteryConfig",
    "LotteryEngine",
    "LotteryError",
    "LotteryErrorKind",
    "WinnerRecord",
]

__version__ = "1.0.0"
