"""Lottery engine package."""

from .engine import LotteryEngine
from .errors import LotteryError, LotteryErrorKind
from .models import LotteryConfig, RoundState, WinnerRecord
from .random_source import RandomSource, SecureRandomSource

__all__ = [
    "LotteryConfig",
    "LotteryEngine",
    "LotteryError",
    "LotteryErrorKind",
    "RandomSource",
    "RoundState",
    "SecureRandomSource",
    "WinnerRecord",
]
