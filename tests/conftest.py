from __future__ import annotations

import pytest

from fidem_lottery.lottery import LotteryConfig, LotteryEngine
from tests._support.random_sources import FixedIndexRandomSource


@pytest.fixture
def three_ball_config() -> LotteryConfig:
    return LotteryConfig(
        ball_count=3,
        ticket_prize=10,
        base_funds=0,
        total_prize_ratio=0.5,
        winner_ratios=(0.5, 0.25, 0.1),
    )


@pytest.fixture
def first_ball_engine(three_ball_config: LotteryConfig) -> LotteryEngine:
    return LotteryEngine(three_ball_config, FixedIndexRandomSource(0))
