"""
Lottery Engine - Sells numbered tickets and draws ranked winners
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..utils.logger import get_logger
from .errors import LotteryError
from .models import LotteryConfig, RoundState, WinnerRecord
from .random_source import RandomSource, SecureRandomSource

logger = get_logger(__name__)


class LotteryEngine:
    """Numbered-ticket lottery supporting one active round at a time.

    Not thread safe: callers sharing an engine must serialize ``sell_ticket``
    and ``draw`` themselves.
    """

    def __init__(self, config: LotteryConfig, random_source: Optional[RandomSource] = None):
        # The configuration is trusted as given; only the draw checks its contract.
        self.config = config
        self.random_source = random_source or SecureRandomSource()

        self.round_number = 1
        self.round_state = RoundState.fresh(config)

        logger.info(
            f"Lottery engine initialized: {config.ball_count} balls, "
            f"{config.winner_count} prize tiers, base funds {config.base_funds}"
        )

    def sell_ticket(self, owner: str) -> int:
        """Sell the next ticket to ``owner`` and return its 1-based number."""
        state = self.round_state
        if state.tickets_sold >= self.config.ball_count:
            logger.info(f"Round {self.round_number} sold out, rejecting ticket for {owner!r}")
            raise LotteryError.sold_out()

        self.round_state = state.with_ticket(owner, self.config.ticket_prize)
        ticket_number = self.round_state.tickets_sold

        logger.debug(f"Ticket {ticket_number} sold to {owner!r}, funds now {self.round_state.current_funds}")
        return ticket_number

    async def draw_balls(self) -> List[int]:
        """Pick one 0-based ball per prize tier without replacement.

        Each pick depends on the pool left by the previous one, so requests to
        the random source are strictly sequential.
        """
        ball_count = self.config.ball_count
        winner_count = self.config.winner_count
        if winner_count > ball_count:
            raise LotteryError.contract_violation(
                f"{winner_count} prize tiers cannot be drawn from {ball_count} balls"
            )

        balls = list(range(ball_count))
        winners = []
        for tier in range(winner_count):
            maximum = len(balls) - 1
            try:
                index = await self.random_source.randint(0, maximum)
            except LotteryError:
                raise
            except Exception as e:
                logger.error(f"Random source failed on tier {tier + 1}: {e}")
                raise LotteryError.random_source_failure(str(e)) from e

            # bool is an int subclass but never a valid pool index.
            if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= maximum:
                logger.error(f"Random source returned {index!r} outside [0, {maximum}]")
                raise LotteryError.random_source_failure(f"index {index!r} outside [0, {maximum}]")

            winners.append(balls.pop(index))
        return winners

    async def draw(self) -> List[WinnerRecord]:
        """Draw the winners of the current round and start the next one.

        The round is only reset once every winner is known; a failed draw
        leaves tickets and funds untouched.
        """
        state = self.round_state
        total_prize = state.current_funds * self.config.total_prize_ratio

        logger.info(
            f"Drawing round {self.round_number}: {state.tickets_sold} tickets sold, "
            f"prize pool {total_prize}"
        )

        try:
            winner_balls = await self.draw_balls()
        except LotteryError as e:
            logger.error(f"Draw for round {self.round_number} aborted: {e}")
            raise

        winners = [
            WinnerRecord(
                owner=state.owner_of(ball),
                ball_number=ball + 1,
                prize=total_prize * self.config.winner_ratios[tier],
            )
            for tier, ball in enumerate(winner_balls)
        ]

        self._start_new_round()

        for tier, winner in enumerate(winners, start=1):
            logger.info(f"  Tier {tier}: ball {winner.ball_number} -> {winner.owner or 'nobody'} ({winner.prize})")
        return winners

    def _start_new_round(self):
        """Replace the round state with a fresh one."""
        self.round_number += 1
        self.round_state = RoundState.fresh(self.config)
        logger.info(f"Round {self.round_number} started")

    # =============== STATUS AND INFORMATION METHODS ===============

    def get_current_round_info(self) -> Dict[str, Any]:
        """Get current round information"""
        state = self.round_state
        return {
            "round_number": self.round_number,
            "tickets_sold": state.tickets_sold,
            "tickets_remaining": self.config.ball_count - state.tickets_sold,
            "current_funds": state.current_funds,
            "prize_pool": state.current_funds * self.config.total_prize_ratio,
            "sold_out": state.tickets_sold >= self.config.ball_count,
        }
