"""Core data models for the lottery engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class LotteryConfig:
    """Static configuration of a lottery, trusted as supplied by the caller."""

    ball_count: int
    ticket_prize: float
    base_funds: float
    total_prize_ratio: float
    winner_ratios: Tuple[float, ...]

    @property
    def winner_count(self) -> int:
        return len(self.winner_ratios)


@dataclass(frozen=True)
class RoundState:
    """Tickets sold and funds collected during the active round."""

    current_funds: float
    sold_tickets: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def fresh(cls, config: LotteryConfig) -> "RoundState":
        return cls(current_funds=config.base_funds)

    @property
    def tickets_sold(self) -> int:
        return len(self.sold_tickets)

    def with_ticket(self, owner: str, ticket_prize: float) -> "RoundState":
        """Return the state after selling one more ticket to ``owner``."""
        return replace(
            self,
            current_funds=self.current_funds + ticket_prize,
            sold_tickets=self.sold_tickets + (owner,),
        )

    def owner_of(self, ball: int) -> Optional[str]:
        """Owner of the 0-based ``ball``, or None when nobody bought it."""
        if 0 <= ball < len(self.sold_tickets):
            return self.sold_tickets[ball]
        return None


@dataclass(frozen=True)
class WinnerRecord:
    """One prize tier of a draw result."""

    owner: Optional[str]
    ball_number: int
    prize: float
