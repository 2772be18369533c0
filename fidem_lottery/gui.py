"""
Terminal menu for selling tickets and running draws.

Reads owner names from the user and renders engine results; all lottery
rules live in the engine.
"""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, TextIO

from .lottery.engine import LotteryEngine
from .lottery.errors import LotteryError, LotteryErrorKind
from .lottery.models import WinnerRecord
from .utils.logger import get_logger

logger = get_logger(__name__)

TITLE = "Fidem Lottery"
NOBODY = "**NOBODY**"

MENU_ITEMS = [
    ("1", "Sell Ticket"),
    ("2", "Draw"),
    ("q", "Quit"),
]


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 22 -> '22nd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_amount(amount: float) -> str:
    """Render a fund amount without trailing zeros: 7.50 -> '7.5', 15.0 -> '15'."""
    text = f"{amount:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def build_results_table(winners: List[WinnerRecord]) -> List[List[str]]:
    """Rows of the results table: ordinal headers, balls, owners with prizes."""
    headers = [ordinal(tier) for tier in range(1, len(winners) + 1)]
    balls = [f"Ball: {winner.ball_number}" for winner in winners]
    names = [f"{winner.owner or NOBODY} {format_amount(winner.prize)}" for winner in winners]
    return [headers, balls, names]


def render_table(rows: List[List[str]]) -> str:
    if not rows or not rows[0]:
        return ""
    widths = [max(len(row[col]) for row in rows) for col in range(len(rows[0]))]
    lines = []
    for index, row in enumerate(rows):
        lines.append(" | ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if index == 0:
            lines.append("-+-".join("-" * width for width in widths))
    return "\n".join(lines)


class LotteryMenu:
    """Interactive main menu bound to one lottery engine."""

    def __init__(
        self,
        engine: LotteryEngine,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.engine = engine
        self.input_func = input_func
        self.output = output or sys.stdout

    def print_header(self, title):
        self._print(f"\n{'=' * 60}")
        self._print(title)
        self._print("=" * 60)

    def print_message(self, msg):
        self._print(msg)

    def print_error(self, msg):
        self._print(f"ERROR: {msg}")

    def print_menu(self):
        self.print_header(TITLE)
        info = self.engine.get_current_round_info()
        self._print(
            f"Round {info['round_number']}: {info['tickets_sold']} sold, "
            f"{info['tickets_remaining']} left, prize pool {format_amount(info['prize_pool'])}"
        )
        for key, label in MENU_ITEMS:
            self._print(f"{key}) {label}")

    def sell_ticket(self):
        """Prompt for an owner and sell one ticket."""
        owner = self._read("Owner's name: ")
        if not owner:
            return

        try:
            ticket_number = self.engine.sell_ticket(owner)
        except LotteryError as e:
            if e.kind is LotteryErrorKind.SOLD_OUT:
                self.print_error("Lottery is sold-out, sorry!")
                return
            raise

        self.print_message(f"Ticket sold: {ticket_number}")

    async def draw(self):
        """Draw the winners and display them as a table."""
        winners = await self.engine.draw()
        self.print_header("Draw Results")
        self._print(render_table(build_results_table(winners)))

    async def run(self):
        """Show the main menu until the user quits or input ends."""
        logger.info("Lottery menu started")
        while True:
            self.print_menu()
            choice = self._read("Select an option: ")
            if choice is None:
                break
            choice = choice.strip().lower()

            if choice in ("1", "sell", "sell ticket"):
                self.sell_ticket()
            elif choice in ("2", "draw"):
                await self.draw()
            elif choice in ("q", "quit", "exit"):
                break
            else:
                self.print_error("This option is not implemented yet")
        logger.info("Lottery menu closed")

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_func(prompt)
        except EOFError:
            return None

    def _print(self, text: str) -> None:
        print(text, file=self.output)
