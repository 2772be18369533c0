from __future__ import annotations

import asyncio
import io

import pytest

from fidem_lottery.gui import LotteryMenu, build_results_table, format_amount, ordinal, render_table
from fidem_lottery.lottery import LotteryError, LotteryErrorKind, WinnerRecord


def scripted_input(*answers):
    remaining = list(answers)

    def _input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def make_menu(engine, *answers):
    output = io.StringIO()
    return LotteryMenu(engine, input_func=scripted_input(*answers), output=output), output


@pytest.mark.parametrize(
    "n, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (102, "102nd"), (111, "111th")],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_format_amount():
    assert format_amount(7.5) == "7.5"
    assert format_amount(3.75) == "3.75"
    assert format_amount(15.0) == "15"
    assert format_amount(0) == "0"


def test_results_table_marks_unowned_balls():
    winners = [
        WinnerRecord(owner="A", ball_number=1, prize=7.5),
        WinnerRecord(owner=None, ball_number=3, prize=3.75),
    ]

    assert build_results_table(winners) == [
        ["1st", "2nd"],
        ["Ball: 1", "Ball: 3"],
        ["A 7.5", "**NOBODY** 3.75"],
    ]


def test_render_table_aligns_columns():
    text = render_table([["1st", "2nd"], ["Ball: 10", "Ball: 2"]])

    assert text.splitlines() == [
        "1st      | 2nd",
        "---------+--------",
        "Ball: 10 | Ball: 2",
    ]


def test_sell_ticket_shows_ticket_number(first_ball_engine):
    menu, output = make_menu(first_ball_engine, "Alice")

    menu.sell_ticket()

    assert "Ticket sold: 1" in output.getvalue()
    assert first_ball_engine.round_state.sold_tickets == ("Alice",)


def test_empty_owner_returns_without_selling(first_ball_engine):
    menu, output = make_menu(first_ball_engine, "")

    menu.sell_ticket()

    assert output.getvalue() == ""
    assert first_ball_engine.round_state.tickets_sold == 0


def test_sold_out_is_reported(first_ball_engine):
    for owner in "ABC":
        first_ball_engine.sell_ticket(owner)
    menu, output = make_menu(first_ball_engine, "D")

    menu.sell_ticket()

    assert "Lottery is sold-out, sorry!" in output.getvalue()
    assert first_ball_engine.round_state.tickets_sold == 3


def test_other_lottery_errors_propagate(first_ball_engine, monkeypatch):
    def broken(owner):
        raise LotteryError.contract_violation("broken")

    monkeypatch.setattr(first_ball_engine, "sell_ticket", broken)
    menu, _ = make_menu(first_ball_engine, "A")

    with pytest.raises(LotteryError) as excinfo:
        menu.sell_ticket()

    assert excinfo.value.kind is LotteryErrorKind.CONFIGURATION_CONTRACT_VIOLATION


def test_menu_session_sells_and_draws(first_ball_engine):
    menu, output = make_menu(first_ball_engine, "1", "A", "1", "B", "2", "q")

    asyncio.run(menu.run())

    text = output.getvalue()
    assert "Ticket sold: 2" in text
    assert "Draw Results" in text
    assert "A 5" in text
    assert "B 2.5" in text
    assert "**NOBODY** 1" in text
    assert "Ball: 3" in text
    assert first_ball_engine.round_number == 2


def test_menu_rejects_unknown_option_and_stops_on_eof(first_ball_engine):
    menu, output = make_menu(first_ball_engine, "9")

    asyncio.run(menu.run())

    assert "This option is not implemented yet" in output.getvalue()
    assert output.getvalue().count("Fidem Lottery") == 2
