"""Tests covering round judgment."""

from __future__ import annotations

import pytest

from border7.judgment import Outcome, is_player_loss, is_player_win, judge
from conftest import cards


@pytest.mark.parametrize(
    ("dealer_labels", "player_labels", "expected"),
    [
        (("A♠", "K♣"), ("5❤", "6♦"), Outcome.LOSE),
        (("9♠", "8♣"), ("10❤", "Q♦"), Outcome.WIN),
        (("9♠", "8♣"), ("10♠", "5♣", "8❤"), Outcome.LOSE),
        (("7♠", "7♣"), ("A❤", "K♦"), Outcome.BLACKJACK),
        (("A♠", "9♣"), ("10❤", "K♦"), Outcome.PUSH),
    ],
)
def test_judge_reference_scenarios(
    dealer_labels: tuple[str, ...],
    player_labels: tuple[str, ...],
    expected: Outcome,
) -> None:
    assert judge(cards(*dealer_labels), cards(*player_labels)) is expected


def test_player_bust_loses_even_when_dealer_busts() -> None:
    dealer_hand = cards("10♦", "6♦", "9♦")
    player_hand = cards("10♠", "5♣", "8❤")

    assert judge(dealer_hand, player_hand) is Outcome.LOSE


def test_dealer_bust_is_a_win() -> None:
    assert judge(cards("10♦", "6♦", "9♦"), cards("10♠", "2♣")) is Outcome.WIN


def test_higher_dealer_score_loses() -> None:
    assert judge(cards("10♦", "9♦"), cards("10♠", "8♣")) is Outcome.LOSE


def test_push_is_checked_before_player_blackjack() -> None:
    dealer_hand = cards("7♠", "4♣", "K♦")
    player_hand = cards("A❤", "K♣")

    assert judge(dealer_hand, player_hand) is Outcome.PUSH


def test_both_blackjack_is_a_push() -> None:
    assert judge(cards("A♠", "Q♣"), cards("A❤", "10♦")) is Outcome.PUSH


def test_soft_hands_compare_at_high_total() -> None:
    assert judge(cards("10♠", "8♣"), cards("A❤", "8♦")) is Outcome.WIN


def test_outcome_categories() -> None:
    assert is_player_win(Outcome.WIN)
    assert is_player_win(Outcome.BLACKJACK)
    assert is_player_loss(Outcome.LOSE)
    assert is_player_loss(Outcome.BUST_LOSE)
    assert not is_player_win(Outcome.PUSH)
    assert not is_player_loss(Outcome.PUSH)
