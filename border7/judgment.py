"""Round judgment comparing finished dealer and player hands."""

from __future__ import annotations

import logging
from enum import Enum

from .cards import Hand
from .scoring import BLACKJACK_SCORE, hand_total, is_blackjack, last_score

__all__ = ["Outcome", "judge", "is_player_win", "is_player_loss"]

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result categories from the player's point of view."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"
    BUST_LOSE = "bust_lose"


def is_player_win(outcome: Outcome) -> bool:
    return outcome in (Outcome.WIN, Outcome.BLACKJACK)


def is_player_loss(outcome: Outcome) -> bool:
    return outcome in (Outcome.LOSE, Outcome.BUST_LOSE)


def _judge(dealer_hand: Hand, player_hand: Hand) -> Outcome:
    # Evaluation order is load-bearing: a tie is reported before a player blackjack.
    if hand_total(player_hand) > BLACKJACK_SCORE:
        return Outcome.LOSE
    dealer_score = last_score(dealer_hand)
    player_score = last_score(player_hand)
    if dealer_score == player_score:
        return Outcome.PUSH
    if is_blackjack(player_hand):
        return Outcome.BLACKJACK
    if is_blackjack(dealer_hand):
        return Outcome.LOSE
    if dealer_score > BLACKJACK_SCORE:
        return Outcome.WIN
    if dealer_score < player_score:
        return Outcome.WIN
    return Outcome.LOSE


def judge(dealer_hand: Hand, player_hand: Hand) -> Outcome:
    """Return the round outcome for the player."""

    outcome = _judge(dealer_hand, player_hand)
    logger.debug(
        "judged dealer %d vs player %d: %s",
        last_score(dealer_hand),
        last_score(player_hand),
        outcome.value,
    )
    return outcome
