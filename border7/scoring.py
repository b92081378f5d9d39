"""Hand scoring helpers: hard totals, soft hands and blackjack detection."""

from __future__ import annotations

from typing import Final

from .cards import Card, Hand, Rank
from .errors import InvalidRankError

__all__ = [
    "BLACKJACK_SCORE",
    "SOFT_BONUS",
    "rank_value",
    "hand_total",
    "has_ace",
    "is_face_card_or_ten",
    "is_blackjack",
    "is_soft_hand",
    "is_bust",
    "score",
    "last_score",
    "format_score",
]

BLACKJACK_SCORE: Final[int] = 21
SOFT_BONUS: Final[int] = 10

_FACE_RANKS: Final[frozenset[Rank]] = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})


def rank_value(rank: Rank | str) -> int:
    """Return the hard value of ``rank``: Ace is 1, faces are 10."""

    try:
        member = Rank(rank)
    except ValueError as exc:
        raise InvalidRankError(f"unknown rank {rank!r}") from exc
    if member is Rank.ACE:
        return 1
    if member in _FACE_RANKS:
        return 10
    return int(member.value)


def hand_total(hand: Hand) -> int:
    """Sum of rank values with every Ace counted as 1."""

    return sum(rank_value(card.rank) for card in hand)


def has_ace(hand: Hand) -> bool:
    return any(card.rank is Rank.ACE for card in hand)


def is_face_card_or_ten(card: Card) -> bool:
    return rank_value(card.rank) == 10


def is_blackjack(hand: Hand) -> bool:
    """Return ``True`` for a two-card hand holding an Ace and a ten-valued card."""

    if len(hand) != 2:
        return False
    first, second = hand
    if first.rank is Rank.ACE:
        return is_face_card_or_ten(second)
    if second.rank is Rank.ACE:
        return is_face_card_or_ten(first)
    return False


def is_soft_hand(hand: Hand) -> bool:
    """Return ``True`` when one Ace can count as 11 without reaching 21.

    A blackjack is never soft. Only a single Ace is ever promoted, even when
    the hand holds several.
    """

    if is_blackjack(hand):
        return False
    if not has_ace(hand):
        return False
    return hand_total(hand) + SOFT_BONUS < BLACKJACK_SCORE


def is_bust(hand: Hand) -> bool:
    return hand_total(hand) > BLACKJACK_SCORE


def score(hand: Hand) -> list[int]:
    """Return ``[21]``, ``[low, high]`` for soft hands, or ``[total]``."""

    if is_blackjack(hand):
        return [BLACKJACK_SCORE]
    total = hand_total(hand)
    if is_soft_hand(hand):
        return [total, total + SOFT_BONUS]
    return [total]


def last_score(hand: Hand) -> int:
    """Canonical comparison value: the high total of a soft hand."""

    return score(hand)[-1]


def format_score(hand: Hand) -> str:
    """Display string such as ``"7 | 17"`` for soft hands or ``"20"``."""

    return " | ".join(str(value) for value in score(hand))
