"""Fixed dealer drawing policy."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Sequence

from .cards import Card, Hand
from .deck import RandomSource, draw_random
from .errors import DeckExhaustedError, EmptyDeckError
from .scoring import SOFT_BONUS, has_ace, hand_total

__all__ = ["DealerPhase", "DEALER_STAND_THRESHOLD", "dealer_phase", "dealer_should_draw", "play_dealer"]

logger = logging.getLogger(__name__)

DEALER_STAND_THRESHOLD: Final[int] = 17


class DealerPhase(str, Enum):
    """States of the dealer once the player has stood."""

    DRAWING = "drawing"
    STANDING = "standing"


def _dealer_count(hand: Hand) -> int:
    total = hand_total(hand)
    if has_ace(hand):
        total += SOFT_BONUS
    return total


def dealer_should_draw(hand: Hand) -> bool:
    """Return ``True`` while the dealer count is below the stand threshold.

    An Ace always adds the soft bonus here, regardless of whether the hand
    would bust with it.
    """

    return _dealer_count(hand) < DEALER_STAND_THRESHOLD


def dealer_phase(hand: Hand) -> DealerPhase:
    return DealerPhase.DRAWING if dealer_should_draw(hand) else DealerPhase.STANDING


def play_dealer(
    deck: Sequence[Card],
    hand: Sequence[Card],
    rng: RandomSource,
) -> tuple[list[Card], list[Card]]:
    """Draw for the dealer until the stand threshold is met.

    Returns ``(remaining_deck, dealer_hand)``. Raises ``DeckExhaustedError``
    when the deck runs out before the dealer may stand.
    """

    remaining = list(deck)
    new_hand = list(hand)
    while dealer_phase(new_hand) is DealerPhase.DRAWING:
        try:
            card, remaining = draw_random(remaining, rng)
        except EmptyDeckError as exc:
            raise DeckExhaustedError(
                f"deck exhausted with dealer count {_dealer_count(new_hand)} "
                f"below {DEALER_STAND_THRESHOLD}"
            ) from exc
        new_hand.append(card)
    logger.debug("dealer stands on %d with %d card(s)", _dealer_count(new_hand), len(new_hand))
    return remaining, new_hand
