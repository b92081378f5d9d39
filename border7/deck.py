"""Deck construction and random draws without replacement."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from .cards import Card, iter_full_deck
from .errors import EmptyDeckError

__all__ = ["RandomSource", "DECK_CARD_COUNT", "create_deck", "draw_random", "draw_n"]

logger = logging.getLogger(__name__)

DECK_CARD_COUNT = 52


class RandomSource(Protocol):
    """Minimal protocol for the injected random-number source."""

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol only
        ...


def create_deck() -> list[Card]:
    """Return every suit and rank combination exactly once, in deck order."""

    return list(iter_full_deck())


def draw_random(deck: Sequence[Card], rng: RandomSource) -> tuple[Card, list[Card]]:
    """Remove a uniformly chosen card, returning it and the reduced deck.

    The input deck is left untouched; callers receive a fresh list.
    """

    if not deck:
        raise EmptyDeckError("cannot draw from an empty deck")
    index = rng.randrange(len(deck))
    remaining = list(deck)
    card = remaining.pop(index)
    logger.debug("drew %s (%d card(s) left)", card.label(), len(remaining))
    return card, remaining


def draw_n(
    deck: Sequence[Card],
    hand: Sequence[Card],
    count: int,
    rng: RandomSource,
) -> tuple[list[Card], list[Card], list[Card]]:
    """Draw ``count`` cards in sequence, appending each to a copy of ``hand``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    remaining = list(deck)
    new_hand = list(hand)
    drawn: list[Card] = []
    for _ in range(count):
        card, remaining = draw_random(remaining, rng)
        drawn.append(card)
        new_hand.append(card)
    return drawn, remaining, new_hand
