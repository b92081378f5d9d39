"""Card abstractions and helpers for Border 7."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .errors import InvalidRankError

__all__ = ["Suit", "Rank", "Card", "Hand", "iter_full_deck", "format_cards"]


class Suit(str, Enum):
    """Enumeration of the four suits in a Border 7 deck."""

    SPADES = "♠"
    CLUBS = "♣"
    HEARTS = "❤"
    DIAMONDS = "♦"


class Rank(str, Enum):
    """Enumeration of ranks in deck order."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical playing card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        try:
            rank = Rank(self.rank)
        except ValueError as exc:
            raise InvalidRankError(f"unknown rank {self.rank!r}") from exc
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", Suit(self.suit))

    @classmethod
    def from_label(cls, label: str) -> "Card":
        """Parse labels such as ``"A♠"`` or ``"10❤"``."""

        if len(label) < 2:
            raise ValueError(f"invalid card label '{label}'")
        return cls(suit=Suit(label[-1]), rank=label[:-1])

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank.value}{self.suit.value}"


Hand = Sequence[Card]


def iter_full_deck() -> Iterable[Card]:
    """Yield all 52 physical cards in a fresh deck."""

    for suit in Suit:
        for rank in Rank:
            yield Card(suit=suit, rank=rank)


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.label() for card in cards)
