from __future__ import annotations

import pytest

from border7.cards import Card, Rank, Suit, format_cards, iter_full_deck
from border7.errors import InvalidRankError
from border7.scoring import has_ace, is_blackjack, score


def test_full_deck_has_every_combination_once() -> None:
    deck = list(iter_full_deck())

    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {card.suit for card in deck} == set(Suit)
    assert {card.rank for card in deck} == set(Rank)


def test_full_deck_is_suit_major() -> None:
    deck = list(iter_full_deck())

    assert deck[0] == Card(Suit.SPADES, Rank.ACE)
    assert deck[12] == Card(Suit.SPADES, Rank.KING)
    assert deck[13] == Card(Suit.CLUBS, Rank.ACE)
    assert deck[-1] == Card(Suit.DIAMONDS, Rank.KING)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("A♠", Card(Suit.SPADES, Rank.ACE)),
        ("10❤", Card(Suit.HEARTS, Rank.TEN)),
        ("Q♦", Card(Suit.DIAMONDS, Rank.QUEEN)),
        ("7♣", Card(Suit.CLUBS, Rank.SEVEN)),
    ],
)
def test_from_label_round_trips(label: str, expected: Card) -> None:
    card = Card.from_label(label)

    assert card == expected
    assert card.label() == label


@pytest.mark.parametrize("label", ["", "A", "1♠", "AX"])
def test_from_label_rejects_garbage(label: str) -> None:
    with pytest.raises(ValueError):
        Card.from_label(label)


def test_cards_are_immutable_values() -> None:
    card = Card(Suit.SPADES, Rank.ACE)

    with pytest.raises(AttributeError):
        card.rank = Rank.KING  # type: ignore[misc]
    assert card == Card(Suit.SPADES, Rank.ACE)
    assert format_cards([card, Card(Suit.HEARTS, Rank.TEN)]) == "A♠ 10❤"


def test_plain_string_fields_are_normalised() -> None:
    ace = Card(Suit.SPADES, "A")  # type: ignore[arg-type]
    king = Card("♣", Rank.KING)  # type: ignore[arg-type]

    assert ace.rank is Rank.ACE
    assert king.suit is Suit.CLUBS
    assert ace == Card(Suit.SPADES, Rank.ACE)
    assert has_ace([ace, king])
    assert is_blackjack([ace, king])
    assert score([ace, king]) == [21]


@pytest.mark.parametrize("rank", ["1", "11", "Z", ""])
def test_unknown_rank_is_rejected(rank: str) -> None:
    with pytest.raises(InvalidRankError):
        Card(Suit.SPADES, rank)  # type: ignore[arg-type]


def test_unknown_suit_is_rejected() -> None:
    with pytest.raises(ValueError):
        Card("X", Rank.ACE)  # type: ignore[arg-type]
