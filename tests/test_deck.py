from __future__ import annotations

import random

import pytest

from border7.deck import DECK_CARD_COUNT, create_deck, draw_n, draw_random
from border7.errors import EmptyDeckError
from conftest import FirstCardRng, ScriptedRng, cards


def test_create_deck_returns_fresh_full_deck() -> None:
    deck_one = create_deck()
    deck_two = create_deck()

    assert len(deck_one) == DECK_CARD_COUNT
    assert set(deck_one) == set(deck_two)
    deck_one.pop()
    assert len(deck_two) == DECK_CARD_COUNT


def test_draw_random_uses_injected_index() -> None:
    deck = cards("A♠", "2♠", "3♠", "4♠")
    rng = ScriptedRng([2])

    card, remaining = draw_random(deck, rng)

    assert card == cards("3♠")[0]
    assert remaining == cards("A♠", "2♠", "4♠")
    assert rng.calls == [4]


def test_draw_random_leaves_input_untouched() -> None:
    deck = create_deck()

    card, remaining = draw_random(deck, random.Random(5))

    assert len(deck) == DECK_CARD_COUNT
    assert card in deck
    assert card not in remaining
    assert len(remaining) == DECK_CARD_COUNT - 1


@pytest.mark.parametrize("seed", range(10))
def test_draw_random_returns_member_and_shrinks(seed: int) -> None:
    rng = random.Random(seed)
    deck = create_deck()[: 5 + seed]

    card, remaining = draw_random(deck, rng)

    assert card in deck
    assert len(remaining) == len(deck) - 1
    assert sorted(remaining + [card], key=deck.index) == deck


def test_draw_random_on_empty_deck_fails() -> None:
    with pytest.raises(EmptyDeckError):
        draw_random([], FirstCardRng())


def test_draw_n_observes_reduced_deck() -> None:
    deck = cards("A♠", "2♠", "3♠")
    hand = cards("K♦")
    rng = ScriptedRng([2, 1])

    drawn, remaining, new_hand = draw_n(deck, hand, 2, rng)

    assert drawn == cards("3♠", "2♠")
    assert remaining == cards("A♠")
    assert new_hand == cards("K♦", "3♠", "2♠")
    assert hand == cards("K♦")
    assert rng.calls == [3, 2]


def test_draw_n_zero_is_a_copy() -> None:
    deck = cards("A♠")

    drawn, remaining, new_hand = draw_n(deck, [], 0, FirstCardRng())

    assert drawn == []
    assert remaining == deck
    assert remaining is not deck
    assert new_hand == []


def test_draw_n_past_the_end_fails() -> None:
    with pytest.raises(EmptyDeckError):
        draw_n(cards("A♠"), [], 2, FirstCardRng())


def test_draw_n_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        draw_n(create_deck(), [], -1, FirstCardRng())


def test_drawing_whole_deck_never_repeats() -> None:
    rng = random.Random(42)

    drawn, remaining, hand = draw_n(create_deck(), [], DECK_CARD_COUNT, rng)

    assert remaining == []
    assert len(set(drawn)) == DECK_CARD_COUNT
    assert hand == drawn
