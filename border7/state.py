"""Game state container and the player commands that advance it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, List

from .cards import Card, Hand, format_cards
from .dealer import play_dealer
from .deck import RandomSource, create_deck, draw_n
from .errors import TurnEndedError, TurnNotEndedError
from .judgment import Outcome, judge
from .scoring import format_score

__all__ = [
    "INITIAL_HAND_SIZE",
    "GameState",
    "new_game",
    "init",
    "deal_new_game",
    "hit",
    "stand",
    "display_score",
    "outcome",
    "remaining_deck_size",
    "visible_dealer_hand",
]

logger = logging.getLogger(__name__)

INITIAL_HAND_SIZE: Final[int] = 2


@dataclass(slots=True)
class GameState:
    """Deck and hands for a single round.

    Commands never mutate the state they receive; they return an updated copy.
    """

    deck: List[Card] = field(default_factory=create_deck)
    dealer_hand: List[Card] = field(default_factory=list)
    player_hand: List[Card] = field(default_factory=list)
    turn_ended: bool = False

    def copy(self) -> "GameState":
        """Return a copy whose card lists can be changed independently."""

        return GameState(
            deck=list(self.deck),
            dealer_hand=list(self.dealer_hand),
            player_hand=list(self.player_hand),
            turn_ended=self.turn_ended,
        )

    def card_count(self) -> int:
        """Cards across deck and both hands; always 52 for a consistent state."""

        return len(self.deck) + len(self.dealer_hand) + len(self.player_hand)


def new_game() -> GameState:
    """Return an undealt state holding a full deck."""

    return GameState()


def init(state: GameState, rng: RandomSource) -> GameState:
    """Deal the opening two cards to the dealer, then two to the player."""

    if state.dealer_hand or state.player_hand or state.turn_ended:
        raise ValueError("init requires a fresh game state")
    updated = state.copy()
    _, updated.deck, updated.dealer_hand = draw_n(
        updated.deck, updated.dealer_hand, INITIAL_HAND_SIZE, rng
    )
    _, updated.deck, updated.player_hand = draw_n(
        updated.deck, updated.player_hand, INITIAL_HAND_SIZE, rng
    )
    logger.debug(
        "dealt dealer %s, player %s",
        updated.dealer_hand[0].label(),
        format_cards(updated.player_hand),
    )
    return updated


def deal_new_game(rng: RandomSource) -> GameState:
    """Shortcut for ``init(new_game(), rng)``."""

    return init(new_game(), rng)


def hit(state: GameState, rng: RandomSource) -> GameState:
    """Draw one card into the player's hand."""

    if state.turn_ended:
        raise TurnEndedError("the player has already stood")
    updated = state.copy()
    _, updated.deck, updated.player_hand = draw_n(updated.deck, updated.player_hand, 1, rng)
    return updated


def stand(state: GameState, rng: RandomSource) -> GameState:
    """End the player's turn and let the dealer draw to completion."""

    if state.turn_ended:
        raise TurnEndedError("the player has already stood")
    updated = state.copy()
    updated.deck, updated.dealer_hand = play_dealer(updated.deck, updated.dealer_hand, rng)
    updated.turn_ended = True
    return updated


def display_score(hand: Hand) -> str:
    return format_score(hand)


def outcome(state: GameState) -> Outcome:
    """Judge the finished round; only valid once the turn has ended."""

    if not state.turn_ended:
        raise TurnNotEndedError("outcome is undecided until the player stands")
    return judge(state.dealer_hand, state.player_hand)


def remaining_deck_size(state: GameState) -> int:
    return len(state.deck)


def visible_dealer_hand(state: GameState) -> list[Card | None]:
    """Dealer cards as the player sees them; the hole card is ``None`` until the turn ends."""

    if state.turn_ended:
        return list(state.dealer_hand)
    return [card if idx != 1 else None for idx, card in enumerate(state.dealer_hand)]
