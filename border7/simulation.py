"""Non-interactive harness that plays whole sessions with a fixed player rule."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Final

from . import scoreboard, state
from .deck import RandomSource
from .scoring import last_score

__all__ = ["DEFAULT_STAND_ON", "SessionReport", "play_round", "run_session"]

logger = logging.getLogger(__name__)

DEFAULT_STAND_ON: Final[int] = 17


@dataclass(frozen=True, slots=True)
class SessionReport:
    """Summary of a simulated session."""

    history: scoreboard.SessionHistory
    totals: scoreboard.SessionTotals
    seed: int
    stand_on: int


def play_round(
    round_number: int,
    rng: RandomSource,
    *,
    stand_on: int = DEFAULT_STAND_ON,
) -> tuple[state.GameState, scoreboard.RoundSummary]:
    """Play one round on a fresh deck: hit below ``stand_on``, then stand."""

    game_state = state.deal_new_game(rng)
    while last_score(game_state.player_hand) < stand_on:
        game_state = state.hit(game_state, rng)
    game_state = state.stand(game_state, rng)

    summary = scoreboard.RoundSummary(
        round_number=round_number,
        outcome=state.outcome(game_state),
        dealer_score=last_score(game_state.dealer_hand),
        player_score=last_score(game_state.player_hand),
    )
    return game_state, summary


def run_session(
    rounds: int,
    *,
    seed: int = 123,
    stand_on: int = DEFAULT_STAND_ON,
) -> SessionReport:
    """Play ``rounds`` independent rounds and return aggregate statistics."""

    if rounds <= 0:
        raise ValueError("rounds must be positive")

    rng = random.Random(seed)
    history = scoreboard.SessionHistory()

    for round_number in range(1, rounds + 1):
        _, summary = play_round(round_number, rng, stand_on=stand_on)
        history.record(summary)
        logger.info(
            "round %d: %s (dealer %d, player %d)",
            round_number,
            summary.outcome.value,
            summary.dealer_score,
            summary.player_score,
        )

    return SessionReport(
        history=history,
        totals=history.totals(),
        seed=seed,
        stand_on=stand_on,
    )
