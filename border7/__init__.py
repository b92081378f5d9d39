"""Top-level package for the Border 7 game engine."""

from . import cards, dealer, deck, errors, judgment, scoreboard, scoring, state

__all__ = [
    "cards",
    "dealer",
    "deck",
    "errors",
    "judgment",
    "scoreboard",
    "scoring",
    "state",
]
