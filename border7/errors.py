"""Exception types raised by the Border 7 engine."""

from __future__ import annotations

__all__ = [
    "Border7Error",
    "EmptyDeckError",
    "DeckExhaustedError",
    "InvalidRankError",
    "TurnEndedError",
    "TurnNotEndedError",
]


class Border7Error(RuntimeError):
    """Base class for every error surfaced by the game engine."""


class EmptyDeckError(Border7Error):
    """Raised when a draw is attempted on an empty deck."""


class DeckExhaustedError(Border7Error):
    """Raised when the dealer must keep drawing but the deck has run out."""


class InvalidRankError(Border7Error, ValueError):
    """Raised when card data carries a rank outside the closed rank set."""


class TurnEndedError(Border7Error):
    """Raised when the player acts after the turn has already ended."""


class TurnNotEndedError(Border7Error):
    """Raised when a round outcome is requested before the player stands."""
