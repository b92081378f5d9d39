"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Suit
from ..state import GameState
from .views import TableView

_SUIT_COLORS = {
    Suit.SPADES: "cyan",
    Suit.CLUBS: "green",
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
}

HIDDEN_CARD = "[dim]🂠[/dim]"


def format_card(card: Card | None) -> str:
    """Return a Rich-rendered label for ``card``; ``None`` renders face down."""

    if card is None:
        return HIDDEN_CARD
    color = _SUIT_COLORS.get(card.suit, "white")
    return f"[{color}]{card.label()}[/{color}]"


def format_hand(cards: Sequence[Card | None]) -> str:
    if not cards:
        return "—"
    return " ".join(format_card(card) for card in cards)


def render_state(
    state: GameState,
    *,
    reveal_dealer: bool = False,
    title: str = "Border 7",
) -> RenderableType:
    """Return a Rich panel describing the current table."""

    view = TableView(state=state, reveal_dealer=reveal_dealer, hand_formatter=format_hand)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
