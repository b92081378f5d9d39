"""Composable view primitives for the Border 7 CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import state as state_module
from ..cards import Card
from ..judgment import Outcome
from ..scoreboard import SessionTotals
from ..scoring import is_bust
from ..state import GameState

OUTCOME_MESSAGES = {
    Outcome.WIN: "[bold green]Win![/bold green]",
    Outcome.BLACKJACK: "[bold green]Blackjack![/bold green]",
    Outcome.PUSH: "[bold yellow]Push[/bold yellow]",
    Outcome.LOSE: "[bold red]Lose![/bold red]",
    Outcome.BUST_LOSE: "[bold red]Bust![/bold red]",
}

PROMPT_MESSAGE = "Hit or Stand?"


def outcome_message(outcome: Outcome) -> str:
    return OUTCOME_MESSAGES[outcome]


def status_message(game_state: GameState) -> str:
    """Message shown under the table for the current phase of the round."""

    if game_state.turn_ended:
        return outcome_message(state_module.outcome(game_state))
    if is_bust(game_state.player_hand):
        return "[red]Bust![/red] Press [bold]S[/bold] to reveal the dealer"
    return PROMPT_MESSAGE


def farewell_lines(totals: SessionTotals) -> list[str]:
    return [
        "Thank you for playing!",
        f"Win: {totals.wins} Lose: {totals.losses} Push: {totals.pushes}",
    ]


@dataclass(slots=True)
class TableView:
    """Renderable summarising the dealer and player hands."""

    state: GameState
    reveal_dealer: bool
    hand_formatter: Callable[[Sequence[Card | None]], str]

    def _dealer_cards(self) -> list[Card | None]:
        if self.reveal_dealer:
            return list(self.state.dealer_hand)
        return state_module.visible_dealer_hand(self.state)

    def _dealer_score(self) -> str:
        if self.reveal_dealer or self.state.turn_ended:
            return state_module.display_score(self.state.dealer_hand)
        return "?"

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Deck[/cyan]: {state_module.remaining_deck_size(self.state)} card(s)")
        phase = "Dealer done" if self.state.turn_ended else "Player to act"
        grid.add_row(f"[cyan]Phase[/cyan]: {phase}")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Seat", justify="left", style="bold")
        table.add_column("Hand", justify="left")
        table.add_column("Score", justify="right")

        table.add_row("Dealer", self.hand_formatter(self._dealer_cards()), self._dealer_score())
        table.add_row(
            "[bold yellow]You[/bold yellow]",
            self.hand_formatter(self.state.player_hand),
            state_module.display_score(self.state.player_hand),
        )

        return Group(table, self._metadata_panel())
