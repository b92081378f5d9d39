"""Textual-powered interactive Border 7 table."""

from __future__ import annotations

import logging

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ... import scoreboard, state
from ...config import SessionConfig
from ...errors import Border7Error
from ...scoring import is_bust, last_score
from ..render import format_card, format_hand, render_state
from ..views import farewell_lines, outcome_message, status_message

MAX_EVENT_LINES = 18

logger = logging.getLogger(__name__)


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class InfoPanel(Static):
    """Reusable wrapper that expects ``update_panel`` calls with Rich renderables."""

    def update_panel(self, title: str, body) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class ScorePanel(Static):
    """Displays the running session tally."""

    def update_scores(self, history: scoreboard.SessionHistory) -> None:
        totals = history.totals()
        table = Table(box=box.SIMPLE_HEAVY, expand=True)
        table.add_column("Rounds", justify="right")
        table.add_column("Win", justify="right")
        table.add_column("Lose", justify="right")
        table.add_column("Push", justify="right")
        table.add_column("Blackjack", justify="right")
        if totals.rounds:
            table.add_row(
                str(totals.rounds),
                str(totals.wins),
                str(totals.losses),
                str(totals.pushes),
                str(totals.blackjacks),
            )
        else:
            table.add_row(Text.from_markup("[dim]No results yet[/dim]"), "-", "-", "-", "-")
        self.update(Panel(table, title="Session", border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class Border7App(App):
    """Textual Border 7 game UI."""

    CSS = """
    #main {
        height: 1fr;
    }

    #left, #right {
        width: 1fr;
        padding: 0 1;
    }

    EventLog {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("h", "hit", "Hit"),
        Binding("s", "stand", "Stand"),
        Binding("n", "next_round", "Next round"),
        Binding("r", "toggle_reveal", "Reveal dealer"),
        Binding("e", "end_session", "End session"),
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(self, config: SessionConfig) -> None:
        super().__init__()
        self.session_config = config
        self.rng = config.make_rng()
        self.reveal_enabled = config.reveal_dealer
        self.history = scoreboard.SessionHistory()
        self.game_state: state.GameState | None = None
        self.round_recorded = False
        self.session_over = False

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.table_panel: InfoPanel | None = None
        self.event_log: EventLog | None = None
        self.score_panel: ScorePanel | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.table_panel = InfoPanel(id="table")
        self.table_panel.update_panel("Table", Text.from_markup("[dim]Shuffling…[/dim]"))
        left = Vertical(self.table_panel, id="left")

        self.event_log = EventLog(id="events")
        self.score_panel = ScorePanel(id="scores")
        self.score_panel.update_scores(self.history)
        right = Vertical(self.event_log, self.score_panel, id="right")

        yield Horizontal(left, right, id="main")
        yield Footer()

    async def on_mount(self) -> None:
        self._log_event(f"[dim]Seed {self.session_config.seed}[/dim]")
        await self._start_round()

    async def action_hit(self) -> None:
        if not self._player_may_act():
            return
        assert self.game_state is not None
        try:
            self.game_state = state.hit(self.game_state, self.rng)
        except Border7Error as exc:
            await self._handle_engine_error(exc)
            return
        drawn = self.game_state.player_hand[-1]
        self._log_event(f"You draw {format_card(drawn)}")
        if is_bust(self.game_state.player_hand):
            self._log_event("[red]You bust[/red]")
        await self._refresh_ui()

    async def action_stand(self) -> None:
        if not self._player_may_act():
            return
        assert self.game_state is not None
        before = len(self.game_state.dealer_hand)
        try:
            self.game_state = state.stand(self.game_state, self.rng)
        except Border7Error as exc:
            await self._handle_engine_error(exc)
            return
        drawn = self.game_state.dealer_hand[before:]
        if drawn:
            self._log_event(f"Dealer draws {format_hand(drawn)}")
        await self._handle_round_end()

    async def action_next_round(self) -> None:
        if self.session_over:
            return
        if self.game_state is not None and not self.game_state.turn_ended:
            self._set_status("Finish the current round first: " + status_message(self.game_state))
            return
        await self._start_round()

    async def action_toggle_reveal(self) -> None:
        self.reveal_enabled = not self.reveal_enabled
        await self._refresh_ui()

    async def action_end_session(self) -> None:
        self.session_over = True
        totals = self.history.totals()
        lines = farewell_lines(totals)
        for line in lines:
            self._log_event(f"[bold]{line}[/bold]")
        self._set_status(" • ".join(lines) + " Press [bold]Q[/bold] to quit.")

    def _player_may_act(self) -> bool:
        return (
            not self.session_over
            and self.game_state is not None
            and not self.game_state.turn_ended
        )

    async def _start_round(self) -> None:
        try:
            self.game_state = state.deal_new_game(self.rng)
        except Border7Error as exc:
            await self._handle_engine_error(exc)
            return
        self.round_recorded = False
        dealer_up = self.game_state.dealer_hand[0]
        self._log_event(
            f"[bold cyan]Round {self.history.next_round_number}[/bold cyan] "
            f"dealer shows {format_card(dealer_up)}"
        )
        await self._refresh_ui()

    async def _handle_round_end(self) -> None:
        assert self.game_state is not None
        if self.round_recorded:
            return
        result = state.outcome(self.game_state)
        summary = scoreboard.RoundSummary(
            round_number=self.history.next_round_number,
            outcome=result,
            dealer_score=last_score(self.game_state.dealer_hand),
            player_score=last_score(self.game_state.player_hand),
        )
        self.history.record(summary)
        self.round_recorded = True
        self._log_event(
            f"{outcome_message(result)} dealer {summary.dealer_score} vs you {summary.player_score}"
        )
        logger.info("round %d finished: %s", summary.round_number, result.value)
        await self._refresh_ui()
        self._set_status(
            status_message(self.game_state)
            + " Press [bold]N[/bold] for the next round or [bold]E[/bold] to end."
        )

    async def _handle_engine_error(self, exc: Border7Error) -> None:
        logger.error("round aborted: %s", exc)
        self.game_state = None
        self._log_event(f"[bold red]Round aborted:[/bold red] {exc}")
        self._set_status("[red]Round aborted.[/red] Press [bold]N[/bold] to deal a fresh deck.")

    async def _refresh_ui(self) -> None:
        if self.game_state is None:
            return
        if self.table_panel:
            self.table_panel.update_panel(
                "Table",
                render_state(self.game_state, reveal_dealer=self.reveal_enabled, title="Border 7"),
            )
        if self.score_panel:
            self.score_panel.update_scores(self.history)
        if not self.game_state.turn_ended and not self.session_over:
            self._set_status(status_message(self.game_state))
        self.title = f"Border 7 • Round {self.history.next_round_number - int(self.round_recorded)}"

    def _log_event(self, message: str) -> None:
        if self.event_log:
            self.event_log.add(message)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message


def run_textual_app(config: SessionConfig) -> None:
    """Launch the Textual UI."""

    app = Border7App(config)
    app.run()
