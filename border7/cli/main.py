"""Typer entry-point wiring for the Border 7 CLI."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from .. import simulation
from ..config import SessionConfig, resolve_seed
from ..log import LOG_LEVELS, parse_level, setup_logging, setup_textual_logging
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _validate_level(value: str) -> str:
    try:
        parse_level(value)
    except ValueError as exc:
        raise typer.BadParameter(f"choose one of {', '.join(LOG_LEVELS)}") from exc
    return value.upper()


@app.command()
def play(
    seed: int | None = typer.Option(
        None, envvar="BORDER7_SEED", help="Random seed for reproducible games (omit for randomness)."
    ),
    reveal: bool = typer.Option(
        False,
        "--reveal",
        help="Show the dealer's hole card before you stand.",
    ),
    log_level: str = typer.Option(
        "WARNING", envvar="BORDER7_LOG_LEVEL", callback=_validate_level, help="Logging level."
    ),
) -> None:
    """Play Border 7 interactively in the terminal."""

    config = SessionConfig(seed=seed, reveal_dealer=reveal, log_level=log_level)
    setup_textual_logging(config.log_level)
    run_textual_app(config)


@app.command()
def simulate(
    rounds: int = typer.Option(100, min=1, help="Number of rounds to play."),
    seed: int | None = typer.Option(None, envvar="BORDER7_SEED", help="Random seed for the session."),
    stand_on: int = typer.Option(
        simulation.DEFAULT_STAND_ON, min=2, max=21, help="Player stands once their score reaches this."
    ),
    log_level: str = typer.Option(
        "WARNING", envvar="BORDER7_LOG_LEVEL", callback=_validate_level, help="Logging level."
    ),
) -> None:
    """Play rounds automatically with a fixed player rule and print totals."""

    setup_logging(log_level)
    report = simulation.run_session(rounds, seed=resolve_seed(seed), stand_on=stand_on)
    totals = report.totals

    table = Table(title=f"Border 7 • seed {report.seed} • stand on {report.stand_on}")
    table.add_column("Rounds", justify="right")
    table.add_column("Win", justify="right")
    table.add_column("Lose", justify="right")
    table.add_column("Push", justify="right")
    table.add_column("Blackjack", justify="right")
    table.add_column("Win rate", justify="right")

    table.add_row(
        str(totals.rounds),
        str(totals.wins),
        str(totals.losses),
        str(totals.pushes),
        str(totals.blackjacks),
        f"{totals.wins / totals.rounds:.1%}",
    )

    console.print(table)


def main() -> None:
    """Entry-point for ``python -m border7.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
