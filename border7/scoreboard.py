"""Helpers for tracking results across the rounds of a session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .judgment import Outcome, is_player_loss, is_player_win

__all__ = ["RoundSummary", "SessionTotals", "SessionHistory"]


@dataclass(frozen=True, slots=True)
class RoundSummary:
    """Summary captured after a single round has been judged."""

    round_number: int
    outcome: Outcome
    dealer_score: int
    player_score: int


@dataclass(frozen=True, slots=True)
class SessionTotals:
    """Aggregate counts accumulated across all recorded rounds."""

    rounds: int
    wins: int
    losses: int
    pushes: int
    blackjacks: int


@dataclass(slots=True)
class SessionHistory:
    """Mutable tracker that accumulates round summaries for a session."""

    rounds: list[RoundSummary] = field(default_factory=list)
    _wins: int = field(default=0, init=False, repr=False)
    _losses: int = field(default=0, init=False, repr=False)
    _pushes: int = field(default=0, init=False, repr=False)
    _blackjacks: int = field(default=0, init=False, repr=False)

    def record(self, summary: RoundSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        expected = len(self.rounds) + 1
        if summary.round_number != expected:
            raise ValueError(f"expected round {expected}, got {summary.round_number}")
        self.rounds.append(summary)
        if is_player_win(summary.outcome):
            self._wins += 1
        elif is_player_loss(summary.outcome):
            self._losses += 1
        else:
            self._pushes += 1
        if summary.outcome is Outcome.BLACKJACK:
            self._blackjacks += 1

    @property
    def next_round_number(self) -> int:
        return len(self.rounds) + 1

    def totals(self) -> SessionTotals:
        """Return the aggregate counts for every recorded round."""

        return SessionTotals(
            rounds=len(self.rounds),
            wins=self._wins,
            losses=self._losses,
            pushes=self._pushes,
            blackjacks=self._blackjacks,
        )
