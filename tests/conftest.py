from __future__ import annotations

from typing import Sequence

import pytest

from border7.cards import Card


class FirstCardRng:
    """Always picks index 0 so draws follow deck order."""

    def randrange(self, stop: int) -> int:
        return 0


class ScriptedRng:
    """Returns the scripted indices in order."""

    def __init__(self, indices: Sequence[int]) -> None:
        self._indices = list(indices)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self._indices.pop(0)


def cards(*labels: str) -> list[Card]:
    return [Card.from_label(label) for label in labels]


@pytest.fixture
def first_card_rng() -> FirstCardRng:
    return FirstCardRng()
