"""RandomStrategy: the baseline, uniform choice among the candidates."""

from __future__ import annotations

import random
from typing import Sequence

from reversiagent.board import Move
from reversiagent.strategies.base import Strategy


class RandomStrategy(Strategy):
    """
    Args:
        name: Display name.
        seed: Optional seed for a reproducible sequence of choices.
    """

    def __init__(self, name: str = "Random", seed: int | None = None) -> None:
        super().__init__(name)
        self._rng = random.Random(seed)

    async def choose_move(self, candidates: Sequence[Move]) -> Move:
        if not candidates:
            raise ValueError("RandomStrategy needs at least one candidate move")
        return self._rng.choice(list(candidates))
