"""
Strategy factory.

create_strategy() is the single entry point for instantiating any Strategy.

To add a new strategy type (e.g., a minimax searcher):
  1. Create reversiagent/strategies/minimax.py implementing Strategy
  2. Add its name to STRATEGY_NAMES and a case here
"""

from __future__ import annotations

from reversiagent.strategies.base import Strategy
from reversiagent.strategies.human import HumanStrategy
from reversiagent.strategies.random import RandomStrategy

__all__ = [
    "Strategy",
    "RandomStrategy",
    "HumanStrategy",
    "STRATEGY_NAMES",
    "create_strategy",
]

STRATEGY_NAMES = ("random", "human")


def create_strategy(kind: str, seed: int | None = None) -> Strategy:
    """
    Instantiate the strategy named in config (player.strategy).

    `seed` only applies to strategies with randomness.
    """
    match kind:
        case "random":
            return RandomStrategy(seed=seed)
        case "human":
            return HumanStrategy()
        case _:
            raise ValueError(
                f"Unknown strategy '{kind}'. Choose one of: {', '.join(STRATEGY_NAMES)}"
            )
