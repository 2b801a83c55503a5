"""
Abstract Strategy interface.

A strategy receives the ordered, non-empty list of moves the legal-move
engine allows this turn and returns one of them. How it decides (dice roll,
terminal prompt, a search engine, a remote service) is its own business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from reversiagent.board import Move


class Strategy(ABC):
    """Abstract base class for all move-selection strategies."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def choose_move(self, candidates: Sequence[Move]) -> Move:
        """
        Return one element of `candidates`.

        The turn driver never calls this with an empty sequence, and it
        rejects any returned move that was not offered.

        Must be async. Implementations may await terminal input, engine
        queries, etc.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
