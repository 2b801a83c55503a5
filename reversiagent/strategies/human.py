"""
HumanStrategy — picks a move from a numbered list on the terminal.

Uses run_in_executor so the blocking prompt doesn't stall the asyncio event
loop that owns the server connection.

The board is already displayed by cli/display.py before choose_move() is
called, so we only list the candidates.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table

from reversiagent.board import Move
from reversiagent.strategies.base import Strategy

console = Console(legacy_windows=False)


class HumanStrategy(Strategy):
    def __init__(self, name: str = "Human") -> None:
        super().__init__(name)

    async def choose_move(self, candidates: Sequence[Move]) -> Move:
        if not candidates:
            raise ValueError("HumanStrategy needs at least one candidate move")
        options = list(candidates)
        loop = asyncio.get_event_loop()
        index = await loop.run_in_executor(None, _prompt, options)
        return options[index - 1]


def _prompt(options: list[Move]) -> int:
    table = Table(show_header=True, header_style="bold", border_style="dim")
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Row", justify="right")
    table.add_column("Col", justify="right")
    for i, (row, col) in enumerate(options, 1):
        table.add_row(str(i), str(row), str(col))

    console.print()
    console.print(table)
    return IntPrompt.ask(
        "[bold]Your move[/]",
        choices=[str(i) for i in range(1, len(options) + 1)],
        show_choices=False,
    )
