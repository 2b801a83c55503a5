"""
Rich-based CLI event consumer.

This is the ONLY place where terminal output happens.
It translates AgentEvent objects into formatted Rich output.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from reversiagent.board import count_pieces
from reversiagent.events import (
    AgentEvent,
    ConnectedEvent,
    GameOverEvent,
    MalformedMessageEvent,
    MoveSentEvent,
    PassEvent,
    StateReceivedEvent,
)
from reversiagent.renderer import render_ascii

console = Console(legacy_windows=False)


def display_event(event: AgentEvent) -> None:
    """Dispatch an AgentEvent to the appropriate display function."""
    match event:
        case ConnectedEvent():
            _connected(event)
        case StateReceivedEvent():
            _state_received(event)
        case MalformedMessageEvent():
            console.print(f"  [yellow]![/] Ignoring malformed message: {escape(event.error)}")
        case MoveSentEvent():
            _move_sent(event)
        case PassEvent():
            console.print("  [yellow]—[/] No legal moves, passing")
        case GameOverEvent():
            _game_over(event)


# --------------------------------------------------------------------------- #
# Display functions                                                            #
# --------------------------------------------------------------------------- #

def _connected(event: ConnectedEvent) -> None:
    symbol = "X" if event.player == 1 else "O"
    console.print()
    console.print(
        Panel(
            f"Player [bold white]{event.player}[/] [dim]({symbol})[/]  "
            f"on [bold]{event.host}:{event.port}[/]\n"
            f"[dim]{event.game_minutes:g} minute game · "
            f"{event.timestamp.strftime('%Y-%m-%d %H:%M:%S')}[/]",
            title="[bold green] Reversi Agent [/]",
            border_style="green",
            expand=False,
        )
    )


def _state_received(event: StateReceivedEvent) -> None:
    if not event.is_my_turn:
        console.print(f"[dim]Round {event.round}: waiting for player {event.turn}[/]")
        return

    console.print()
    console.print(
        f"[dim]Round {event.round}[/]  [bold white]our move[/]  "
        f"[dim]clocks {event.t1:.1f}s / {event.t2:.1f}s[/]"
    )
    console.print(
        Panel(
            f"[green]{render_ascii(event.board)}[/]",
            border_style="dim",
            padding=(0, 1),
            expand=False,
        )
    )


def _move_sent(event: MoveSentEvent) -> None:
    phase_tag = "  [dim](opening)[/]" if event.phase == "opening" else ""
    console.print(
        f"  [green]✓[/] [bold]{event.move[0]},{event.move[1]}[/]{phase_tag}"
        f"  [dim]of {len(event.candidates)} candidates[/]"
    )


def _game_over(event: GameOverEvent) -> None:
    counts = count_pieces(event.last_board)
    if event.reason == "interrupted":
        outcome_text = "[yellow]Stopped by user[/]"
        style = "yellow"
    else:
        outcome_text = "Server ended the game"
        style = "green"

    console.print()
    console.print(
        Panel(
            f"{outcome_text}\n"
            f"[dim]Pieces on last board: X={counts[1]}  O={counts[2]}[/]",
            title="[bold]Game Over[/]",
            border_style=style,
            expand=False,
        )
    )
