"""
Reversi Agent — entry point.

Usage:
    python main.py [config.yaml]

Wires together:  config → logging → connection → strategy → turn driver → CLI display
"""

from __future__ import annotations

import asyncio
import logging
import logging.handlers
import signal
import sys
from datetime import datetime
from pathlib import Path

from reversiagent.cli.display import console, display_event
from reversiagent.config import Config, load_config
from reversiagent.connection import ServerConnection
from reversiagent.driver import TurnDriver
from reversiagent.errors import AgentConnectionError, ProtocolError, ReversiError
from reversiagent.events import ConnectedEvent
from reversiagent.strategies import create_strategy
from reversiagent.transcript import GameTranscript

logger = logging.getLogger("reversiagent")


def _setup_logging(config: Config) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]  # console, warnings only
    handlers[0].setLevel(logging.WARNING)
    if config.logging.file:
        log_file = Path(config.logging.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=2 * 1024 * 1024, backupCount=3,  # 2 MB × 3 files
                encoding="utf-8",
            )
        )
    logging.basicConfig(
        level=config.logging.level_value,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        handlers=handlers,
    )


async def _main(stop_event: asyncio.Event) -> None:
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config.yaml")
    try:
        config = load_config(config_path)
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/] {exc}")
        sys.exit(1)
    except ValueError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    _setup_logging(config)
    player = config.player.number
    strategy = create_strategy(config.player.strategy, seed=config.player.seed)

    transcript: GameTranscript | None = None
    if config.game.save_transcript:
        transcript = GameTranscript(
            log_dir=config.transcript_dir_path,
            player=player,
            game_id=datetime.now().strftime("%Y%m%d_%H%M%S"),
        )
        console.print(f"[dim]Transcript: {transcript.path}[/]")

    connection = await ServerConnection.open(
        config.server.host,
        config.server.base_port,
        player,
        read_size=config.server.read_size,
        connect_timeout=config.server.connect_timeout,
        read_timeout=config.server.read_timeout,
    )
    async with connection:
        connected = ConnectedEvent(
            host=connection.host,
            port=connection.port,
            player=player,
            game_minutes=connection.game_minutes,
        )
        display_event(connected)
        if transcript:
            transcript.record(connected)

        driver = TurnDriver(
            connection,
            strategy,
            player,
            opening_moves=config.game.opening_moves,
        )
        async for event in driver.run(stop_event=stop_event):
            display_event(event)
            if transcript:
                transcript.record(event)


def main() -> None:
    async def _run() -> None:
        stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()

        original_sigint = signal.getsignal(signal.SIGINT)

        def _on_sigint(sig: int, frame: object) -> None:
            # Schedule the event set on the event loop thread (safe on Windows)
            loop.call_soon_threadsafe(stop_event.set)
            # Restore the original handler so a second Ctrl+C force-quits
            signal.signal(signal.SIGINT, original_sigint)

        signal.signal(signal.SIGINT, _on_sigint)
        await _main(stop_event)

    try:
        asyncio.run(_run())
    except AgentConnectionError as exc:
        logger.error("Connection error: %s", exc)
        console.print(f"[red]Connection error:[/] {exc}")
        sys.exit(2)
    except ProtocolError as exc:
        logger.error("Protocol error: %s", exc)
        console.print(f"[red]Protocol error:[/] {exc}")
        sys.exit(3)
    except ReversiError as exc:
        logger.error("Agent error: %s", exc)
        console.print(f"[red]Error:[/] {exc}")
        sys.exit(4)


if __name__ == "__main__":
    main()
