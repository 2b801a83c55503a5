"""
TCP connection to the game server.

Each player has its own port: base_port + player number. Right after the
connection is accepted the server sends a greeting "<player> <minutes>"; the
player number in it must match ours, otherwise we were configured for the
wrong seat and there is no point continuing.

Reads are chunked: one socket read is one message, as the server writes each
board update in a single send. A zero-length read means the server hung up.
"""

from __future__ import annotations

import asyncio
import logging

from reversiagent.board import Move
from reversiagent.errors import ConnectionClosedError, PlayerMismatchError, TransportError
from reversiagent.protocol import encode_move, parse_greeting

logger = logging.getLogger(__name__)


class ServerConnection:
    """Owns the stream pair for one game. Use ServerConnection.open() to create."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        *,
        host: str,
        port: int,
        player: int,
        read_size: int = 1024,
        read_timeout: float | None = None,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self.host = host
        self.port = port
        self.player = player
        self.game_minutes = 0.0
        self._read_size = read_size
        self._read_timeout = read_timeout

    @classmethod
    async def open(
        cls,
        host: str,
        base_port: int,
        player: int,
        *,
        read_size: int = 1024,
        connect_timeout: float = 10.0,
        read_timeout: float | None = None,
    ) -> ServerConnection:
        """
        Connect, read the greeting and cross-check the player number.

        Raises:
            TransportError: the server is unreachable or the handshake timed out.
            ConnectionClosedError: the server hung up before greeting us.
            PlayerMismatchError: the greeting names a different player.
        """
        port = base_port + player
        try:
            async with asyncio.timeout(connect_timeout):
                reader, writer = await asyncio.open_connection(host, port)
        except (OSError, TimeoutError) as exc:
            raise TransportError(f"Could not connect to {host}:{port}: {exc!r}") from exc

        conn = cls(
            reader,
            writer,
            host=host,
            port=port,
            player=player,
            read_size=read_size,
            read_timeout=read_timeout,
        )
        try:
            async with asyncio.timeout(connect_timeout):
                raw = await conn.read_message()
        except TimeoutError as exc:
            await conn.close()
            raise TransportError(f"No greeting from {host}:{port} within {connect_timeout}s") from exc
        except Exception:
            await conn.close()
            raise

        greeting = parse_greeting(raw)
        logger.debug("Greeting from %s:%d: %r", host, port, raw)
        if greeting.player != player:
            await conn.close()
            raise PlayerMismatchError(expected=player, actual=greeting.player)

        conn.game_minutes = greeting.game_minutes
        logger.info(
            "Connected to %s:%d as player %d (%.1f minute game)",
            host, port, player, greeting.game_minutes,
        )
        return conn

    # ------------------------------------------------------------------ #
    # I/O                                                                 #
    # ------------------------------------------------------------------ #

    async def read_message(self) -> str:
        """Wait for the next message. Raises ConnectionClosedError on EOF."""
        try:
            async with asyncio.timeout(self._read_timeout):
                data = await self._reader.read(self._read_size)
        except TimeoutError as exc:
            raise TransportError(
                f"No message from {self.host}:{self.port} within {self._read_timeout}s"
            ) from exc
        except OSError as exc:
            raise TransportError(f"Read from {self.host}:{self.port} failed: {exc!r}") from exc

        if not data:
            raise ConnectionClosedError()
        return data.decode("utf-8", errors="replace")

    async def send_move(self, move: Move) -> None:
        """Write "<row>\\n<col>\\n" and wait until it is flushed."""
        payload = encode_move(move).encode("utf-8")
        try:
            self._writer.write(payload)
            await self._writer.drain()
        except OSError as exc:
            raise TransportError(f"Write to {self.host}:{self.port} failed: {exc!r}") from exc

    async def close(self) -> None:
        if self._writer.is_closing():
            return
        self._writer.close()
        try:
            await self._writer.wait_closed()
        except OSError as exc:
            # Peer already reset the socket; nothing left to flush.
            logger.debug("Error while closing connection: %r", exc)

    async def __aenter__(self) -> ServerConnection:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[no-untyped-def]
        await self.close()
