"""
Configuration loading from config.yaml.

Uses typed dataclasses throughout so the rest of the app gets IDE
completion and type-checker support without touching raw dicts.
Every section and key is optional; missing values take the defaults below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from reversiagent.strategies import STRATEGY_NAMES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    base_port: int = 3333          # player N connects to base_port + N
    read_size: int = 1024          # bytes per socket read
    connect_timeout: float = 10.0  # seconds
    read_timeout: float | None = None  # None = wait forever for the next message

    def port_for(self, player: int) -> int:
        return self.base_port + player


@dataclass
class PlayerConfig:
    number: int = 1
    strategy: str = "random"
    seed: int | None = None


@dataclass
class GameConfig:
    opening_moves: int = 4   # turns per side governed by free center placement
    save_transcript: bool = True
    transcript_dir: str = "./logs"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str | None = "./logs/reversiagent.log"

    @property
    def level_value(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def transcript_dir_path(self) -> Path:
        return Path(self.game.transcript_dir)


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load and validate config.yaml.

    Raises:
        FileNotFoundError: config.yaml is missing.
        ValueError: fields are invalid or the file has the wrong structure.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {cfg_path.resolve()}\n"
            "Copy config.example.yaml to config.yaml and set your player number."
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    try:
        server_raw = raw.get("server") or {}
        server_cfg = ServerConfig(
            host=str(server_raw.get("host", "127.0.0.1")),
            base_port=int(server_raw.get("base_port", 3333)),
            read_size=int(server_raw.get("read_size", 1024)),
            connect_timeout=float(server_raw.get("connect_timeout", 10.0)),
            read_timeout=_optional_float(server_raw.get("read_timeout")),
        )

        player_raw = raw.get("player") or {}
        player_cfg = PlayerConfig(
            number=int(player_raw.get("number", 1)),
            strategy=str(player_raw.get("strategy", "random")),
            seed=_optional_int(player_raw.get("seed")),
        )

        game_raw = raw.get("game") or {}
        game_cfg = GameConfig(
            opening_moves=int(game_raw.get("opening_moves", 4)),
            save_transcript=bool(game_raw.get("save_transcript", True)),
            transcript_dir=str(game_raw.get("transcript_dir", "./logs")),
        )

        logging_raw = raw.get("logging") or {}
        log_file = logging_raw.get("file", "./logs/reversiagent.log")
        logging_cfg = LoggingConfig(
            level=str(logging_raw.get("level", "INFO")).upper(),
            file=str(log_file) if log_file else None,
        )

        config = Config(
            server=server_cfg,
            player=player_cfg,
            game=game_cfg,
            logging=logging_cfg,
        )
        _validate(config)
        return config

    except (AttributeError, KeyError, TypeError) as exc:
        raise ValueError(f"Invalid config.yaml structure: {exc}") from exc


def _validate(config: Config) -> None:
    if config.player.number not in (1, 2):
        raise ValueError(f"player.number must be 1 or 2, got {config.player.number}")
    if config.player.strategy not in STRATEGY_NAMES:
        raise ValueError(
            f"player.strategy must be one of {STRATEGY_NAMES}, got '{config.player.strategy}'"
        )
    if not 0 < config.server.port_for(config.player.number) <= 65535:
        raise ValueError(f"server.base_port {config.server.base_port} gives an invalid port")
    if config.server.read_size < 1:
        raise ValueError("server.read_size must be >= 1")
    if config.server.connect_timeout <= 0:
        raise ValueError("server.connect_timeout must be > 0")
    if config.server.read_timeout is not None and config.server.read_timeout <= 0:
        raise ValueError("server.read_timeout must be > 0 when set")
    if config.game.opening_moves < 0:
        raise ValueError("game.opening_moves must be >= 0")
    if config.logging.level not in _LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {_LOG_LEVELS}, got '{config.logging.level}'"
        )


def _optional_float(value: object) -> float | None:
    return None if value is None else float(value)  # type: ignore[arg-type]


def _optional_int(value: object) -> int | None:
    return None if value is None else int(value)  # type: ignore[arg-type]
