import logging
import tempfile
import textwrap
import unittest
from pathlib import Path

from reversiagent.config import Config, load_config


class LoadConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "config.yaml"

    def _write(self, text: str) -> Path:
        self.path.write_text(textwrap.dedent(text), encoding="utf-8")
        return self.path

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config(self.path)

    def test_empty_file_uses_defaults(self) -> None:
        config = load_config(self._write(""))
        self.assertEqual(config, Config())
        self.assertEqual(config.server.port_for(1), 3334)
        self.assertEqual(config.game.opening_moves, 4)
        self.assertEqual(config.logging.level_value, logging.INFO)

    def test_full_file(self) -> None:
        config = load_config(self._write("""
            server:
              host: game.local
              base_port: 4000
              read_size: 2048
              connect_timeout: 5
              read_timeout: 30
            player:
              number: 2
              strategy: human
              seed: 9
            game:
              opening_moves: 2
              save_transcript: false
              transcript_dir: ./out
            logging:
              level: debug
              file: null
        """))

        self.assertEqual(config.server.host, "game.local")
        self.assertEqual(config.server.port_for(config.player.number), 4002)
        self.assertEqual(config.server.read_size, 2048)
        self.assertEqual(config.server.read_timeout, 30.0)
        self.assertEqual(config.player.strategy, "human")
        self.assertEqual(config.player.seed, 9)
        self.assertEqual(config.game.opening_moves, 2)
        self.assertFalse(config.game.save_transcript)
        self.assertEqual(config.transcript_dir_path, Path("./out"))
        self.assertEqual(config.logging.level, "DEBUG")
        self.assertIsNone(config.logging.file)

    def test_invalid_values(self) -> None:
        cases = {
            "player number": "player:\n  number: 3\n",
            "strategy": "player:\n  strategy: alphabeta\n",
            "read size": "server:\n  read_size: 0\n",
            "port": "server:\n  base_port: 65535\n",
            "read timeout": "server:\n  read_timeout: -1\n",
            "opening": "game:\n  opening_moves: -1\n",
            "log level": "logging:\n  level: loud\n",
            "not a number": "player:\n  number: one\n",
            "wrong shape": "server: [1, 2]\n",
        }
        for label, text in cases.items():
            with self.subTest(case=label):
                with self.assertRaises(ValueError):
                    load_config(self._write(text))
