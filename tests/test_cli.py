"""Tests for the command-line tools."""

import json

from snake_arcade.cli import _build_parser, main
from snake_arcade.storage import BestScoreStore


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.games == 10
        assert args.seed is None
        assert not args.no_save

    def test_best_score_flags(self):
        args = _build_parser().parse_args(["best-score", "--clear"])
        assert args.clear


class TestCLICommands:
    def test_simulate_saves_best_score(self, tmp_path, capsys):
        store_path = tmp_path / "store.json"
        code = main([
            "--storage", str(store_path),
            "simulate", "--games", "2", "--max-ticks", "200", "--seed", "1",
        ])
        assert code == 0
        assert "Simulated 2 game(s)" in capsys.readouterr().out
        assert store_path.exists()

    def test_simulate_no_save(self, tmp_path):
        store_path = tmp_path / "store.json"
        main([
            "--storage", str(store_path),
            "simulate", "--games", "1", "--max-ticks", "50", "--no-save",
        ])
        assert not store_path.exists()

    def test_simulate_invalid_games(self, tmp_path):
        code = main([
            "--storage", str(tmp_path / "s.json"), "simulate", "--games", "0",
        ])
        assert code == 2

    def test_best_score_show_and_clear(self, tmp_path, capsys):
        store_path = tmp_path / "store.json"
        BestScoreStore(store_path).save(13)
        assert main(["--storage", str(store_path), "best-score"]) == 0
        assert capsys.readouterr().out.strip() == "13"
        assert main(["--storage", str(store_path), "best-score", "--clear"]) == 0
        assert BestScoreStore(store_path).load() == 0

    def test_config_file(self, tmp_path, capsys):
        store_path = tmp_path / "from_config.json"
        BestScoreStore(store_path).save(4)
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"storage_path": str(store_path)}))
        assert main(["--config", str(cfg), "best-score"]) == 0
        assert capsys.readouterr().out.strip() == "4"
