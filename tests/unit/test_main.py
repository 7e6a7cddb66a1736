"""Unit tests for command-line parsing and logging setup."""

import logging
from unittest.mock import patch

import pytest

from board.main import LOG_LEVEL_ENV, configure_logging, main, parse_arguments


class TestParseArguments:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        args = parse_arguments([])

        assert args.board is None
        assert args.side == "home"
        assert args.compact is None
        assert args.log_level == "WARNING"

    def test_all_options(self):
        args = parse_arguments(
            ["board.json", "--width", "640", "--height", "480", "--side", "away", "--no-compact"]
        )

        assert args.board == "board.json"
        assert (args.width, args.height) == (640, 480)
        assert args.side == "away"
        assert args.compact is False

    def test_env_log_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

        assert parse_arguments([]).log_level == "DEBUG"

    def test_bad_side(self):
        with pytest.raises(SystemExit):
            parse_arguments(["--side", "referee"])


class TestMain:
    def test_missing_board_file_exits(self, tmp_path):
        with patch("board.main.BoardApplication") as app_cls:
            with pytest.raises(SystemExit):
                main([str(tmp_path / "missing.json")])
        app_cls.assert_not_called()

    def test_loads_board_and_runs(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text("{}")

        with patch("board.main.BoardApplication") as app_cls:
            main([str(path), "--compact"])

        app_cls.assert_called_once()
        assert app_cls.call_args.kwargs["compact"] is True
        app = app_cls.return_value
        app.load_board.assert_called_once_with(str(path))
        app.run.assert_called_once()


def test_configure_logging_unknown_level():
    with patch("logging.basicConfig") as basic_config:
        configure_logging("chatty")

    assert basic_config.call_args.kwargs["level"] == logging.WARNING
