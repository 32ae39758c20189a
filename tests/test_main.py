import logging

import pytest

from tic_tac_toe import __main__ as cli
from tic_tac_toe import needle


class FakeApp:
    runs = 0

    def run(self) -> None:
        FakeApp.runs += 1


class TestCommandLine:
    """Test argument parsing and app selection."""

    def test_defaults(self) -> None:
        args = cli._parse_args([])
        assert args.app == "game"
        assert args.log_level == "WARNING"

    def test_rejects_unknown_app(self) -> None:
        with pytest.raises(SystemExit):
            cli._parse_args(["--app", "chess"])

    def test_runs_terminal_game(self, monkeypatch: pytest.MonkeyPatch) -> None:
        FakeApp.runs = 0
        monkeypatch.setattr(cli, "TerminalUi", FakeApp)
        monkeypatch.setattr(logging, "basicConfig", lambda **_kwargs: None)

        cli.main(["--log-level", "DEBUG"])

        assert FakeApp.runs == 1

    def test_runs_needle_demo(self, monkeypatch: pytest.MonkeyPatch) -> None:
        FakeApp.runs = 0
        monkeypatch.setattr(needle, "NeedleDemo", FakeApp)
        monkeypatch.setattr(cli, "TerminalUi", None)
        monkeypatch.setattr(logging, "basicConfig", lambda **_kwargs: None)

        cli.main(["--app", "needle"])

        assert FakeApp.runs == 1
