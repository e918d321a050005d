"""Tests for wren.cli — CLI entrypoint and argument parsing."""

import pytest

from wren.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["routes", "match", "url"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_match_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "myapp:router"])
        assert exc_info.value.code == 2

    def test_url_missing_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", "myapp:router"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "wren" in captured.out
