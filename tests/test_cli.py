"""Tests for routebook.cli — CLI entrypoint and subcommands."""

from pathlib import Path

import pytest

from routebook.cli import main
from routebook.cli._uri import parse_params

ROUTES_YAML = str(Path(__file__).parent / "routes.yaml")


class TestCLIHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["routes", "--help"], ["match", "--help"], ["uri", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "routebook" in capsys.readouterr().out


class TestCLIMissingArgs:
    @pytest.mark.parametrize("argv", [["routes"], ["match", ROUTES_YAML], ["uri", ROUTES_YAML]])
    def test_usage_error(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2


class TestRoutesCommand:
    def test_lists_in_declaration_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", ROUTES_YAML])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["NAME", "METHODS", "PATH", "CONTROLLER"]
        assert lines[2].startswith("home")
        assert lines[3].startswith("user")
        assert "delete, get, post, put" in lines[3]
        assert "[user_middleware::test]" in lines[3]

    def test_empty_source(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(tmp_path)])
        assert "No routes registered." in capsys.readouterr().out

    def test_missing_source(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestMatchCommand:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", ROUTES_YAML, "/user/101", "-m", "POST"])
        out = capsys.readouterr().out
        assert "name:       user" in out
        assert "controller: user_controller::crud" in out
        assert "param:      id=101" in out

    def test_default_method_is_get(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", ROUTES_YAML, "/"])
        assert "name:       home" in capsys.readouterr().out

    def test_wrong_method(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", ROUTES_YAML, "/user/101", "--method", "patch"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "not allowed" in err
        assert "delete, get, post, put" in err

    def test_no_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", ROUTES_YAML, "/nowhere"])
        assert exc_info.value.code == 1
        assert "No route matches" in capsys.readouterr().err


class TestUriCommand:
    def test_uri(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["uri", ROUTES_YAML, "user", "id=101"])
        assert capsys.readouterr().out.strip() == "/user/101"

    def test_static(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["uri", ROUTES_YAML, "home"])
        assert capsys.readouterr().out.strip() == "/"

    def test_requirement_mismatch(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["uri", ROUTES_YAML, "user", "id=abc"])
        assert exc_info.value.code == 1
        assert "does not match requirement" in capsys.readouterr().err

    def test_unknown_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["uri", ROUTES_YAML, "nonexistent"])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_malformed_param(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["uri", ROUTES_YAML, "user", "101"])
        assert exc_info.value.code == 2
        assert "Expected key=value" in capsys.readouterr().err


class TestParseParams:
    def test_pairs(self) -> None:
        assert parse_params(["id=1", "q=a=b"]) == {"id": "1", "q": "a=b"}

    def test_empty_value(self) -> None:
        assert parse_params(["id="]) == {"id": ""}

    @pytest.mark.parametrize("item", ["id", "=1"])
    def test_rejected(self, item: str) -> None:
        with pytest.raises(ValueError):
            parse_params([item])
