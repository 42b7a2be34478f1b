"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_intercept import __init__conf__, summary_info
from lib_log_intercept import __main__ as cli_mod


def run_cli(args: list[str]):
    return CliRunner().invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command)


def test_cli_without_subcommand_prints_summary() -> None:
    result = run_cli([])
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = run_cli(["info"])
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_flag() -> None:
    result = run_cli(["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_check_level_accepts_emitted_level() -> None:
    result = run_cli(["check-level", "error"])
    assert result.exit_code == 0
    assert "ok: error can be intercepted at threshold warning" in result.output


def test_check_level_rejects_level_above_threshold() -> None:
    result = run_cli(["check-level", "debug2", "--threshold", "log"])
    assert result.exit_code == 1
    assert "more than the level at which the host emits logs" in result.output
    assert "HINT:" in result.output


def test_check_level_rejects_missing_directory(tmp_path: Path) -> None:
    result = run_cli(["check-level", "error", "--directory", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "specified intercept log directory does not exist" in result.output


def test_check_level_rejects_unknown_level() -> None:
    result = run_cli(["check-level", "loud"])
    assert result.exit_code == 2


def test_demo_writes_only_the_selected_level(tmp_path: Path) -> None:
    result = run_cli(["demo", "--level", "error", "--directory", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert [path.name for path in tmp_path.iterdir()] == ["ERROR.log"]
    content = (tmp_path / "ERROR.log").read_text(encoding="utf-8")
    assert "ERROR:  22012:  demo error message" in content
    assert "STATEMENT:  SELECT 1/0;" in content
    assert "records appended to" in result.output


def test_demo_log_level_under_warning_threshold(tmp_path: Path) -> None:
    result = run_cli(["demo", "--level", "log", "--directory", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "LOG:  demo log message" in (tmp_path / "LOG.log").read_text(encoding="utf-8")


def test_demo_rejects_unreachable_level() -> None:
    result = run_cli(["demo", "--level", "debug1"])
    assert result.exit_code == 1
    assert "more than the level" in result.output


def test_demo_leaves_no_runtime_installed(tmp_path: Path) -> None:
    from lib_log_intercept import is_installed

    run_cli(["demo", "--directory", str(tmp_path)])
    assert is_installed() is False


@pytest.mark.parametrize("argv, expected", [(["info"], 0), (["check-level", "debug5"], 1), (["--version"], 0)])
def test_main_returns_exit_codes(argv: list[str], expected: int, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(argv) == expected
