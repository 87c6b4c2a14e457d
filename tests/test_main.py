"""Test the command-line entrypoint."""
import io
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest

from expression_evaluator import main as main_module
from expression_evaluator.common.config import Settings
from expression_evaluator.common.logger import logger
from expression_evaluator.main import build_output_path, main, parse_args


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.file_path is None
    assert args.show_postfix is False


def test_parse_args_file(tmp_path: Path) -> None:
    ops = tmp_path / "ops.txt"
    ops.write_text("1 + 1\n")
    args = parse_args([str(ops), "--show-postfix", "--log-level", "debug"])
    assert args.file_path == ops
    assert args.show_postfix is True
    assert args.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [
    ["does_not_exist.txt"],
    ["--log-level", "LOUD"],
])
def test_parse_args_invalid(argv, tmp_path, monkeypatch) -> None:
    """Invalid arguments exit through argparse."""
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        parse_args(argv)


@pytest.mark.parametrize("name,expected", [
    ("resources/operations.txt", "resources/operations_txt_results.txt"),
    ("ops", "ops_results.txt"),
])
def test_build_output_path(name, expected) -> None:
    assert build_output_path(Path(name)) == Path(expected)


def test_main_batch(tmp_path: Path, capsys) -> None:
    """Batch mode writes the results file and fails when a line fails."""
    ops = tmp_path / "ops.txt"
    ops.write_text("( 1 + 2 ) * 3\n7 / 0\n")

    status = main([str(ops)])

    results_file = tmp_path / "ops_txt_results.txt"
    assert status == 1
    assert results_file.read_text().splitlines()[0] == "( 1 + 2 ) * 3 = 9"
    assert str(results_file) in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys) -> None:
    monkeypatch.setattr(main_module.sys, "stdin", io.StringIO("6 * 7\nexit\n"))
    assert main(["--log-level", "ERROR"]) == 0
    assert "6 * 7 = 42" in capsys.readouterr().out
    assert logger.level == logging.ERROR


def test_settings_from_environment(monkeypatch) -> None:
    """Settings are read from EXPRESSION_EVALUATOR_* variables."""
    monkeypatch.setenv("EXPRESSION_EVALUATOR_MAX_DEPTH", "64")
    monkeypatch.setenv("EXPRESSION_EVALUATOR_EXIT_COMMAND", "quit")
    settings = Settings()
    assert settings.max_depth == 64
    assert settings.exit_command == "quit"


def test_settings_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("EXPRESSION_EVALUATOR_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_settings_reject_unknown_log_level(monkeypatch) -> None:
    """An unknown level is a configuration error, not a late argparse failure."""
    monkeypatch.setenv("EXPRESSION_EVALUATOR_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings()


def test_parse_args_default_log_level_comes_from_settings(monkeypatch) -> None:
    monkeypatch.setattr(main_module.settings, "log_level", "INFO")
    assert parse_args([]).log_level == "INFO"
