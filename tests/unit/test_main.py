"""
bootmeta: unit tests for the process entrypoint

File: tests/unit/test_main.py

Purpose
- Validate exit-code normalization and exception routing at the CLI boundary.
"""

from __future__ import annotations

import pytest

from bootmeta import main as main_module
from bootmeta.config import ConfigLoadError
from bootmeta.loader import LoadError
from bootmeta.main import ExitCode, cli_entrypoint


@pytest.mark.unit
def test_help_exits_successfully(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_entrypoint(["--help"]) == ExitCode.SUCCESS
    assert "bootmeta" in capsys.readouterr().out


@pytest.mark.unit
def test_argument_errors_map_to_config_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_entrypoint(["triage", "--format", "xml"]) == ExitCode.CONFIG_ERROR
    assert "invalid choice" in capsys.readouterr().err


@pytest.mark.unit
def test_exception_chain_routing() -> None:
    try:
        try:
            raise LoadError("jar missing")
        except LoadError as exc:
            raise RuntimeError("wrapped") from exc
    except RuntimeError as outer:
        wrapped = outer

    assert main_module._route_exception(wrapped) is ExitCode.LOAD_ERROR
    assert main_module._route_exception(ConfigLoadError("bad")) is ExitCode.CONFIG_ERROR
    assert main_module._route_exception(KeyError("x")) is ExitCode.INTERNAL_ERROR


@pytest.mark.unit
def test_unexpected_exceptions_are_reported_as_internal_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _explode(argv: object = None) -> int:
        raise KeyError("unexpected")

    monkeypatch.setattr("bootmeta.ui.cli.run_cli", _explode)

    assert cli_entrypoint([]) == ExitCode.INTERNAL_ERROR
    assert "KeyError" in capsys.readouterr().err


@pytest.mark.unit
def test_load_errors_escaping_the_cli_are_routed(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _fail(argv: object = None) -> int:
        raise LoadError("no metadata")

    monkeypatch.setattr("bootmeta.ui.cli.run_cli", _fail)

    assert cli_entrypoint([]) == ExitCode.LOAD_ERROR
    assert capsys.readouterr().err == "error: no metadata\n"


@pytest.mark.unit
def test_cli_entrypoint_is_the_only_process_entry() -> None:
    from bootmeta import ui

    assert sorted(ui.__all__) == [
        "CLIError",
        "CLIRenderer",
        "build_parser",
        "create_renderer",
        "run_cli",
    ]
    assert not hasattr(ui.cli, "main")
