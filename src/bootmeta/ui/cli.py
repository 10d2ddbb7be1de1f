"""Command-line interface router for bootmeta."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Final

import yaml

from bootmeta.config import (
    ConfigLoadError,
    ConfigValidationError,
    dump_effective_config,
    load_config,
)
from bootmeta.domain.models import Catalog
from bootmeta.loader import LoadError, load_catalog
from bootmeta.main import ExitCode
from bootmeta.observability import setup_logging, shutdown_logging
from bootmeta.reporting import ReportMode, analyze_deprecation_triage, render_report
from bootmeta.ui.render import CLIRenderer, create_renderer

TRIAGE_FORMATS: Final[tuple[str, ...]] = ("text", "json", "yaml")


class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    def __init__(self, message: str, exit_code: int = int(ExitCode.CONFIG_ERROR)) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router for all supported CLI workflows."""

    parser = argparse.ArgumentParser(
        prog="bootmeta",
        description=(
            "bootmeta: Spring Boot configuration metadata reports.\n\n"
            "Common workflows:\n"
            "  bootmeta list 3.2.0            List every property of every group\n"
            "  bootmeta triage 3.2.0          Review error-level deprecations\n"
            "  bootmeta triage --metadata x.jar --format json\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to bootmeta TOML config (default: ./bootmeta.toml if present).",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )

    report_common = argparse.ArgumentParser(add_help=False, parents=[common])
    report_common.add_argument(
        "version",
        nargs="?",
        default=None,
        help="Spring Boot version to analyze (default: report.default_version).",
    )
    report_common.add_argument(
        "--metadata",
        dest="metadata_paths",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra metadata source (.jar, .json or directory); repeatable.",
    )
    report_common.add_argument(
        "--repository",
        dest="local_repository",
        default=None,
        help="Override repository.local_path for this run.",
    )
    report_common.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the report to this file instead of stdout.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser(
        "list",
        parents=[report_common],
        help="Full listing of every property in every group",
    )
    list_parser.set_defaults(handler=_cmd_list)

    triage_parser = subparsers.add_parser(
        "triage",
        parents=[report_common],
        help="Split error-level deprecations by replacement resolvability",
    )
    triage_parser.add_argument(
        "--format",
        dest="output_format",
        choices=TRIAGE_FORMATS,
        default="text",
        help="Report format (default: text).",
    )
    triage_parser.set_defaults(handler=_cmd_triage)

    config_parser = subparsers.add_parser(
        "config",
        parents=[common],
        help="Show the effective configuration",
    )
    config_parser.add_argument("--json", action="store_true", help="Emit compact JSON output")
    config_parser.set_defaults(handler=_cmd_config)

    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, route to a command handler, and return process exit code."""

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    handler = getattr(namespace, "handler", None)
    if not callable(handler):
        parser.print_help(sys.stderr)
        return int(ExitCode.CONFIG_ERROR)

    try:
        result = handler(namespace)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    return int(result)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_list(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    with _logging_scope(args, config):
        catalog = _load_catalog(args, config)
        content = render_report(ReportMode.FULL_LISTING, catalog)
        _emit_report(args, config, content)
    return int(ExitCode.SUCCESS)


def _cmd_triage(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    with _logging_scope(args, config):
        catalog = _load_catalog(args, config)
        output_format = getattr(args, "output_format", "text")
        if output_format == "text":
            content = render_report(ReportMode.DEPRECATION_TRIAGE, catalog)
        else:
            content = _export_triage(catalog, output_format)
        _emit_report(args, config, content)
    return int(ExitCode.SUCCESS)


def _cmd_config(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    if _flag(args, "json"):
        print(dump_effective_config(config))
        return int(ExitCode.SUCCESS)

    renderer = _get_renderer(args)
    renderer.kv("Config file", getattr(args, "config_path", None) or "(default)")
    renderer.text(json.dumps(config, indent=2, sort_keys=True, ensure_ascii=False))
    return int(ExitCode.SUCCESS)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _export_triage(catalog: Catalog, output_format: str) -> str:
    payload = analyze_deprecation_triage(catalog).to_dict()
    if output_format == "json":
        return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        rendered = yaml.safe_dump(
            payload,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=False,
            width=120,
        )
        return rendered if rendered.endswith("\n") else rendered + "\n"
    raise CLIError(f"unsupported triage format: {output_format}")


def _emit_report(args: argparse.Namespace, config: Mapping[str, object], content: str) -> None:
    output = _optional_str(getattr(args, "output", None))
    encoding = _report_setting(config, "output_encoding") or "utf-8"
    try:
        _get_renderer(args).report(
            content,
            output=Path(output).expanduser() if output is not None else None,
            encoding=encoding,
        )
    except OSError as exc:
        raise CLIError(f"unable to write report to {output}: {exc}") from exc


def _get_renderer(args: argparse.Namespace) -> CLIRenderer:
    return create_renderer(verbose=_flag(args, "verbose"))


# ---------------------------------------------------------------------------
# Helpers: config, logging and catalog loading
# ---------------------------------------------------------------------------


def _load_effective_config(args: argparse.Namespace) -> dict[str, object]:
    config_path = _optional_str(getattr(args, "config_path", None))
    overrides: dict[str, object] = {}
    local_repository = _optional_str(getattr(args, "local_repository", None))
    if local_repository is not None:
        overrides["repository.local_path"] = str(Path(local_repository).expanduser().resolve())

    try:
        loaded = load_config(config_path, cli_overrides=overrides)
    except (ConfigLoadError, ConfigValidationError) as exc:
        raise CLIError(str(exc), exit_code=int(ExitCode.CONFIG_ERROR)) from exc
    return dict(loaded)


@contextmanager
def _logging_scope(args: argparse.Namespace, config: Mapping[str, object]) -> Iterator[None]:
    observability = config.get("observability")
    setup_logging(
        observability if isinstance(observability, Mapping) else None,
        verbose=_flag(args, "verbose"),
    )
    try:
        yield
    finally:
        shutdown_logging()


def _load_catalog(args: argparse.Namespace, config: Mapping[str, object]) -> Catalog:
    metadata_paths = tuple(getattr(args, "metadata_paths", None) or ())
    version = _optional_str(getattr(args, "version", None))
    if version is None and not metadata_paths:
        version = _report_setting(config, "default_version")
        if version is None:
            raise CLIError(
                "a target version is required (argument, report.default_version, or --metadata)"
            )

    repository = config.get("repository")
    try:
        return load_catalog(
            version,
            repository=repository if isinstance(repository, Mapping) else None,
            extra_sources=metadata_paths,
        )
    except LoadError as exc:
        raise CLIError(str(exc), exit_code=int(ExitCode.LOAD_ERROR)) from exc


def _report_setting(config: Mapping[str, object], key: str) -> str | None:
    report = config.get("report")
    if not isinstance(report, Mapping):
        return None
    return _optional_str(report.get(key))


def _optional_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _flag(args: argparse.Namespace, name: str) -> bool:
    return bool(getattr(args, name, False))


__all__ = ["CLIError", "TRIAGE_FORMATS", "build_parser", "run_cli"]
