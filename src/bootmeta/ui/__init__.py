"""UI package exports for the CLI and its output renderer."""

from bootmeta.ui.cli import CLIError, build_parser, run_cli
from bootmeta.ui.render import CLIRenderer, create_renderer

__all__ = [
    "CLIError",
    "CLIRenderer",
    "build_parser",
    "create_renderer",
    "run_cli",
]
