"""Output rendering for the bootmeta CLI.

Purpose
- Provide a thin output layer: reports go to stdout or to a file, diagnostics to stdout.

Functional requirements
- Reports are written verbatim; the renderer never re-wraps or re-terminates lines.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)


class CLIRenderer:
    """Thin CLI output renderer producing deterministic plain text."""

    def __init__(self, *, stream: IO[str] | None = None, verbose: bool = False) -> None:
        self.verbose = verbose
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def text(self, line: str) -> None:
        """Print a plain text line."""

        print(line, file=self.stream)

    def kv(self, key: str, value: object) -> None:
        """Print a key: value pair."""

        print(f"{key}: {value}", file=self.stream)

    def report(
        self,
        content: str,
        *,
        output: Path | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Write a finished report to ``output`` or, when not given, to the stream."""

        if output is None:
            self.stream.write(content)
            self.stream.flush()
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding=encoding)
        logger.info(
            "report written", extra={"path": output.as_posix(), "characters": len(content)}
        )
        if self.verbose:
            self.text(f"Report written to {output.as_posix()}")


def create_renderer(*, stream: IO[str] | None = None, verbose: bool = False) -> CLIRenderer:
    """Create a CLI renderer with the given settings."""

    return CLIRenderer(stream=stream, verbose=verbose)


__all__ = ["CLIRenderer", "create_renderer"]
