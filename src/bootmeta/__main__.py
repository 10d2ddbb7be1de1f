"""Module entrypoint for ``python -m bootmeta``."""

from __future__ import annotations

from bootmeta.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
