"""Readers for configuration metadata documents on the local filesystem.

A source is a jar/zip archive carrying ``META-INF/*configuration-metadata.json`` entries, a
single ``.json`` document, or a directory searched recursively for both.
"""

from __future__ import annotations

import json
import logging
import zipfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from bootmeta.constants import ADDITIONAL_METADATA_ENTRY, METADATA_ENTRY

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES: Final[frozenset[str]] = frozenset({".jar", ".zip"})
DOCUMENT_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})


class LoadError(ValueError):
    """Raised when metadata cannot be resolved, read, or turned into a catalog."""


@dataclass(frozen=True, slots=True)
class MetadataDocument:
    """One parsed metadata JSON document and where it came from."""

    origin: str
    payload: Mapping[str, object]


def read_metadata_source(path: str | Path) -> list[MetadataDocument]:
    """Read every metadata document reachable from ``path``."""

    candidate = Path(path).expanduser()
    if not candidate.exists():
        raise LoadError(f"metadata source not found: {candidate}")
    if candidate.is_dir():
        return _read_directory(candidate)
    suffix = candidate.suffix.lower()
    if suffix in ARCHIVE_SUFFIXES:
        return _read_archive(candidate)
    if suffix in DOCUMENT_SUFFIXES:
        return [_read_document(candidate)]
    raise LoadError(f"unsupported metadata source {candidate}; expected .jar, .zip or .json")


def _read_directory(directory: Path) -> list[MetadataDocument]:
    supported = ARCHIVE_SUFFIXES | DOCUMENT_SUFFIXES
    documents: list[MetadataDocument] = []
    for path in sorted(directory.rglob("*")):
        if path.is_file() and path.suffix.lower() in supported:
            documents.extend(read_metadata_source(path))
    return documents


def _read_archive(archive: Path) -> list[MetadataDocument]:
    documents: list[MetadataDocument] = []
    try:
        with zipfile.ZipFile(archive) as handle:
            names = set(handle.namelist())
            for entry in (METADATA_ENTRY, ADDITIONAL_METADATA_ENTRY):
                if entry not in names:
                    continue
                origin = f"{archive.as_posix()}!/{entry}"
                raw = handle.read(entry)
                documents.append(MetadataDocument(origin, _parse_json(raw, origin)))
    except zipfile.BadZipFile as exc:
        raise LoadError(f"invalid archive {archive}: {exc}") from exc
    except OSError as exc:
        raise LoadError(f"unable to read archive {archive}: {exc}") from exc

    if not documents:
        logger.warning("no configuration metadata found in %s", archive.as_posix())
    return documents


def _read_document(path: Path) -> MetadataDocument:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LoadError(f"unable to read metadata file {path}: {exc}") from exc
    origin = path.as_posix()
    return MetadataDocument(origin, _parse_json(raw, origin))


def _parse_json(raw: bytes, origin: str) -> Mapping[str, object]:
    try:
        payload = json.loads(raw.decode("utf-8-sig"))
    except UnicodeDecodeError as exc:
        raise LoadError(f"metadata in {origin} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoadError(f"invalid metadata JSON in {origin}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise LoadError(f"metadata root must be an object: {origin}")
    return payload


__all__ = [
    "ARCHIVE_SUFFIXES",
    "DOCUMENT_SUFFIXES",
    "LoadError",
    "MetadataDocument",
    "read_metadata_source",
]
