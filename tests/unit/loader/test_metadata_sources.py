"""
bootmeta: unit tests for metadata source readers

File: tests/unit/loader/test_metadata_sources.py

Purpose
- Validate reading metadata documents from jars, JSON files, and directories.

What this test file should cover
- Both metadata entries of a jar are read, in a stable order.
- Jars without metadata are tolerated; broken inputs raise ``LoadError``.
- Directory scans are recursive and deterministic.
"""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest

from bootmeta.constants import ADDITIONAL_METADATA_ENTRY, METADATA_ENTRY
from bootmeta.loader import LoadError, read_metadata_source


def _write_jar(path: Path, entries: dict[str, object]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for name, payload in entries.items():
            data = payload if isinstance(payload, str) else json.dumps(payload)
            archive.writestr(name, data)
    return path


def _write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.mark.unit
def test_jar_yields_primary_then_additional_metadata(tmp_path: Path) -> None:
    jar = _write_jar(
        tmp_path / "lib.jar",
        {
            ADDITIONAL_METADATA_ENTRY: {"properties": [{"name": "b.extra"}]},
            METADATA_ENTRY: {"groups": [{"name": "a"}]},
            "META-INF/MANIFEST.MF": "Manifest-Version: 1.0\n",
        },
    )

    documents = read_metadata_source(jar)

    assert [doc.origin for doc in documents] == [
        f"{jar.as_posix()}!/{METADATA_ENTRY}",
        f"{jar.as_posix()}!/{ADDITIONAL_METADATA_ENTRY}",
    ]
    assert documents[0].payload == {"groups": [{"name": "a"}]}


@pytest.mark.unit
def test_jar_without_metadata_warns_and_returns_nothing(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    jar = _write_jar(tmp_path / "empty.jar", {"META-INF/MANIFEST.MF": "x"})

    with caplog.at_level("WARNING", logger="bootmeta.loader.sources"):
        documents = read_metadata_source(jar)

    assert documents == []
    assert "no configuration metadata" in caplog.text


@pytest.mark.unit
def test_json_file_with_bom_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "meta.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"properties": []}).encode("utf-8"))

    (document,) = read_metadata_source(path)

    assert document.origin == path.as_posix()
    assert document.payload == {"properties": []}


@pytest.mark.unit
def test_directory_scan_is_recursive_and_sorted(tmp_path: Path) -> None:
    _write_json(tmp_path / "b" / "two.json", {"properties": []})
    _write_json(tmp_path / "a" / "one.json", {"groups": []})
    _write_jar(tmp_path / "a" / "nested" / "lib.jar", {METADATA_ENTRY: {}})
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    documents = read_metadata_source(tmp_path)

    relative = [
        Path(doc.origin.split("!/")[0]).relative_to(tmp_path).as_posix() for doc in documents
    ]
    assert relative == [
        "a/nested/lib.jar",
        "a/one.json",
        "b/two.json",
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "content", "message"),
    [
        ("broken.json", "{not json", "invalid metadata JSON"),
        ("array.json", "[]", "metadata root must be an object"),
        ("broken.jar", "not a zip", "invalid archive"),
        ("notes.txt", "hello", "unsupported metadata source"),
    ],
)
def test_unreadable_sources_raise_load_error(
    tmp_path: Path, name: str, content: str, message: str
) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(LoadError, match=message):
        read_metadata_source(path)


@pytest.mark.unit
def test_missing_source_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="metadata source not found"):
        read_metadata_source(tmp_path / "absent.jar")
