"""
bootmeta: unit tests for local repository artifact resolution

File: tests/unit/loader/test_artifact_repository.py

Purpose
- Validate Maven-layout jar resolution and end-to-end catalog loading from disk.

What this test file should cover
- Required artifacts fail loudly; optional artifacts are skipped with a warning.
- Explicit metadata sources load with or without a target version.
"""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest

from bootmeta.constants import METADATA_ENTRY
from bootmeta.loader import ArtifactCoordinate, LoadError, load_catalog, resolve_artifacts

_VERSION = "3.2.0"


def _install(repository: Path, coordinate: str, payload: object) -> Path:
    jar = ArtifactCoordinate.parse(coordinate).jar_path(repository, _VERSION)
    jar.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(jar, "w") as archive:
        archive.writestr(METADATA_ENTRY, json.dumps(payload))
    return jar


@pytest.mark.unit
def test_coordinate_maps_to_maven_layout(tmp_path: Path) -> None:
    coordinate = ArtifactCoordinate.parse("org.springframework.boot:spring-boot")

    assert str(coordinate) == "org.springframework.boot:spring-boot"
    assert coordinate.jar_path(tmp_path, "3.2.0") == (
        tmp_path / "org/springframework/boot/spring-boot/3.2.0/spring-boot-3.2.0.jar"
    )


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "no-colon", "a:b:c", ":artifact"])
def test_invalid_coordinates_are_rejected(raw: str) -> None:
    with pytest.raises(LoadError, match="invalid artifact coordinate"):
        ArtifactCoordinate.parse(raw)


@pytest.mark.unit
def test_resolve_requires_every_mandatory_artifact(tmp_path: Path) -> None:
    _install(tmp_path, "com.example:core", {})

    with pytest.raises(LoadError, match="com.example:extra:3.2.0"):
        resolve_artifacts(
            _VERSION,
            local_repository=tmp_path,
            artifacts=["com.example:core", "com.example:extra"],
            optional_artifacts=[],
        )


@pytest.mark.unit
def test_resolve_skips_missing_optional_artifacts(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    core = _install(tmp_path, "com.example:core", {})
    tools = _install(tmp_path, "com.example:tools", {})

    with caplog.at_level("WARNING", logger="bootmeta.loader.repository"):
        resolved = resolve_artifacts(
            _VERSION,
            local_repository=tmp_path,
            artifacts=["com.example:core"],
            optional_artifacts=["com.example:devtools", "com.example:tools"],
        )

    assert resolved == [core, tools]
    assert "com.example:devtools" in caplog.text


@pytest.mark.unit
def test_resolve_rejects_blank_version_and_missing_repository(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="must not be empty"):
        resolve_artifacts(" ", local_repository=tmp_path, artifacts=[], optional_artifacts=[])
    with pytest.raises(LoadError, match="not a directory"):
        resolve_artifacts(_VERSION, local_repository=tmp_path / "absent")


@pytest.mark.unit
def test_load_catalog_combines_repository_and_extra_sources(tmp_path: Path) -> None:
    repository = tmp_path / "repo"
    _install(
        repository,
        "com.example:core",
        {
            "groups": [{"name": "server", "type": "ServerProperties"}],
            "properties": [
                {
                    "name": "server.port",
                    "type": "java.lang.Integer",
                    "sourceType": "ServerProperties",
                }
            ],
        },
    )
    extra = tmp_path / "extra.json"
    extra.write_text(
        json.dumps({"properties": [{"name": "server.port", "type": "java.lang.Long"}]}),
        encoding="utf-8",
    )

    catalog = load_catalog(
        _VERSION,
        repository={
            "local_path": str(repository),
            "artifacts": ["com.example:core"],
            "optional_artifacts": [],
        },
        extra_sources=[extra],
    )

    assert catalog.properties["server.port"].type == "java.lang.Integer"
    assert catalog.groups["server"].property_ids == ("server.port",)


@pytest.mark.unit
def test_load_catalog_without_version_reads_only_extra_sources(tmp_path: Path) -> None:
    extra = tmp_path / "meta.json"
    extra.write_text(json.dumps({"properties": [{"name": "debug"}]}), encoding="utf-8")

    catalog = load_catalog(None, extra_sources=[extra])

    assert list(catalog.properties) == ["debug"]


@pytest.mark.unit
def test_load_catalog_without_any_source_fails() -> None:
    with pytest.raises(LoadError, match="no metadata sources"):
        load_catalog(None)
