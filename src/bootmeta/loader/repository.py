"""Resolve Spring Boot artifacts for a version from a local Maven-layout repository."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from bootmeta.constants import (
    DEFAULT_ARTIFACTS,
    DEFAULT_LOCAL_REPOSITORY,
    DEFAULT_OPTIONAL_ARTIFACTS,
)
from bootmeta.domain.models import Catalog
from bootmeta.loader.builder import CatalogBuilder
from bootmeta.loader.sources import LoadError, read_metadata_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArtifactCoordinate:
    """``group:artifact`` coordinate; the version is supplied at resolution time."""

    group_id: str
    artifact_id: str

    @classmethod
    def parse(cls, raw: str) -> ArtifactCoordinate:
        parts = [part.strip() for part in raw.split(":")]
        if len(parts) != 2 or not all(parts):
            raise LoadError(f"invalid artifact coordinate {raw!r}; expected 'group:artifact'")
        return cls(group_id=parts[0], artifact_id=parts[1])

    def jar_path(self, repository: Path, version: str) -> Path:
        return (
            repository.joinpath(*self.group_id.split("."))
            / self.artifact_id
            / version
            / f"{self.artifact_id}-{version}.jar"
        )

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


def resolve_artifacts(
    version: str,
    *,
    local_repository: str | Path = DEFAULT_LOCAL_REPOSITORY,
    artifacts: Sequence[str] = DEFAULT_ARTIFACTS,
    optional_artifacts: Sequence[str] = DEFAULT_OPTIONAL_ARTIFACTS,
) -> list[Path]:
    """Return jar paths for ``version``; missing required artifacts raise ``LoadError``."""

    if not version.strip():
        raise LoadError("target version must not be empty")
    repository = Path(local_repository).expanduser()
    if not repository.is_dir():
        raise LoadError(f"local repository is not a directory: {repository}")

    resolved: list[Path] = []
    missing: list[str] = []
    for raw in artifacts:
        coordinate = ArtifactCoordinate.parse(raw)
        jar = coordinate.jar_path(repository, version.strip())
        if jar.is_file():
            resolved.append(jar)
        else:
            missing.append(f"{coordinate}:{version}")
    if missing:
        raise LoadError(f"unable to resolve artifacts in {repository}: {', '.join(missing)}")

    for raw in optional_artifacts:
        coordinate = ArtifactCoordinate.parse(raw)
        jar = coordinate.jar_path(repository, version.strip())
        if jar.is_file():
            resolved.append(jar)
        else:
            logger.warning("optional artifact %s:%s not found, skipping", coordinate, version)
    return resolved


def load_catalog(
    target_version: str | None,
    *,
    repository: Mapping[str, object] | None = None,
    extra_sources: Sequence[str | Path] = (),
) -> Catalog:
    """Build the catalog for ``target_version`` plus any explicit metadata sources.

    ``repository`` follows the ``[repository]`` config section. With no version, only
    ``extra_sources`` are read.
    """

    sources: list[Path] = [Path(source) for source in extra_sources]
    if target_version is not None:
        settings = dict(repository or {})
        sources = [
            *resolve_artifacts(
                target_version,
                local_repository=_setting_str(settings, "local_path", DEFAULT_LOCAL_REPOSITORY),
                artifacts=_setting_list(settings, "artifacts", DEFAULT_ARTIFACTS),
                optional_artifacts=_setting_list(
                    settings, "optional_artifacts", DEFAULT_OPTIONAL_ARTIFACTS
                ),
            ),
            *sources,
        ]
    if not sources:
        raise LoadError("no metadata sources: give a target version or explicit metadata paths")

    builder = CatalogBuilder()
    for source in sources:
        builder.add_documents(read_metadata_source(source))
    catalog = builder.build()
    logger.info(
        "catalog loaded",
        extra={
            "version": target_version,
            "documents": builder.document_count,
            "groups": len(catalog.groups),
            "properties": len(catalog.properties),
        },
    )
    return catalog


def _setting_str(settings: Mapping[str, object], key: str, default: str) -> str:
    value = settings.get(key, default)
    if not isinstance(value, str):
        raise LoadError(f"repository.{key} must be a string")
    return value


def _setting_list(
    settings: Mapping[str, object], key: str, default: Sequence[str]
) -> tuple[str, ...]:
    value = settings.get(key, default)
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise LoadError(f"repository.{key} must be a list of coordinates")
    return tuple(str(item) for item in value)


__all__ = ["ArtifactCoordinate", "load_catalog", "resolve_artifacts"]
