"""Metadata loading: local artifact resolution, document readers, catalog building."""

from bootmeta.loader.builder import CatalogBuilder
from bootmeta.loader.repository import ArtifactCoordinate, load_catalog, resolve_artifacts
from bootmeta.loader.sources import LoadError, MetadataDocument, read_metadata_source

__all__ = [
    "ArtifactCoordinate",
    "CatalogBuilder",
    "LoadError",
    "MetadataDocument",
    "load_catalog",
    "read_metadata_source",
    "resolve_artifacts",
]
