"""Catalog domain models."""

from bootmeta.domain.models import (
    Catalog,
    ConfigGroup,
    ConfigProperty,
    Deprecation,
    DeprecationLevel,
    extract_short_description,
)

__all__ = [
    "Catalog",
    "ConfigGroup",
    "ConfigProperty",
    "Deprecation",
    "DeprecationLevel",
    "extract_short_description",
]
