"""Catalog traversal helpers."""

from bootmeta.catalog.sorting import sort_groups, sort_properties

__all__ = ["sort_groups", "sort_properties"]
