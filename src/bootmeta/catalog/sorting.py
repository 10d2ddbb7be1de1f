"""Deterministic ordering of catalog groups and properties."""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bootmeta.domain.models import ConfigGroup, ConfigProperty

_BY_ID = attrgetter("id")


def sort_groups(groups: Iterable[ConfigGroup]) -> list[ConfigGroup]:
    """Return a new list of ``groups`` ordered by id (code-point order)."""

    return sorted(groups, key=_BY_ID)


def sort_properties(properties: Iterable[ConfigProperty]) -> list[ConfigProperty]:
    """Return a new list of ``properties`` ordered by id (code-point order)."""

    return sorted(properties, key=_BY_ID)


__all__ = ["sort_groups", "sort_properties"]
