"""Full catalog listing: every property of every group, grouped and sorted."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bootmeta.catalog.sorting import sort_groups, sort_properties
from bootmeta.constants import GROUP_SEPARATOR, LINE_SEPARATOR
from bootmeta.reporting.formatter import format_property

if TYPE_CHECKING:
    from bootmeta.domain.models import Catalog, ConfigGroup


def format_full_catalog(catalog: Catalog) -> str:
    """Render every group as a header block followed by its formatted properties."""

    lines: list[str] = []
    for group in sort_groups(catalog.groups.values()):
        lines.append(GROUP_SEPARATOR)
        lines.append(group_heading(group))
        lines.append(GROUP_SEPARATOR)
        for prop in sort_properties(catalog.properties_of(group).values()):
            lines.append(format_property(prop))
    return "".join(line + LINE_SEPARATOR for line in lines)


def group_heading(group: ConfigGroup) -> str:
    sources = " ".join(group.sources).strip()
    return f"Group --- {group.id}({sources})"


__all__ = ["format_full_catalog", "group_heading"]
