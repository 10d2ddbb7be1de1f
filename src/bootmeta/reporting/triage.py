"""Triage of properties deprecated at error level.

Each error-level deprecation lands in exactly one bucket:

- ``with_replacement``: the declared replacement id exists in the catalog, so the property
  can most likely be downgraded to a warning;
- ``without_replacement``: no replacement, or one that does not resolve; the property is
  terminal and should be double checked.

Replacement resolution only checks that the id exists in the catalog's global property
map. It does not look at the replacement's own deprecation status or type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bootmeta.catalog.sorting import sort_groups, sort_properties
from bootmeta.constants import LINE_SEPARATOR
from bootmeta.domain.models import DeprecationLevel

if TYPE_CHECKING:
    from bootmeta.domain.models import Catalog, ConfigProperty

logger = logging.getLogger(__name__)

WITH_REPLACEMENT_TITLE = "Error properties with a replacement. Should they be flagged with error"
WITHOUT_REPLACEMENT_TITLE = (
    "Error properties that should be double checked if they are still needed"
)


@dataclass(frozen=True, slots=True)
class TriageResult:
    """Partition of error-level deprecated properties, each bucket sorted by id."""

    with_replacement: tuple[ConfigProperty, ...] = ()
    without_replacement: tuple[ConfigProperty, ...] = ()

    @property
    def total(self) -> int:
        return len(self.with_replacement) + len(self.without_replacement)

    def to_dict(self) -> dict[str, object]:
        return {
            "total": self.total,
            "with_replacement": [
                {"id": prop.id, "replacement": prop.replacement_id}
                for prop in self.with_replacement
            ],
            "without_replacement": [
                {"id": prop.id, "replacement": prop.replacement_id}
                for prop in self.without_replacement
            ],
        }


def is_error_deprecation(prop: ConfigProperty) -> bool:
    """Return True when ``prop`` is deprecated at error level."""
    return prop.deprecated and prop.deprecation_level is DeprecationLevel.ERROR


def has_resolvable_replacement(prop: ConfigProperty, catalog: Catalog) -> bool:
    """Return True when the replacement id of ``prop`` names a property in ``catalog``."""
    replacement = prop.replacement_id
    return replacement is not None and catalog.get_property(replacement) is not None


def analyze_deprecation_triage(catalog: Catalog) -> TriageResult:
    with_replacement: list[ConfigProperty] = []
    without_replacement: list[ConfigProperty] = []
    for group in sort_groups(catalog.groups.values()):
        for prop in sort_properties(catalog.properties_of(group).values()):
            if not is_error_deprecation(prop):
                continue
            if has_resolvable_replacement(prop, catalog):
                with_replacement.append(prop)
            else:
                without_replacement.append(prop)

    result = TriageResult(
        with_replacement=tuple(sort_properties(with_replacement)),
        without_replacement=tuple(sort_properties(without_replacement)),
    )
    logger.debug(
        "deprecation triage complete",
        extra={
            "with_replacement": len(result.with_replacement),
            "without_replacement": len(result.without_replacement),
        },
    )
    return result


def render_triage(result: TriageResult) -> str:
    lines = [
        f"Found {result.total} deprecated properties with error level?",
        f"\t{len(result.with_replacement)} Have an existing replacement",
        f"\t{len(result.without_replacement)} seems legit",
    ]
    if result.with_replacement:
        lines.extend(("", "", WITH_REPLACEMENT_TITLE))
        lines.extend(
            f"\t{prop.id} (replacement: {prop.replacement_id})" for prop in result.with_replacement
        )
    if result.without_replacement:
        lines.extend(("", "", WITHOUT_REPLACEMENT_TITLE))
        lines.extend(f"\t{prop.id}" for prop in result.without_replacement)
    return "".join(line + LINE_SEPARATOR for line in lines)


def format_deprecation_triage(catalog: Catalog) -> str:
    return render_triage(analyze_deprecation_triage(catalog))


__all__ = [
    "TriageResult",
    "WITHOUT_REPLACEMENT_TITLE",
    "WITH_REPLACEMENT_TITLE",
    "analyze_deprecation_triage",
    "format_deprecation_triage",
    "has_resolvable_replacement",
    "is_error_deprecation",
    "render_triage",
]
