"""Report rendering over an already-loaded catalog.

Two report shapes exist; ``render_report`` selects one from a mode-keyed table.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from bootmeta.reporting.formatter import default_value_to_string, format_property
from bootmeta.reporting.full_listing import format_full_catalog
from bootmeta.reporting.triage import (
    TriageResult,
    analyze_deprecation_triage,
    format_deprecation_triage,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from bootmeta.domain.models import Catalog


class ReportMode(StrEnum):
    """Report shapes selectable through ``render_report``."""

    FULL_LISTING = "full-listing"
    DEPRECATION_TRIAGE = "deprecation-triage"


REPORT_RENDERERS: Final = MappingProxyType(
    {
        ReportMode.FULL_LISTING: format_full_catalog,
        ReportMode.DEPRECATION_TRIAGE: format_deprecation_triage,
    }
)


def render_report(mode: ReportMode | str, catalog: Catalog) -> str:
    renderer: Callable[[Catalog], str] = REPORT_RENDERERS[ReportMode(mode)]
    return renderer(catalog)


__all__ = [
    "REPORT_RENDERERS",
    "ReportMode",
    "TriageResult",
    "analyze_deprecation_triage",
    "default_value_to_string",
    "format_deprecation_triage",
    "format_full_catalog",
    "format_property",
    "render_report",
]
