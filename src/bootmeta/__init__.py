"""
bootmeta: configuration metadata reports.

Purpose
- Package root. Exposes the version and the two report entry points.

Functional requirements
- Must not have side effects at import time (no config loading, no logging init).
"""

from __future__ import annotations

__version__ = "0.3.0"

from bootmeta.reporting import (
    ReportMode,
    format_deprecation_triage,
    format_full_catalog,
    render_report,
)

__all__ = [
    "ReportMode",
    "__version__",
    "format_deprecation_triage",
    "format_full_catalog",
    "render_report",
]
