"""One-line textual rendering of a configuration property."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from bootmeta.constants import DEFAULT_VALUE_DELIMITER, NO_DESCRIPTION_MARKER

if TYPE_CHECKING:
    from bootmeta.domain.models import ConfigProperty


def format_property(prop: ConfigProperty) -> str:
    """Render ``<id>=<default> # (<type>) - <description>``."""

    parts = [prop.id, "="]
    if prop.default_value is not None:
        parts.append(default_value_to_string(prop.default_value))
    parts.append(f" # ({prop.type})")
    description = prop.short_description
    if description is not None and description.strip():
        parts.append(f" - {description}")
    else:
        parts.append(NO_DESCRIPTION_MARKER)
    return "".join(parts)


def default_value_to_string(value: object) -> str:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return DEFAULT_VALUE_DELIMITER.join(_scalar_text(item) for item in value)
    return _scalar_text(value)


def _scalar_text(value: object) -> str:
    # Metadata values come from JSON; keep its spelling for literals.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["default_value_to_string", "format_property"]
