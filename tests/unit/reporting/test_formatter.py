"""
bootmeta: unit tests for single-property formatting

File: tests/unit/reporting/test_formatter.py

Purpose
- Validate the ``<id>=<default> # (<type>) - <description>`` line shape.

What this test file should cover
- Present, absent, and multi-valued defaults.
- JSON-style spelling of literal defaults.
- The missing-description marker.
"""

from __future__ import annotations

import pytest

from bootmeta.domain.models import ConfigProperty
from bootmeta.reporting.formatter import default_value_to_string, format_property


@pytest.mark.unit
def test_format_property_with_default_and_description() -> None:
    prop = ConfigProperty(
        id="a.b",
        type="String",
        default_value="x",
        description="desc",
    )

    assert format_property(prop) == "a.b=x # (String) - desc"


@pytest.mark.unit
def test_format_property_without_default_keeps_equals_sign() -> None:
    prop = ConfigProperty(id="a.b", type="String", description="desc")

    assert format_property(prop) == "a.b= # (String) - desc"


@pytest.mark.unit
def test_format_property_without_description_uses_marker() -> None:
    prop = ConfigProperty(id="server.port", type="java.lang.Integer", default_value=8080)

    assert format_property(prop) == "server.port=8080 # (java.lang.Integer) --- NO DESCRIPTION"


@pytest.mark.unit
def test_blank_short_description_uses_marker() -> None:
    prop = ConfigProperty(id="a.b", type="String", short_description="   ")

    assert format_property(prop).endswith(" --- NO DESCRIPTION")


@pytest.mark.unit
def test_format_property_uses_short_description_only() -> None:
    prop = ConfigProperty(
        id="server.port",
        type="java.lang.Integer",
        description="Server HTTP port. Defaults to 8080 when unset.",
    )

    assert format_property(prop) == "server.port= # (java.lang.Integer) - Server HTTP port."


@pytest.mark.unit
def test_sequence_default_is_comma_joined() -> None:
    prop = ConfigProperty(
        id="management.endpoints.web.exposure.include",
        type="java.util.Set<java.lang.String>",
        default_value=["a", "b", "c"],
        description="Endpoint IDs.",
    )

    assert format_property(prop) == (
        "management.endpoints.web.exposure.include=a, b, c "
        "# (java.util.Set<java.lang.String>) - Endpoint IDs."
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (1.5, "1.5"),
        ("", ""),
        ([], ""),
        ([1, None, False], "1, null, false"),
        (("x",), "x"),
    ],
)
def test_default_value_to_string(value: object, expected: str) -> None:
    assert default_value_to_string(value) == expected


@pytest.mark.unit
def test_empty_string_default_is_present_but_blank() -> None:
    prop = ConfigProperty(id="a.b", type="String", default_value="", description="d")

    assert format_property(prop) == "a.b= # (String) - d"
