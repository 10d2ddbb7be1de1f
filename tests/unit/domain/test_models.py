"""
bootmeta: unit tests for catalog domain models

File: tests/unit/domain/test_models.py

Purpose
- Validate construction rules of properties, groups, deprecations, and the catalog.

What this test file should cover
- Identifier and type validation with field-qualified errors.
- Short description derivation from the long description.
- Catalog consistency between group membership and the global property map.
- Read-only views over catalog contents.

Functional requirements
- Offline only.

Non-functional requirements
- Deterministic and fast.
"""

from __future__ import annotations

import pytest

from bootmeta.domain.models import (
    Catalog,
    ConfigGroup,
    ConfigProperty,
    Deprecation,
    DeprecationLevel,
    extract_short_description,
)


def _prop(property_id: str, **kwargs: object) -> ConfigProperty:
    kwargs.setdefault("type", "java.lang.String")
    return ConfigProperty(id=property_id, **kwargs)  # type: ignore[arg-type]


@pytest.mark.unit
def test_property_requires_non_empty_id_and_type() -> None:
    with pytest.raises(ValueError, match="ConfigProperty.id"):
        ConfigProperty(id="  ", type="java.lang.String")
    with pytest.raises(ValueError, match="ConfigProperty.type"):
        ConfigProperty(id="server.port", type="")
    with pytest.raises(TypeError, match="ConfigProperty.id"):
        ConfigProperty(id=None, type="java.lang.String")  # type: ignore[arg-type]


@pytest.mark.unit
def test_property_sequence_default_is_frozen_to_tuple() -> None:
    prop = _prop("spring.profiles.active", default_value=["dev", "local"])

    assert prop.default_value == ("dev", "local")


@pytest.mark.unit
def test_property_derives_short_description_from_first_sentence() -> None:
    prop = _prop(
        "server.port",
        description="Server HTTP port.  Use 0 for a random\n port.",
    )

    assert prop.short_description == "Server HTTP port."


@pytest.mark.unit
def test_explicit_short_description_is_kept() -> None:
    prop = _prop("server.port", description="Long text. More.", short_description="Short")

    assert prop.short_description == "Short"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("description", "expected"),
    [
        (None, None),
        ("", None),
        ("No period here\nsecond line", "No period here"),
        ("Version 1.2 of the protocol. Trailing.", "Version 1.2 of the protocol."),
        ("Spans\n  two lines. Then more", "Spans two lines."),
    ],
)
def test_extract_short_description(description: str | None, expected: str | None) -> None:
    assert extract_short_description(description) == expected


@pytest.mark.unit
def test_deprecation_level_parsing_is_case_insensitive() -> None:
    assert DeprecationLevel.parse("ERROR") is DeprecationLevel.ERROR
    assert Deprecation(level="Warning").level is DeprecationLevel.WARNING  # type: ignore[arg-type]

    with pytest.raises(ValueError, match="unsupported deprecation level"):
        DeprecationLevel.parse("fatal")


@pytest.mark.unit
def test_property_deprecation_accessors() -> None:
    plain = _prop("a.plain")
    deprecated = _prop(
        "a.old",
        deprecation=Deprecation(level=DeprecationLevel.ERROR, replacement=" a.new "),
    )

    assert not plain.deprecated
    assert plain.deprecation_level is None
    assert plain.replacement_id is None
    assert deprecated.deprecated
    assert deprecated.deprecation_level is DeprecationLevel.ERROR
    assert deprecated.replacement_id == "a.new"


@pytest.mark.unit
def test_blank_replacement_is_treated_as_absent() -> None:
    assert Deprecation(level=DeprecationLevel.ERROR, replacement="   ").replacement is None


@pytest.mark.unit
def test_group_rejects_duplicate_property_ids_and_dedupes_sources() -> None:
    group = ConfigGroup(id="server", sources=("A", "A", "B"), property_ids=("server.port",))
    assert group.sources == ("A", "B")

    with pytest.raises(ValueError, match="duplicate property id"):
        ConfigGroup(id="server", property_ids=("server.port", "server.port"))


@pytest.mark.unit
def test_catalog_rejects_dangling_group_membership() -> None:
    group = ConfigGroup(id="server", property_ids=("server.port", "server.missing"))

    with pytest.raises(ValueError, match="unknown property ids"):
        Catalog.from_components([group], [_prop("server.port")])


@pytest.mark.unit
def test_catalog_rejects_duplicate_components() -> None:
    with pytest.raises(ValueError, match="duplicate property id"):
        Catalog.from_components([], [_prop("a.b"), _prop("a.b")])
    with pytest.raises(ValueError, match="duplicate group id"):
        Catalog.from_components([ConfigGroup(id="a"), ConfigGroup(id="a")], [])


@pytest.mark.unit
def test_catalog_rejects_mismatched_keys() -> None:
    with pytest.raises(ValueError, match="does not match property id"):
        Catalog(properties={"x": _prop("y")})


@pytest.mark.unit
def test_catalog_views_are_read_only_and_resolve_through_global_map() -> None:
    port = _prop("server.port", default_value=8080)
    catalog = Catalog.from_components(
        [ConfigGroup(id="server", property_ids=("server.port",))],
        [port],
    )

    scoped = catalog.properties_of("server")

    assert scoped["server.port"] is catalog.properties["server.port"]
    assert catalog.get_property("server.port") is port
    assert catalog.get_property("server.host") is None
    with pytest.raises(TypeError):
        catalog.properties["x"] = port  # type: ignore[index]
    with pytest.raises(TypeError):
        scoped["x"] = port  # type: ignore[index]
