"""Immutable catalog models for configuration metadata with strict validation."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import NoReturn

_WHITESPACE_RUN = re.compile(r"\s+")
_FIRST_SENTENCE = re.compile(r"^(.*?[.!?])(?=\s|$)")


class DeprecationLevel(StrEnum):
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, raw: object) -> DeprecationLevel:
        if isinstance(raw, DeprecationLevel):
            return raw
        if not isinstance(raw, str):
            raise TypeError(f"deprecation level must be a string, got {type(raw).__name__}")
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(level.value for level in cls)
            raise ValueError(
                f"unsupported deprecation level {raw!r}; expected one of {allowed}"
            ) from exc


def _fail(path: str, message: str) -> NoReturn:
    raise ValueError(f"{path}: {message}")


def _validate_non_empty_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    parsed = value.strip()
    if not parsed:
        _fail(field_name, "cannot be empty")
    return parsed


def _optional_text(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    stripped = value.strip()
    return stripped or None


def _is_value_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def extract_short_description(description: str | None) -> str | None:
    """Return the first sentence of ``description`` with whitespace collapsed."""

    if description is None:
        return None
    if "." not in description:
        first_line = description.strip().splitlines()
        return first_line[0].strip() if first_line else None
    collapsed = _WHITESPACE_RUN.sub(" ", description).strip()
    match = _FIRST_SENTENCE.match(collapsed)
    if match is None:
        return collapsed or None
    return match.group(1)


@dataclass(frozen=True, slots=True)
class Deprecation:
    """Deprecation status attached to a property."""

    level: DeprecationLevel = DeprecationLevel.WARNING
    replacement: str | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", DeprecationLevel.parse(self.level))
        object.__setattr__(
            self, "replacement", _optional_text(self.replacement, "Deprecation.replacement")
        )
        object.__setattr__(self, "reason", _optional_text(self.reason, "Deprecation.reason"))


@dataclass(frozen=True, slots=True)
class ConfigProperty:
    """A single configuration key and its metadata."""

    id: str
    type: str
    default_value: object | None = None
    description: str | None = None
    short_description: str | None = None
    deprecation: Deprecation | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _validate_non_empty_str(self.id, "ConfigProperty.id"))
        object.__setattr__(
            self, "type", _validate_non_empty_str(self.type, "ConfigProperty.type")
        )
        if _is_value_sequence(self.default_value):
            values = tuple(self.default_value)  # type: ignore[arg-type]
            object.__setattr__(self, "default_value", values)

        description = self.description
        if description is not None and not isinstance(description, str):
            raise TypeError("ConfigProperty.description must be a string")
        short = self.short_description
        if short is None:
            short = extract_short_description(description)
        elif not isinstance(short, str):
            raise TypeError("ConfigProperty.short_description must be a string")
        object.__setattr__(self, "short_description", short)

        if self.deprecation is not None and not isinstance(self.deprecation, Deprecation):
            raise TypeError("ConfigProperty.deprecation must be Deprecation")

    @property
    def deprecated(self) -> bool:
        return self.deprecation is not None

    @property
    def deprecation_level(self) -> DeprecationLevel | None:
        return None if self.deprecation is None else self.deprecation.level

    @property
    def replacement_id(self) -> str | None:
        return None if self.deprecation is None else self.deprecation.replacement


@dataclass(frozen=True, slots=True)
class ConfigGroup:
    """Logical owner of related properties.

    ``property_ids`` reference the owning catalog's global property map; the group never
    holds property instances itself.
    """

    id: str
    sources: tuple[str, ...] = ()
    property_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.id, str):
            raise TypeError(f"ConfigGroup.id must be a string, got {type(self.id).__name__}")
        object.__setattr__(self, "id", self.id.strip())

        sources: list[str] = []
        for index, source in enumerate(self.sources):
            parsed = _validate_non_empty_str(source, f"ConfigGroup.sources[{index}]")
            if parsed not in sources:
                sources.append(parsed)
        object.__setattr__(self, "sources", tuple(sources))

        property_ids: list[str] = []
        for index, property_id in enumerate(self.property_ids):
            parsed = _validate_non_empty_str(property_id, f"ConfigGroup.property_ids[{index}]")
            if parsed in property_ids:
                _fail(f"ConfigGroup[{self.id}]", f"duplicate property id {parsed!r}")
            property_ids.append(parsed)
        object.__setattr__(self, "property_ids", tuple(property_ids))


@dataclass(frozen=True, slots=True)
class Catalog:
    """The whole configuration universe for one analyzed version.

    Exposes two read-only views: groups by id and properties by global id. The property
    map holds the authoritative instances.
    """

    groups: Mapping[str, ConfigGroup] = field(default_factory=dict)
    properties: Mapping[str, ConfigProperty] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, prop in self.properties.items():
            if not isinstance(prop, ConfigProperty):
                raise TypeError("Catalog.properties values must be ConfigProperty")
            if key != prop.id:
                _fail("Catalog.properties", f"key {key!r} does not match property id {prop.id!r}")
        for key, group in self.groups.items():
            if not isinstance(group, ConfigGroup):
                raise TypeError("Catalog.groups values must be ConfigGroup")
            if key != group.id:
                _fail("Catalog.groups", f"key {key!r} does not match group id {group.id!r}")
            missing = [pid for pid in group.property_ids if pid not in self.properties]
            if missing:
                _fail(f"Catalog.groups[{key}]", f"unknown property ids {sorted(missing)}")

        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def from_components(
        cls,
        groups: Iterable[ConfigGroup],
        properties: Iterable[ConfigProperty],
    ) -> Catalog:
        by_id: dict[str, ConfigProperty] = {}
        for prop in properties:
            if prop.id in by_id:
                _fail("Catalog.properties", f"duplicate property id {prop.id!r}")
            by_id[prop.id] = prop
        by_group: dict[str, ConfigGroup] = {}
        for group in groups:
            if group.id in by_group:
                _fail("Catalog.groups", f"duplicate group id {group.id!r}")
            by_group[group.id] = group
        return cls(groups=by_group, properties=by_id)

    def get_property(self, property_id: str) -> ConfigProperty | None:
        return self.properties.get(property_id)

    def properties_of(self, group: ConfigGroup | str) -> Mapping[str, ConfigProperty]:
        """Group-scoped view resolved through the global property map."""

        resolved = self.groups[group] if isinstance(group, str) else group
        return MappingProxyType(
            {property_id: self.properties[property_id] for property_id in resolved.property_ids}
        )


__all__ = [
    "Catalog",
    "ConfigGroup",
    "ConfigProperty",
    "Deprecation",
    "DeprecationLevel",
    "extract_short_description",
]
