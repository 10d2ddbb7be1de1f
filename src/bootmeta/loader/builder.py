"""Merge metadata documents into a single immutable catalog."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from bootmeta.constants import ROOT_GROUP_ID, UNKNOWN_PROPERTY_TYPE
from bootmeta.domain.models import Catalog, ConfigGroup, ConfigProperty, Deprecation
from bootmeta.loader.sources import LoadError, MetadataDocument

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _GroupDraft:
    sources: list[str] = field(default_factory=list)
    types: set[str] = field(default_factory=set)
    property_ids: list[str] = field(default_factory=list)

    def add_source(self, source: str | None) -> None:
        if source and source not in self.sources:
            self.sources.append(source)


class CatalogBuilder:
    """Accumulates metadata documents; ``build`` assigns properties to groups.

    A property belongs to the group whose declared ``type`` equals the property's
    ``sourceType`` and whose name prefixes the property id; the longest such name wins.
    Properties without a ``sourceType``, or with no matching group, go to the root group.
    When the same property id is declared more than once, the first declaration wins.
    """

    def __init__(self) -> None:
        self._groups: dict[str, _GroupDraft] = {}
        self._properties: dict[str, ConfigProperty] = {}
        self._source_types: dict[str, str | None] = {}
        self._documents = 0

    @property
    def document_count(self) -> int:
        return self._documents

    def add_document(self, document: MetadataDocument) -> CatalogBuilder:
        payload = document.payload
        for index, entry in enumerate(_entries(payload, "groups", document.origin)):
            path = f"{document.origin}: groups[{index}]"
            name = _require_name(entry, path)
            draft = self._groups.setdefault(name, _GroupDraft())
            group_type = _optional_str(entry.get("type"), f"{path}.type")
            if group_type is not None:
                draft.types.add(group_type)
            draft.add_source(
                group_type or _optional_str(entry.get("sourceType"), f"{path}.sourceType")
            )

        for index, entry in enumerate(_entries(payload, "properties", document.origin)):
            path = f"{document.origin}: properties[{index}]"
            prop = _parse_property(entry, path)
            if prop.id in self._properties:
                logger.debug(
                    "ignoring duplicate property declaration",
                    extra={"property_id": prop.id, "origin": document.origin},
                )
                continue
            self._properties[prop.id] = prop
            self._source_types[prop.id] = _optional_str(
                entry.get("sourceType"), f"{path}.sourceType"
            )

        self._documents += 1
        return self

    def add_documents(self, documents: Sequence[MetadataDocument]) -> CatalogBuilder:
        for document in documents:
            self.add_document(document)
        return self

    def build(self) -> Catalog:
        drafts = {
            name: _GroupDraft(sources=list(draft.sources), types=set(draft.types))
            for name, draft in self._groups.items()
        }
        # Longest names first so nested groups win over their parents.
        candidates = sorted(drafts, key=len, reverse=True)
        for property_id in self._properties:
            owner = self._owner_of(property_id, candidates, drafts)
            drafts.setdefault(owner, _GroupDraft()).property_ids.append(property_id)

        groups = [
            ConfigGroup(
                id=name, sources=tuple(draft.sources), property_ids=tuple(draft.property_ids)
            )
            for name, draft in drafts.items()
        ]
        try:
            return Catalog.from_components(groups, self._properties.values())
        except (TypeError, ValueError) as exc:
            raise LoadError(f"unable to build catalog: {exc}") from exc

    def _owner_of(
        self, property_id: str, candidates: Sequence[str], drafts: Mapping[str, _GroupDraft]
    ) -> str:
        source_type = self._source_types.get(property_id)
        if source_type is None:
            return ROOT_GROUP_ID
        return next(
            (
                name
                for name in candidates
                if source_type in drafts[name].types and property_id.startswith(name)
            ),
            ROOT_GROUP_ID,
        )


def _entries(
    payload: Mapping[str, object], key: str, origin: str
) -> list[Mapping[str, object]]:
    raw = payload.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise LoadError(f"{origin}: {key} must be an array")
    entries: list[Mapping[str, object]] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise LoadError(f"{origin}: {key}[{index}] must be an object")
        entries.append(item)
    return entries


def _require_name(entry: Mapping[str, object], path: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise LoadError(f"{path}.name must be a non-empty string")
    return name.strip()


def _optional_str(value: object, path: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise LoadError(f"{path} must be a string")
    return value.strip() or None


def _parse_property(entry: Mapping[str, object], path: str) -> ConfigProperty:
    name = _require_name(entry, path)
    try:
        return ConfigProperty(
            id=name,
            type=_optional_str(entry.get("type"), f"{path}.type") or UNKNOWN_PROPERTY_TYPE,
            default_value=entry.get("defaultValue"),
            description=_optional_str(entry.get("description"), f"{path}.description"),
            deprecation=_parse_deprecation(entry, path),
        )
    except (TypeError, ValueError) as exc:
        if isinstance(exc, LoadError):
            raise
        raise LoadError(f"{path}: {exc}") from exc


def _parse_deprecation(entry: Mapping[str, object], path: str) -> Deprecation | None:
    raw = entry.get("deprecation")
    deprecated = entry.get("deprecated", False)
    if not isinstance(deprecated, bool):
        raise LoadError(f"{path}.deprecated must be a boolean")
    if raw is None:
        return Deprecation() if deprecated else None
    if not isinstance(raw, Mapping):
        raise LoadError(f"{path}.deprecation must be an object")
    level = raw.get("level")
    return Deprecation(
        level="warning" if level is None else level,  # type: ignore[arg-type]
        replacement=_optional_str(raw.get("replacement"), f"{path}.deprecation.replacement"),
        reason=_optional_str(raw.get("reason"), f"{path}.deprecation.reason"),
    )


__all__ = ["CatalogBuilder"]
