"""
Configuration schema and validation for bootmeta.

Purpose
- Define authoritative configuration defaults and strict validation rules.

Functional requirements
- Validate config payloads and return structured errors (field path + message).
- Reject unknown sections and keys.

Non-functional requirements
- Keep rules deterministic and easy to audit.
"""

from __future__ import annotations

import codecs
import copy
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal, TypedDict

from bootmeta.constants import (
    CONFIG_SCHEMA_VERSION,
    DEFAULT_ARTIFACTS,
    DEFAULT_LOCAL_REPOSITORY,
    DEFAULT_OPTIONAL_ARTIFACTS,
)

ConfigSchemaVersion: Final[int] = CONFIG_SCHEMA_VERSION
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS: Final[tuple[str, ...]] = ("json", "text")

_COORDINATE_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+:[A-Za-z0-9_.-]+$")

# Config paths that should be normalized relative to config file location.
PATH_FIELDS: Final[tuple[tuple[str, ...], ...]] = (
    ("repository", "local_path"),
    ("observability", "log_file"),
)


class MetaConfig(TypedDict):
    schema_version: int


class RepositoryConfig(TypedDict):
    local_path: str
    artifacts: list[str]
    optional_artifacts: list[str]


class ReportConfig(TypedDict):
    default_version: str
    output_encoding: str


class ObservabilityConfig(TypedDict):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    log_format: Literal["json", "text"]
    log_file: str


class BootmetaConfig(TypedDict):
    meta: MetaConfig
    repository: RepositoryConfig
    report: ReportConfig
    observability: ObservabilityConfig


DEFAULT_CONFIG: Final[BootmetaConfig] = {
    "meta": {
        "schema_version": ConfigSchemaVersion,
    },
    "repository": {
        "local_path": DEFAULT_LOCAL_REPOSITORY,
        "artifacts": list(DEFAULT_ARTIFACTS),
        "optional_artifacts": list(DEFAULT_OPTIONAL_ARTIFACTS),
    },
    "report": {
        "default_version": "",
        "output_encoding": "utf-8",
    },
    "observability": {
        "log_level": "WARNING",
        "log_format": "text",
        "log_file": "",
    },
}


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with normalized config when no issues were found."""

    config: dict[str, Any] | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised when strict config validation fails."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[ConfigValidationIssue] = []

    def add(self, path: str, message: str) -> None:
        self._items.append(ConfigValidationIssue(path=path, message=message))

    def items(self) -> tuple[ConfigValidationIssue, ...]:
        return tuple(self._items)

    @property
    def has_issues(self) -> bool:
        return bool(self._items)


def default_config() -> BootmetaConfig:
    """Return a deep copy of deterministic built-in defaults."""

    return copy.deepcopy(DEFAULT_CONFIG)


def migration_guidance(found_version: int) -> str:
    if found_version < ConfigSchemaVersion:
        return (
            f"schema version {found_version} is older than supported {ConfigSchemaVersion}; "
            "upgrade bootmeta.toml to the current schema"
        )
    if found_version > ConfigSchemaVersion:
        return (
            f"schema version {found_version} is newer than supported {ConfigSchemaVersion}; "
            "upgrade bootmeta"
        )
    return "schema version is current"


def merge_config(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged = _deep_copy_mapping(base)
    _merge_into(merged, overlay)
    return merged


def validate_config(config: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate config and return structured issues with deterministic paths."""

    issues = _IssueCollector()
    root = _as_object(config, "<root>", issues)
    if root is None:
        return ConfigValidationResult(config=None, issues=issues.items())

    normalized = _validate_root(root, issues)
    if issues.has_issues:
        return ConfigValidationResult(config=None, issues=issues.items())
    return ConfigValidationResult(config=normalized, issues=())


def assert_valid_config(config: Mapping[str, object] | object) -> dict[str, Any]:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(config)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


def _validate_root(payload: Mapping[str, object], issues: _IssueCollector) -> dict[str, Any]:
    validators: dict[str, Callable[[dict[str, object], str, _IssueCollector], dict[str, Any]]] = {
        "meta": _validate_meta,
        "repository": _validate_repository,
        "report": _validate_report,
        "observability": _validate_observability,
    }
    _reject_unknown_keys(payload, set(validators), "", issues)
    _require_keys(payload, set(validators), "", issues)

    out: dict[str, Any] = {}
    for key in sorted(validators):
        raw = payload.get(key)
        if raw is None:
            continue
        section = _as_object(raw, key, issues)
        if section is None:
            continue
        out[key] = validators[key](section, key, issues)
    return out


def _validate_meta(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    _reject_unknown_keys(payload, {"schema_version"}, path, issues)
    _require_keys(payload, {"schema_version"}, path, issues)

    out: dict[str, Any] = {}
    if "schema_version" in payload:
        parsed = _as_int(
            payload["schema_version"], _join(path, "schema_version"), issues, minimum=1
        )
        if parsed is not None:
            out["schema_version"] = parsed
            if parsed != ConfigSchemaVersion:
                issues.add(_join(path, "schema_version"), migration_guidance(parsed))
    return out


def _validate_repository(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"local_path", "artifacts", "optional_artifacts"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    if "local_path" in payload:
        parsed_path = _as_path_text(payload["local_path"], _join(path, "local_path"), issues)
        if parsed_path is not None:
            out["local_path"] = parsed_path
    for key in ("artifacts", "optional_artifacts"):
        if key in payload:
            parsed_list = _as_coordinates(payload[key], _join(path, key), issues)
            if parsed_list is not None:
                out[key] = parsed_list
    return out


def _validate_report(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"default_version", "output_encoding"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    if "default_version" in payload:
        value = payload["default_version"]
        if isinstance(value, str):
            out["default_version"] = value.strip()
        else:
            issues.add(
                _join(path, "default_version"), f"expected string, got {type(value).__name__}"
            )
    if "output_encoding" in payload:
        encoding = _as_str(payload["output_encoding"], _join(path, "output_encoding"), issues)
        if encoding is not None:
            if _is_known_encoding(encoding):
                out["output_encoding"] = encoding
            else:
                issues.add(_join(path, "output_encoding"), f"unknown encoding {encoding!r}")
    return out


def _validate_observability(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"log_level", "log_format", "log_file"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    if "log_level" in payload:
        raw_level = payload["log_level"]
        level = raw_level.upper() if isinstance(raw_level, str) else raw_level
        parsed_level = _as_enum(level, _join(path, "log_level"), issues, allowed_values=LOG_LEVELS)
        if parsed_level is not None:
            out["log_level"] = parsed_level
    if "log_format" in payload:
        parsed_format = _as_enum(
            payload["log_format"], _join(path, "log_format"), issues, allowed_values=LOG_FORMATS
        )
        if parsed_format is not None:
            out["log_format"] = parsed_format
    if "log_file" in payload:
        value = payload["log_file"]
        if not isinstance(value, str):
            issues.add(_join(path, "log_file"), f"expected string, got {type(value).__name__}")
        elif "\x00" in value:
            issues.add(_join(path, "log_file"), "must not contain NUL bytes")
        else:
            out["log_file"] = value.strip()
    return out


def _as_object(value: object, path: str, issues: _IssueCollector) -> dict[str, object] | None:
    if not isinstance(value, Mapping):
        issues.add(path, f"expected object, got {type(value).__name__}")
        return None
    out: dict[str, object] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            issues.add(path, f"object key must be string, got {type(key).__name__}")
            continue
        out[key] = item
    return out


def _as_str(value: object, path: str, issues: _IssueCollector) -> str | None:
    if not isinstance(value, str):
        issues.add(path, f"expected string, got {type(value).__name__}")
        return None
    parsed = value.strip()
    if not parsed:
        issues.add(path, "must not be empty")
        return None
    return parsed


def _as_path_text(value: object, path: str, issues: _IssueCollector) -> str | None:
    parsed = _as_str(value, path, issues)
    if parsed is None:
        return None
    if "\x00" in parsed:
        issues.add(path, "must not contain NUL bytes")
        return None
    return parsed


def _as_int(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    minimum: int | None = None,
) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        issues.add(path, f"expected integer, got {type(value).__name__}")
        return None
    if minimum is not None and value < minimum:
        issues.add(path, f"must be >= {minimum}")
        return None
    return value


def _as_enum(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    allowed_values: tuple[str, ...],
) -> str | None:
    parsed = _as_str(value, path, issues)
    if parsed is None:
        return None
    if parsed not in allowed_values:
        expected = ", ".join(sorted(allowed_values))
        issues.add(path, f"invalid value {parsed!r}; expected one of: {expected}")
        return None
    return parsed


def _as_coordinates(value: object, path: str, issues: _IssueCollector) -> list[str] | None:
    if not isinstance(value, list):
        issues.add(path, f"expected array, got {type(value).__name__}")
        return None
    out: list[str] = []
    for index, item in enumerate(value):
        item_path = f"{path}[{index}]"
        parsed = _as_str(item, item_path, issues)
        if parsed is None:
            continue
        if not _COORDINATE_PATTERN.fullmatch(parsed):
            issues.add(item_path, "must be a 'group:artifact' coordinate")
            continue
        if parsed in out:
            issues.add(item_path, f"duplicate coordinate {parsed!r}")
            continue
        out.append(parsed)
    return out


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _reject_unknown_keys(
    payload: Mapping[str, object],
    allowed: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(payload):
        if key not in allowed:
            issues.add(_join(path, key), "unknown field")


def _require_keys(
    payload: Mapping[str, object],
    required: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(required):
        if key not in payload:
            issues.add(_join(path, key), "missing required field")


def _join(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        if isinstance(value, Mapping):
            existing = target.get(key)
            if isinstance(existing, dict):
                _merge_into(existing, value)
            else:
                nested: dict[str, Any] = {}
                _merge_into(nested, value)
                target[key] = nested
        else:
            target[key] = _deep_copy_value(value)


def _deep_copy_mapping(value: Mapping[str, object]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in sorted(value):
        out[key] = _deep_copy_value(value[key])
    return out


def _deep_copy_value(value: object) -> Any:
    if isinstance(value, Mapping):
        return {key: _deep_copy_value(item) for key, item in value.items() if isinstance(key, str)}
    if isinstance(value, list):
        return [_deep_copy_value(item) for item in value]
    return copy.deepcopy(value)


__all__ = [
    "DEFAULT_CONFIG",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_FIELDS",
    "BootmetaConfig",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "assert_valid_config",
    "default_config",
    "merge_config",
    "migration_guidance",
    "validate_config",
]
