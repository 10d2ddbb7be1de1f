"""
bootmeta config package public API.

Purpose
- Export config loading/validation entrypoints and public error types.

Functional requirements
- Support loading from ``bootmeta.toml`` + ``BOOTMETA_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from bootmeta.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    ConfigLoadError,
    dump_effective_config,
    load_config,
    normalize_paths,
)
from bootmeta.config.schema import (
    DEFAULT_CONFIG,
    PATH_FIELDS,
    BootmetaConfig,
    ConfigSchemaVersion,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    assert_valid_config,
    default_config,
    merge_config,
    migration_guidance,
    validate_config,
)

__all__ = [
    "BootmetaConfig",
    "ConfigLoadError",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "PATH_FIELDS",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "load_config",
    "merge_config",
    "migration_guidance",
    "normalize_paths",
    "validate_config",
]
