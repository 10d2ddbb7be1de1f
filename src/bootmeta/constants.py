"""Stable constants shared across bootmeta modules."""

from __future__ import annotations

from typing import Final

# Schema version for the TOML configuration contract.
CONFIG_SCHEMA_VERSION: Final[int] = 1

# Report layout.
GROUP_SEPARATOR: Final[str] = "=" * 40
NO_DESCRIPTION_MARKER: Final[str] = " --- NO DESCRIPTION"
DEFAULT_VALUE_DELIMITER: Final[str] = ", "
LINE_SEPARATOR: Final[str] = "\n"

# Metadata layout inside Spring Boot jars.
METADATA_ENTRY: Final[str] = "META-INF/spring-configuration-metadata.json"
ADDITIONAL_METADATA_ENTRY: Final[str] = "META-INF/additional-spring-configuration-metadata.json"
ROOT_GROUP_ID: Final[str] = "_ROOT_GROUP_"
UNKNOWN_PROPERTY_TYPE: Final[str] = "java.lang.Object"

# Artifact coordinates resolved for a Spring Boot version.
DEFAULT_ARTIFACTS: Final[tuple[str, ...]] = (
    "org.springframework.boot:spring-boot",
    "org.springframework.boot:spring-boot-autoconfigure",
    "org.springframework.boot:spring-boot-actuator",
    "org.springframework.boot:spring-boot-actuator-autoconfigure",
)
DEFAULT_OPTIONAL_ARTIFACTS: Final[tuple[str, ...]] = (
    "org.springframework.boot:spring-boot-devtools",
    "org.springframework.boot:spring-boot-test-autoconfigure",
)
DEFAULT_LOCAL_REPOSITORY: Final[str] = "~/.m2/repository"

__all__ = [
    "ADDITIONAL_METADATA_ENTRY",
    "CONFIG_SCHEMA_VERSION",
    "DEFAULT_ARTIFACTS",
    "DEFAULT_LOCAL_REPOSITORY",
    "DEFAULT_OPTIONAL_ARTIFACTS",
    "DEFAULT_VALUE_DELIMITER",
    "GROUP_SEPARATOR",
    "LINE_SEPARATOR",
    "METADATA_ENTRY",
    "NO_DESCRIPTION_MARKER",
    "ROOT_GROUP_ID",
    "UNKNOWN_PROPERTY_TYPE",
]
