"""Runtime configuration model for the group registry.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_LXCPATH,
    DEFAULT_REGISTRY_ROOT,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import GroupConfigError


@dataclass(frozen=True)
class GroupConfig:
    """Validated runtime configuration.

    Attributes:
        registry_root: Directory holding one subdirectory per group.
        lxcpath: Base directory under which containers are stored.
        log_level: Minimum level for structured log output.
    """

    registry_root: Path
    lxcpath: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "GroupConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GroupConfigError: If environment values are invalid.
        """
        registry_root_value = os.getenv("LXC_GROUP_ROOT", str(DEFAULT_REGISTRY_ROOT))
        lxcpath_value = os.getenv("LXC_GROUP_LXCPATH", str(DEFAULT_LXCPATH))
        log_level_value = os.getenv("LXC_GROUP_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            registry_root=resolve_path(registry_root_value, "LXC_GROUP_ROOT"),
            lxcpath=resolve_path(lxcpath_value, "LXC_GROUP_LXCPATH"),
            log_level=parse_log_level(log_level_value),
        )


def resolve_path(raw_value: str, source_name: str) -> Path:
    """Expand and absolutize a configured directory path.

    Args:
        raw_value: Raw path string.
        source_name: Variable or flag name used in error messages.

    Returns:
        Absolute path.

    Raises:
        GroupConfigError: If the value is empty.
    """
    if not raw_value.strip():
        raise GroupConfigError(
            f"Invalid {source_name} value: expected a directory path, got an empty string."
        )
    return Path(raw_value).expanduser().resolve()


def parse_log_level(raw_value: str) -> str:
    """Parse a log level name.

    Args:
        raw_value: Raw level string from environment or CLI.

    Returns:
        Normalized lowercase level name.

    Raises:
        GroupConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise GroupConfigError(
            "Invalid LXC_GROUP_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return level
