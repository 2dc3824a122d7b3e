"""Core constants used across group registry modules.

This module centralizes filesystem defaults and fixed vocabularies.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

PROGRAM_NAME = "lxc-group"
DEFAULT_REGISTRY_ROOT = Path("/usr/local/var/lib/lxcgroup")
DEFAULT_LXCPATH = Path("/var/lib/lxc")
DEFAULT_LOG_LEVEL = "error"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
GROUP_DIR_MODE = 0o755
CONTAINER_CONFIG_FILE_NAME = "config"
RESERVED_PATH_SEGMENTS = (".", "..")
EXIT_FAILURE = 1
