"""Container provider contract and LXC path implementation.

A container named ``web`` stored under ``/var/lib/lxc`` lives at
``/var/lib/lxc/web`` and is defined when ``/var/lib/lxc/web/config``
is a regular file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from core.constants import CONTAINER_CONFIG_FILE_NAME
from core.logging_config import get_logger
from core.types import ContainerHandle
from registry.paths import validate_segment

_LOGGER = get_logger(__name__)


class ContainerProvider(Protocol):
    """Resolves container names to handles."""

    def lookup(self, container_name: str) -> ContainerHandle:
        """Return a handle whose ``exists`` flag reports definition state."""


class LxcPathProvider:
    """Provider backed by an LXC container base directory."""

    def __init__(self, lxcpath: Path) -> None:
        self._lxcpath = lxcpath

    @property
    def lxcpath(self) -> Path:
        return self._lxcpath

    def lookup(self, container_name: str) -> ContainerHandle:
        """Resolve a container under the configured base path.

        Args:
            container_name: Container identifier.

        Returns:
            Handle with canonical storage path and existence flag.

        Raises:
            InvalidNameError: If the name is not a safe path segment.
        """
        validate_segment(container_name, "container")
        container_path = self._lxcpath / container_name
        exists = (container_path / CONTAINER_CONFIG_FILE_NAME).is_file()
        _LOGGER.debug(
            "container_resolved",
            container=container_name,
            path=str(container_path),
            exists=exists,
        )
        return ContainerHandle(name=container_name, path=container_path, exists=exists)
