"""Python SDK for group registry operations.

This module exposes one entry point that wires the path builder,
group directory manager, membership manager and container provider
from a single runtime configuration.
"""

from __future__ import annotations

from pathlib import Path

from containers.provider import ContainerProvider, LxcPathProvider
from core.config import GroupConfig
from core.types import ContainerHandle, GroupListing, RemovalReport
from registry.group_directory import GroupDirectoryManager
from registry.listing import list_groups
from registry.membership import MembershipManager
from registry.paths import RegistryPaths


class GroupClient:
    """Primary SDK entry point for group workflows."""

    def __init__(
        self,
        config: GroupConfig | None = None,
        provider: ContainerProvider | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            provider: Optional container provider; defaults to the
                configured LXC path.
        """
        self._config = config or GroupConfig.from_env()
        self._paths = RegistryPaths(self._config.registry_root)
        self._provider = provider or LxcPathProvider(self._config.lxcpath)
        self._groups = GroupDirectoryManager(self._paths)
        self._members = MembershipManager(self._paths)

    @property
    def paths(self) -> RegistryPaths:
        return self._paths

    def container(self, container_name: str) -> ContainerHandle:
        """Resolve a container handle through the provider."""
        return self._provider.lookup(container_name)

    def create_group(self, group_name: str) -> Path:
        return self._groups.create_group(group_name)

    def destroy_group(self, group_name: str, force: bool = False) -> RemovalReport:
        return self._groups.destroy_group(group_name, force=force)

    def add_container(self, group_name: str, container_name: str) -> Path:
        """Resolve a container and link it into a group."""
        return self._members.add_membership(group_name, self.container(container_name))

    def remove_container(self, group_name: str, container_name: str) -> Path:
        """Resolve a container and unlink it from a group."""
        return self._members.remove_membership(group_name, self.container(container_name))

    def add_membership(self, group_name: str, container: ContainerHandle) -> Path:
        return self._members.add_membership(group_name, container)

    def remove_membership(self, group_name: str, container: ContainerHandle) -> Path:
        return self._members.remove_membership(group_name, container)

    def list_groups(self) -> list[GroupListing]:
        return list_groups(self._paths)
