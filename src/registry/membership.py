"""Container membership links.

Membership of container ``c`` in group ``g`` is the symlink
``<root>/g/c`` pointing at the container's canonical storage path.
Links are created and removed atomically, never overwritten, and
removing one never touches the container's storage.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.errors import (
    AlreadyExistsError,
    ContainerNotFoundError,
    GroupFilesystemError,
    GroupNotFoundError,
    MembershipNotFoundError,
)
from core.logging_config import get_logger
from core.types import ContainerHandle
from registry.paths import RegistryPaths

_LOGGER = get_logger(__name__)


class MembershipManager:
    """Add and remove containers from groups."""

    def __init__(self, paths: RegistryPaths) -> None:
        self._paths = paths

    def add_membership(self, group_name: str, container: ContainerHandle) -> Path:
        """Link a container into a group.

        Args:
            group_name: Group identifier.
            container: Handle resolved by the container provider.

        Returns:
            The created membership link path.

        Raises:
            ContainerNotFoundError: If the container is not defined.
            GroupNotFoundError: If the group directory is missing.
            AlreadyExistsError: If an entry with that name already exists.
            GroupFilesystemError: If the link cannot be created.
        """
        _require_container(container)
        link_path = self._paths.membership_link(group_name, container.name)
        if not link_path.parent.is_dir():
            raise GroupNotFoundError(f"Group '{group_name}' does not exist at {link_path.parent}")
        if os.path.lexists(link_path):
            raise AlreadyExistsError(
                f"'{container.name}' is already an entry of group '{group_name}' ({link_path})"
            )
        try:
            os.symlink(container.path, link_path)
        except FileExistsError as error:
            raise AlreadyExistsError(
                f"'{container.name}' is already an entry of group '{group_name}' ({link_path})"
            ) from error
        except OSError as error:
            raise GroupFilesystemError(
                f"Failed to add {container.name} to {group_name}: {error.strerror or error}"
            ) from error
        _LOGGER.info(
            "membership_added",
            group=group_name,
            container=container.name,
            link=str(link_path),
            target=str(container.path),
        )
        return link_path

    def remove_membership(self, group_name: str, container: ContainerHandle) -> Path:
        """Unlink a container from a group.

        Args:
            group_name: Group identifier.
            container: Handle resolved by the container provider.

        Returns:
            The removed membership link path.

        Raises:
            ContainerNotFoundError: If the container is not defined.
            MembershipNotFoundError: If the container is not a member.
            GroupFilesystemError: If the entry is not a link or cannot be removed.
        """
        _require_container(container)
        link_path = self._paths.membership_link(group_name, container.name)
        if not os.path.lexists(link_path):
            raise MembershipNotFoundError(
                f"'{container.name}' is not a member of group '{group_name}'"
            )
        if not link_path.is_symlink():
            raise GroupFilesystemError(
                f"Refusing to delete {link_path}: not a membership link"
            )
        try:
            os.unlink(link_path)
        except FileNotFoundError as error:
            raise MembershipNotFoundError(
                f"'{container.name}' is not a member of group '{group_name}'"
            ) from error
        except OSError as error:
            raise GroupFilesystemError(
                f"Failed to delete {container.name} from {group_name}: {error.strerror or error}"
            ) from error
        _LOGGER.info(
            "membership_removed",
            group=group_name,
            container=container.name,
            link=str(link_path),
        )
        return link_path


def _require_container(container: ContainerHandle) -> None:
    if not container.exists:
        raise ContainerNotFoundError(f'"{container.name}" container does not exist')
