"""Group directory lifecycle.

A group exists exactly when ``<root>/<group>`` is a directory. Creation
is idempotent; destruction is either strict (the directory must be
empty) or forced (recursive best-effort removal of every entry).
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

from core.constants import GROUP_DIR_MODE
from core.errors import (
    GroupFilesystemError,
    GroupNotFoundError,
    NotEmptyError,
)
from core.logging_config import get_logger
from core.types import RemovalReport
from registry.paths import RegistryPaths
from registry.tree_remover import remove_tree

_LOGGER = get_logger(__name__)


class GroupDirectoryManager:
    """Create and destroy group directories under one registry root."""

    def __init__(self, paths: RegistryPaths) -> None:
        self._paths = paths

    def create_group(self, group_name: str) -> Path:
        """Create a group directory, succeeding if it already exists.

        Missing ancestors of the registry root are created one segment at
        a time with mode 0755, masked by the process umask.

        Args:
            group_name: Group identifier.

        Returns:
            The group directory path.

        Raises:
            InvalidNameError: If the group name is unsafe.
            GroupFilesystemError: On permission, I/O or path-type failures.
        """
        group_dir = self._paths.group_dir(group_name)
        _ensure_directory_chain(self._paths.root)
        created = _make_directory(group_dir)
        _LOGGER.info("group_created", group=group_name, path=str(group_dir), existed=not created)
        return group_dir

    def destroy_group(self, group_name: str, force: bool = False) -> RemovalReport:
        """Destroy a group directory.

        Args:
            group_name: Group identifier.
            force: Remove every membership entry first, best-effort.

        Returns:
            Removal report; strict destroys remove exactly one entry.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotEmptyError: On a strict destroy of a group with members.
            GroupFilesystemError: If the group directory survives.
        """
        group_dir = self._paths.group_dir(group_name)
        if not group_dir.is_dir() or group_dir.is_symlink():
            raise GroupNotFoundError(f"Group '{group_name}' does not exist at {group_dir}")
        if force:
            report = remove_tree(group_dir, "best_effort")
            if os.path.lexists(group_dir):
                first = report.skipped[0].reason if report.skipped else "directory remains"
                raise GroupFilesystemError(
                    f"Failed to destroy {group_name} and contents in group: "
                    f"{len(report.skipped)} entries could not be removed ({first})"
                )
        else:
            _remove_empty_directory(group_name, group_dir)
            report = RemovalReport(root=group_dir, removed_count=1)
        _LOGGER.info(
            "group_destroyed",
            group=group_name,
            path=str(group_dir),
            force=force,
            removed_count=report.removed_count,
            skipped_count=len(report.skipped),
        )
        return report


def _ensure_directory_chain(path: Path) -> None:
    """Create ``path`` and any missing ancestors, tolerating existing ones."""
    for segment in (*reversed(path.parents), path):
        _make_directory(segment)


def _make_directory(path: Path) -> bool:
    """Create one directory; return False when it already exists."""
    try:
        os.mkdir(path, GROUP_DIR_MODE)
    except FileExistsError as error:
        if path.is_dir():
            return False
        raise GroupFilesystemError(
            f"Failed to create {path}: exists and is not a directory"
        ) from error
    except OSError as error:
        raise GroupFilesystemError(f"Failed to create {path}: {error.strerror or error}") from error
    return True


def _remove_empty_directory(group_name: str, group_dir: Path) -> None:
    try:
        os.rmdir(group_dir)
    except FileNotFoundError as error:
        raise GroupNotFoundError(f"Group '{group_name}' does not exist at {group_dir}") from error
    except OSError as error:
        if error.errno in (errno.ENOTEMPTY, errno.EEXIST):
            raise NotEmptyError(
                f"Group '{group_name}' still has members; use --force to destroy it with its members"
            ) from error
        raise GroupFilesystemError(
            f"Failed to destroy {group_dir}: {error.strerror or error}"
        ) from error
