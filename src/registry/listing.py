"""Group enumeration.

Reads the registry layout back into typed listings. Listing never
mutates state and ignores stray non-directory entries under the root.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.errors import GroupFilesystemError
from core.types import GroupListing, MembershipEntry
from registry.paths import RegistryPaths


def list_groups(paths: RegistryPaths) -> list[GroupListing]:
    """List every group under the registry root, sorted by name.

    Args:
        paths: Registry path builder.

    Returns:
        Group listings; empty when the registry root does not exist yet.

    Raises:
        GroupFilesystemError: If the registry root cannot be read.
    """
    if not paths.root.is_dir():
        return []
    try:
        with os.scandir(paths.root) as entries:
            names = sorted(
                entry.name for entry in entries if entry.is_dir(follow_symlinks=False)
            )
    except OSError as error:
        raise GroupFilesystemError(
            f"Failed to list groups in {paths.root}: {error.strerror or error}"
        ) from error
    return [_read_group(name, paths.group_dir(name)) for name in names]


def _read_group(name: str, group_dir: Path) -> GroupListing:
    try:
        with os.scandir(group_dir) as entries:
            links = sorted(
                (entry.name, Path(os.readlink(entry.path)))
                for entry in entries
                if entry.is_symlink()
            )
    except OSError as error:
        raise GroupFilesystemError(
            f"Failed to read group {group_dir}: {error.strerror or error}"
        ) from error
    members = tuple(MembershipEntry(container_name=link, target=target) for link, target in links)
    return GroupListing(name=name, path=group_dir, members=members)
