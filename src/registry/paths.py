"""Canonical registry path construction.

Group directories live at ``<root>/<group>`` and membership links at
``<root>/<group>/<container>``. Names are validated as single path
segments so a crafted name can never escape the registry root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import RESERVED_PATH_SEGMENTS
from core.errors import InvalidNameError


@dataclass(frozen=True)
class RegistryPaths:
    """Path builder bound to one registry root.

    Attributes:
        root: Registry root directory shared by all groups.
    """

    root: Path

    def group_dir(self, group_name: str) -> Path:
        """Return the directory path representing a group.

        Args:
            group_name: Group identifier.

        Returns:
            Group directory path.

        Raises:
            InvalidNameError: If the name is not a safe path segment.
        """
        validate_segment(group_name, "group")
        return self.root / group_name

    def membership_link(self, group_name: str, container_name: str) -> Path:
        """Return the membership symlink path for a container in a group.

        Args:
            group_name: Group identifier.
            container_name: Container identifier.

        Returns:
            Membership link path.

        Raises:
            InvalidNameError: If either name is not a safe path segment.
        """
        validate_segment(container_name, "container")
        return self.group_dir(group_name) / container_name


def validate_segment(name: str, kind: str) -> None:
    """Reject names that cannot be used as one path segment."""
    if not name:
        raise InvalidNameError(f"Invalid {kind} name: expected a non-empty name.")
    if name in RESERVED_PATH_SEGMENTS:
        raise InvalidNameError(f"Invalid {kind} name '{name}': reserved path segment.")
    if "/" in name or "\0" in name:
        raise InvalidNameError(
            f"Invalid {kind} name '{name}': must not contain '/' or NUL characters."
        )
