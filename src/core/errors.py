"""Group registry exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure class maps onto one user-facing diagnostic at the CLI.
"""

from __future__ import annotations


class GroupError(Exception):
    """Base exception for all group registry failures."""


class GroupConfigError(GroupError):
    """Raised for invalid runtime configuration."""


class PrivilegeError(GroupError):
    """Raised when the process lacks the privilege to mutate the registry."""


class UsageError(GroupError):
    """Raised for unrecognized verbs or malformed arguments."""


class InvalidNameError(UsageError):
    """Raised when a group or container name cannot form a safe path segment."""


class ContainerNotFoundError(GroupError):
    """Raised when a container is not defined by the container provider."""


class AlreadyExistsError(GroupError):
    """Raised when a creation would overwrite an existing registry entry."""


class NotEmptyError(GroupError):
    """Raised when a strict group destroy finds remaining membership entries."""


class GroupFilesystemError(GroupError):
    """Raised for permission, I/O and other filesystem failures."""


class GroupNotFoundError(GroupFilesystemError):
    """Raised when a group directory does not exist."""


class MembershipNotFoundError(GroupFilesystemError):
    """Raised when a membership entry does not exist in a group."""
