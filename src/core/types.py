"""Shared typed models.

This module defines immutable data models used by the registry,
container provider, and CLI layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

ErrorPolicy = Literal["strict", "best_effort"]
GroupVerb = Literal["create", "destroy", "add", "del"]


@dataclass(frozen=True)
class ContainerHandle:
    """Read-only view of a container owned by the container provider.

    Attributes:
        name: Container name, also used as the membership entry name.
        path: Canonical on-disk storage path of the container.
        exists: Whether the provider reports the container as defined.
    """

    name: str
    path: Path
    exists: bool


@dataclass(frozen=True)
class SkippedEntry:
    """One entry a best-effort removal could not delete."""

    path: Path
    reason: str


@dataclass(frozen=True)
class RemovalReport:
    """Outcome of one recursive tree removal.

    Attributes:
        root: Path the removal started from.
        removed_count: Number of entries removed, the root included.
        skipped: Entries left behind in best-effort mode.
    """

    root: Path
    removed_count: int
    skipped: tuple[SkippedEntry, ...] = ()

    @property
    def complete(self) -> bool:
        """Whether every entry below the root was removed."""
        return not self.skipped


@dataclass(frozen=True)
class MembershipEntry:
    """A container's membership link inside a group directory."""

    container_name: str
    target: Path


@dataclass(frozen=True)
class GroupListing:
    """One group directory and its membership entries."""

    name: str
    path: Path
    members: tuple[MembershipEntry, ...]


@dataclass(frozen=True)
class GroupCommand:
    """Parsed, validated request for one dispatched operation.

    Attributes:
        verb: Canonical verb resolved from the command token.
        group_name: Target group name.
        container_name: Container name for add/del.
        force: Recursive best-effort destroy when true.
    """

    verb: GroupVerb
    group_name: str
    container_name: str | None = None
    force: bool = False
