"""Recursive directory tree removal.

This module deletes a directory subtree bottom-up. Regular files,
symlinks and unknown entry kinds are unlinked as leaves; directories
are emptied before being removed. Children are visited in name order
and symlinks are never followed.

Two error policies are supported:

* ``strict`` stops at the first failure and raises.
* ``best_effort`` records each failure in the returned report and keeps
  going with the remaining siblings. It never raises for filesystem
  errors; callers inspect the report or the filesystem instead.

Entries that vanish while the walk is running are treated as removed
under both policies.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterator

from core.errors import GroupFilesystemError
from core.logging_config import get_logger
from core.types import ErrorPolicy, RemovalReport, SkippedEntry

_LOGGER = get_logger(__name__)


def remove_tree(path: Path, policy: ErrorPolicy) -> RemovalReport:
    """Remove ``path`` and everything beneath it.

    Args:
        path: Directory (or leaf entry) to remove.
        policy: ``"strict"`` or ``"best_effort"``.

    Returns:
        Report with removed count and skipped entries. A best-effort
        removal that could not delete ``path`` lists it as skipped.

    Raises:
        GroupFilesystemError: In strict mode on the first failure.
        ValueError: If the policy is unknown.
    """
    if policy not in ("strict", "best_effort"):
        raise ValueError(f"Unsupported error policy: {policy}")
    walker = _TreeWalk(policy)
    try:
        walker.remove_entry(path)
    except OSError as error:
        raise GroupFilesystemError(
            f"Failed to remove {error.filename or path}: {error.strerror or error}"
        ) from error
    report = RemovalReport(
        root=path,
        removed_count=walker.removed_count,
        skipped=tuple(walker.skipped),
    )
    if report.skipped:
        _LOGGER.warning(
            "tree_removal_incomplete",
            root=str(path),
            removed_count=report.removed_count,
            skipped_count=len(report.skipped),
        )
    return report


class _TreeWalk:
    """Mutable state for one removal pass."""

    def __init__(self, policy: ErrorPolicy) -> None:
        self._policy = policy
        self.removed_count = 0
        self.skipped: list[SkippedEntry] = []

    def remove_entry(self, root: Path) -> None:
        """Remove ``root`` depth-first without recursing on the call stack."""
        stack: list[tuple[Path, Iterator[Path]]] = []
        self._visit(root, stack)
        while stack:
            path, children = stack[-1]
            child = next(children, None)
            if child is not None:
                self._visit(child, stack)
                continue
            stack.pop()
            self._leave(path)

    def _visit(self, path: Path, stack: list[tuple[Path, Iterator[Path]]]) -> None:
        """Unlink a leaf, or push a directory frame to empty it first."""
        try:
            mode = os.lstat(path).st_mode
            if stat.S_ISDIR(mode):
                with os.scandir(path) as entries:
                    children = sorted(Path(entry.path) for entry in entries)
                stack.append((path, iter(children)))
                return
            os.unlink(path)
        except OSError as error:
            self._record_failure(path, error)
            return
        self.removed_count += 1

    def _leave(self, path: Path) -> None:
        try:
            os.rmdir(path)
        except OSError as error:
            self._record_failure(path, error)
            return
        self.removed_count += 1

    def _record_failure(self, path: Path, error: OSError) -> None:
        if isinstance(error, FileNotFoundError) and _vanished(path):
            # Removed by a concurrent actor between listing and unlink.
            _LOGGER.debug("tree_entry_vanished", path=str(path))
            return
        if self._policy == "strict":
            raise error
        reason = error.strerror or str(error)
        self.skipped.append(SkippedEntry(path=path, reason=reason))
        _LOGGER.warning("tree_entry_skipped", path=str(path), reason=reason)


def _vanished(path: Path) -> bool:
    return not os.path.lexists(path)
