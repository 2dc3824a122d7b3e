"""Unit tests for group directory lifecycle."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from core.errors import GroupFilesystemError, GroupNotFoundError, NotEmptyError
from registry.group_directory import GroupDirectoryManager
from registry.paths import RegistryPaths


def _manager(root: Path) -> GroupDirectoryManager:
    return GroupDirectoryManager(RegistryPaths(root))


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def test_create_group_is_idempotent(tmp_path) -> None:
    """Creating the same group twice should leave exactly one directory."""
    manager = _manager(tmp_path / "reg")

    first = manager.create_group("web")
    second = manager.create_group("web")

    assert first == second and [p.name for p in (tmp_path / "reg").iterdir()] == ["web"]


def test_create_group_builds_missing_ancestors(tmp_path) -> None:
    """Every missing segment of the registry root should be created."""
    root = tmp_path / "var" / "lib" / "lxcgroup"
    manager = _manager(root)

    group_dir = manager.create_group("web")

    assert group_dir == root / "web" and group_dir.is_dir()


def test_create_group_uses_restrictive_mode(tmp_path) -> None:
    """New directories should use mode 0755 masked by the umask."""
    manager = _manager(tmp_path / "reg")

    group_dir = manager.create_group("web")

    expected = 0o755 & ~_current_umask()
    assert stat.S_IMODE(group_dir.stat().st_mode) == expected
    assert stat.S_IMODE(group_dir.parent.stat().st_mode) == expected


def test_create_group_fails_when_root_is_a_file(tmp_path) -> None:
    """A registry root that is a regular file should surface an error."""
    root = tmp_path / "reg"
    root.write_text("not a directory", encoding="utf-8")
    manager = _manager(root)

    with pytest.raises(GroupFilesystemError):
        manager.create_group("web")


def test_create_group_fails_when_group_path_is_a_file(tmp_path) -> None:
    """An existing non-directory entry should not count as the group."""
    root = tmp_path / "reg"
    root.mkdir()
    (root / "web").write_text("stray", encoding="utf-8")
    manager = _manager(root)

    with pytest.raises(GroupFilesystemError):
        manager.create_group("web")


def test_destroy_group_removes_empty_group(tmp_path) -> None:
    """Strict destroy should remove an empty group directory."""
    manager = _manager(tmp_path)
    group_dir = manager.create_group("web")

    report = manager.destroy_group("web")

    assert not group_dir.exists() and report.removed_count == 1


def test_strict_destroy_requires_empty_group(tmp_path) -> None:
    """Strict destroy should fail and keep a group that has members."""
    manager = _manager(tmp_path)
    group_dir = manager.create_group("web")
    (group_dir / "c1").symlink_to(tmp_path / "containers" / "c1")

    with pytest.raises(NotEmptyError):
        manager.destroy_group("web", force=False)

    assert os.path.lexists(group_dir / "c1")


def test_forced_destroy_removes_group_and_members(tmp_path) -> None:
    """Forced destroy should remove every entry kind and the group itself."""
    manager = _manager(tmp_path)
    group_dir = manager.create_group("web")
    for name in ("c1", "c2"):
        (group_dir / name).symlink_to(tmp_path / "containers" / name)
    (group_dir / "notes.txt").write_text("stray", encoding="utf-8")
    (group_dir / "nested" / "deeper").mkdir(parents=True)

    report = manager.destroy_group("web", force=True)

    assert not group_dir.exists() and report.complete and report.removed_count == 6


def test_destroy_missing_group_fails(tmp_path) -> None:
    """Destroying a group that was never created should fail in both modes."""
    manager = _manager(tmp_path)

    with pytest.raises(GroupNotFoundError):
        manager.destroy_group("ghost")
    with pytest.raises(GroupNotFoundError):
        manager.destroy_group("ghost", force=True)


def test_forced_destroy_reports_surviving_group(tmp_path, monkeypatch) -> None:
    """A forced destroy that cannot empty the group should fail overall."""
    manager = _manager(tmp_path)
    group_dir = manager.create_group("web")
    (group_dir / "c1").symlink_to(tmp_path / "containers" / "c1")
    (group_dir / "c2").symlink_to(tmp_path / "containers" / "c2")
    real_unlink = os.unlink

    def fake_unlink(path, *args, **kwargs):
        if os.path.basename(path) == "c2":
            raise PermissionError(13, "Permission denied", str(path))
        return real_unlink(path, *args, **kwargs)

    monkeypatch.setattr(os, "unlink", fake_unlink)

    with pytest.raises(GroupFilesystemError):
        manager.destroy_group("web", force=True)

    assert not os.path.lexists(group_dir / "c1") and os.path.lexists(group_dir / "c2")


def test_forced_destroy_removes_deeply_nested_group(tmp_path) -> None:
    """Forced destroy should handle subtrees about a thousand levels deep."""
    manager = _manager(tmp_path / "reg")
    group_dir = manager.create_group("web")
    current = str(group_dir)
    for _ in range(1000):
        current = os.path.join(current, "d")
        os.mkdir(current)

    report = manager.destroy_group("web", force=True)

    assert not group_dir.exists() and report.complete
