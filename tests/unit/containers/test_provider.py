"""Unit tests for the LXC path container provider."""

from __future__ import annotations

import pytest

from containers.provider import LxcPathProvider
from core.errors import InvalidNameError


def test_lookup_reports_defined_container(tmp_path) -> None:
    """A container directory with a config file should exist."""
    (tmp_path / "c1").mkdir()
    (tmp_path / "c1" / "config").write_text("lxc.uts.name = c1\n", encoding="utf-8")

    handle = LxcPathProvider(tmp_path).lookup("c1")

    assert handle.exists and handle.path == tmp_path / "c1" and handle.name == "c1"


def test_lookup_without_config_is_not_defined(tmp_path) -> None:
    """A bare directory without a config file should not count as a container."""
    (tmp_path / "c1").mkdir()

    handle = LxcPathProvider(tmp_path).lookup("c1")

    assert not handle.exists


def test_lookup_of_missing_container_keeps_canonical_path(tmp_path) -> None:
    """Missing containers should still resolve to their would-be path."""
    handle = LxcPathProvider(tmp_path).lookup("ghost")

    assert handle.path == tmp_path / "ghost" and not handle.exists


def test_lookup_rejects_path_traversal(tmp_path) -> None:
    """Container names should be single path segments."""
    with pytest.raises(InvalidNameError):
        LxcPathProvider(tmp_path).lookup("../etc")
