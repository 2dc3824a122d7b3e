"""Public SDK surface for lxc-group.

This module provides a stable import path for library users.
It re-exports the primary client, provider contract and typed models.
"""

from __future__ import annotations

from containers.provider import ContainerProvider, LxcPathProvider
from core.config import GroupConfig
from core.types import (
    ContainerHandle,
    ErrorPolicy,
    GroupListing,
    MembershipEntry,
    RemovalReport,
)
from registry.group_client import GroupClient
from registry.paths import RegistryPaths
from registry.tree_remover import remove_tree

__all__ = [
    "ContainerHandle",
    "ContainerProvider",
    "ErrorPolicy",
    "GroupClient",
    "GroupConfig",
    "GroupListing",
    "LxcPathProvider",
    "MembershipEntry",
    "RegistryPaths",
    "RemovalReport",
    "remove_tree",
]
