"""CLI listing of existing groups."""

from __future__ import annotations

import argparse
import shutil

from core.errors import UsageError
from core.types import GroupListing
from registry.group_client import GroupClient

_COLUMN_GAP = 2


def run_list_command(client: GroupClient, args: argparse.Namespace) -> int:
    """Print group names in columns, or one row per group with members."""
    if args.verb or args.group or args.name or args.force:
        raise UsageError("--list does not take a command, group, container or --force")
    groups = client.list_groups()
    if args.members:
        for group in groups:
            print(_member_row(group))
        return 0
    width = shutil.get_terminal_size().columns
    for line in format_columns([group.name for group in groups], width):
        print(line)
    return 0


def format_columns(names: list[str], width: int) -> list[str]:
    """Lay names out column-major, ``ls`` style, within ``width``.

    Args:
        names: Names in display order.
        width: Terminal width in characters.

    Returns:
        Rendered lines, without trailing padding.
    """
    if not names:
        return []
    cell = max(len(name) for name in names) + _COLUMN_GAP
    column_count = max(1, (width + _COLUMN_GAP) // cell)
    row_count = -(-len(names) // column_count)
    lines = []
    for row in range(row_count):
        cells = names[row::row_count]
        lines.append("".join(name.ljust(cell) for name in cells).rstrip())
    return lines


def _member_row(group: GroupListing) -> str:
    members = ",".join(entry.container_name for entry in group.members)
    return f"{group.name}\t{members or '-'}"
