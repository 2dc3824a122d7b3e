"""Command dispatcher for group verbs.

Verbs resolve through an explicit table; the only alias is the
``delete`` spelling of ``del``. Argument shape is validated before any
container lookup or filesystem mutation happens.
"""

from __future__ import annotations

import argparse
from typing import Callable

from core.errors import UsageError
from core.types import GroupCommand, GroupVerb
from registry.group_client import GroupClient

VERB_TABLE: dict[str, GroupVerb] = {
    "create": "create",
    "destroy": "destroy",
    "add": "add",
    "del": "del",
    "delete": "del",
}
CONTAINER_VERBS: tuple[GroupVerb, ...] = ("add", "del")


def resolve_verb(token: str | None) -> GroupVerb:
    """Map a command token to its canonical verb.

    Raises:
        UsageError: If the token is missing or not in the verb table.
    """
    accepted = ", ".join(sorted(VERB_TABLE))
    if not token:
        raise UsageError(f"Missing command: expected one of {accepted} (see --help)")
    verb = VERB_TABLE.get(token)
    if verb is None:
        raise UsageError(f"Unknown command '{token}': expected one of {accepted} (see --help)")
    return verb


def build_group_command(args: argparse.Namespace) -> GroupCommand:
    """Validate parsed CLI args into one dispatchable command.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated command.

    Raises:
        UsageError: If the verb or argument combination is invalid.
    """
    verb = resolve_verb(args.verb)
    if args.members:
        raise UsageError("--members is only valid with --list")
    if not args.group:
        raise UsageError(f"'{verb}' requires a group name")
    if verb in CONTAINER_VERBS and not args.name:
        raise UsageError(f"'{verb}' requires a container name (-n NAME)")
    if verb not in CONTAINER_VERBS and args.name:
        raise UsageError(f"'{verb}' does not take a container name")
    if args.force and verb != "destroy":
        raise UsageError("--force is only valid with destroy")
    return GroupCommand(
        verb=verb,
        group_name=args.group,
        container_name=args.name,
        force=args.force,
    )


def run_group_command(client: GroupClient, command: GroupCommand) -> int:
    """Dispatch one command to its registry operation.

    Args:
        client: SDK client.
        command: Validated command.

    Returns:
        Exit code.
    """
    handlers: dict[GroupVerb, Callable[[GroupClient, GroupCommand], None]] = {
        "create": _run_create,
        "destroy": _run_destroy,
        "add": _run_add,
        "del": _run_del,
    }
    handlers[command.verb](client, command)
    return 0


def _run_create(client: GroupClient, command: GroupCommand) -> None:
    group_dir = client.create_group(command.group_name)
    print(group_dir)


def _run_destroy(client: GroupClient, command: GroupCommand) -> None:
    report = client.destroy_group(command.group_name, force=command.force)
    print(report.root)
    for entry in report.skipped:
        print(f"skipped={entry.path}\t{entry.reason}")


def _run_add(client: GroupClient, command: GroupCommand) -> None:
    container = client.container(_container_name(command))
    link_path = client.add_membership(command.group_name, container)
    print(f"{link_path} -> {container.path}")


def _run_del(client: GroupClient, command: GroupCommand) -> None:
    container = client.container(_container_name(command))
    link_path = client.remove_membership(command.group_name, container)
    print(link_path)


def _container_name(command: GroupCommand) -> str:
    if command.container_name is None:
        raise UsageError(f"'{command.verb}' requires a container name (-n NAME)")
    return command.container_name
