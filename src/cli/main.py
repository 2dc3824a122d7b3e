"""lxc-group CLI entry points.

This module parses arguments, applies config overrides, enforces the
privilege check and maps failures onto diagnostics and exit codes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import os
import sys
from typing import Sequence

from cli.group_command import build_group_command, run_group_command
from cli.list_command import run_list_command
from core.config import GroupConfig, parse_log_level, resolve_path
from core.constants import EXIT_FAILURE, PROGRAM_NAME
from core.errors import GroupError, PrivilegeError
from core.logging_config import configure_logging, get_logger
from registry.group_client import GroupClient

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Manage groups of containers as directories of symlinks",
        epilog=(
            "commands: create GROUP | destroy GROUP [-f] | "
            "add GROUP -n NAME | del GROUP -n NAME"
        ),
    )
    parser.add_argument("verb", nargs="?", help="create, destroy, add or del")
    parser.add_argument("group", nargs="?", help="Target group name")
    parser.add_argument("-n", "--name", help="Container name for add/del")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Destroy the group together with its membership entries",
    )
    parser.add_argument("-l", "--list", action="store_true", help="List all groups")
    parser.add_argument(
        "--members",
        action="store_true",
        help="With --list, print one row per group with its members",
    )
    parser.add_argument("--root", help="Override LXC_GROUP_ROOT for this command")
    parser.add_argument("-P", "--lxcpath", help="Override LXC_GROUP_LXCPATH for this command")
    parser.add_argument("--log-level", help="Override LXC_GROUP_LOG_LEVEL for this command")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress log output below critical",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lxc-group CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(quiet=args.quiet)
    try:
        config = _build_config(args)
        configure_logging(config.log_level, quiet=args.quiet)
        ensure_privileged()
        client = GroupClient(config)
        if args.list:
            return run_list_command(client, args)
        command = build_group_command(args)
        return run_group_command(client, command)
    except GroupError as error:
        _LOGGER.error("command_failed", verb=args.verb, error_type=type(error).__name__)
        print(f"{PROGRAM_NAME}: {error}", file=sys.stderr)
        return EXIT_FAILURE


def run() -> None:
    """Console script entry point."""
    raise SystemExit(main())


def ensure_privileged() -> None:
    """Require an effective uid of root.

    Raises:
        PrivilegeError: If the process is not running as root.
    """
    if os.geteuid() != 0:
        raise PrivilegeError(f"{PROGRAM_NAME} must be run as root")


def _build_config(args: argparse.Namespace) -> GroupConfig:
    """Build config from environment with optional CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Runtime config.
    """
    config = GroupConfig.from_env()
    if args.root:
        config = replace(config, registry_root=resolve_path(args.root, "--root"))
    if args.lxcpath:
        config = replace(config, lxcpath=resolve_path(args.lxcpath, "--lxcpath"))
    if args.log_level:
        config = replace(config, log_level=parse_log_level(args.log_level))
    return config
