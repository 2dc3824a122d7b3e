"""Command-line surface for lxc-group.

This package parses arguments and dispatches group verbs
onto the registry SDK client.
"""
