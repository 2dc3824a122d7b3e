"""Container provider integration.

This package resolves container names to read-only handles.
The registry never creates, mutates, or destroys containers.
"""
