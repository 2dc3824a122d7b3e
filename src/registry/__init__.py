"""Filesystem-backed group registry.

This package keeps group membership as directories and symlinks.
It owns path building, group lifecycle, membership, and listing.
"""
