"""Filesystem routines."""

from .directory import directory_size, scan_directory

__all__ = ["directory_size", "scan_directory"]
