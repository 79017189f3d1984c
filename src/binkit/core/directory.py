"""
Recursive directory size accumulation.

Two policies are supported:

- ``regular_files`` sums the size of regular files only. Directories,
  symlinks and special files add nothing. This is the default.
- ``all_entries`` sums the ``lstat`` size of every entry below the root,
  directories and symlinks included.

Symlinks are never followed, so a link cycle cannot make the walk loop.
Errors never propagate: each failing entry is logged, recorded on the
report and skipped, and the walk carries on with whatever is left.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

from binkit.config import get_settings
from binkit.exceptions import DirectoryAccessError
from binkit.models.schemas import SizePolicy, SizeReport, WalkError

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _list_entries(path: Union[str, bytes]) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        raise DirectoryAccessError(path, "scandir", e) from e


def _classify(entry: os.DirEntry) -> Tuple[bool, bool]:
    try:
        return entry.is_dir(follow_symlinks=False), entry.is_file(follow_symlinks=False)
    except OSError as e:
        raise DirectoryAccessError(entry.path, "classify", e) from e


def _entry_size(entry: os.DirEntry) -> int:
    try:
        return entry.stat(follow_symlinks=False).st_size
    except OSError as e:
        raise DirectoryAccessError(entry.path, "stat", e) from e


def _record(report: SizeReport, error: DirectoryAccessError) -> None:
    report.errors.append(
        WalkError(
            path=os.fsdecode(error.path),
            operation=error.operation,
            message=str(error.cause),
        )
    )


def scan_directory(root: PathLike, policy: Optional[SizePolicy] = None) -> SizeReport:
    """
    Walk a directory tree and accumulate entry sizes.

    Args:
        root: Directory to walk
        policy: Size policy (defaults to Settings.size_policy)

    Returns:
        SizeReport: Best-effort total plus every error that was skipped
    """
    if policy is None:
        policy = get_settings().size_policy
    policy = SizePolicy(policy)

    root_path = os.fspath(root)
    report = SizeReport(root=os.fsdecode(root_path), policy=policy)

    pending = [root_path]
    while pending:
        current = pending.pop()
        try:
            entries = _list_entries(current)
        except DirectoryAccessError as e:
            if current == root_path:
                logger.error("Error iterating directory %s: %s", current, e.cause)
            else:
                logger.warning("Skipping unreadable directory %s: %s", current, e.cause)
            _record(report, e)
            continue

        for entry in entries:
            try:
                is_dir, is_file = _classify(entry)
                if is_dir:
                    report.directory_count += 1
                    pending.append(entry.path)
                if is_file or policy is SizePolicy.ALL_ENTRIES:
                    report.total_bytes += _entry_size(entry)
                if is_file:
                    report.file_count += 1
            except DirectoryAccessError as e:
                logger.warning("Error during %s of %s: %s", e.operation, e.path, e.cause)
                _record(report, e)

    logger.debug(
        "Walked %s: %d bytes in %d files, %d directories, %d errors",
        root_path, report.total_bytes, report.file_count,
        report.directory_count, len(report.errors),
    )
    return report


def directory_size(root: PathLike, policy: Optional[SizePolicy] = None) -> int:
    """
    Compute the total size in bytes of everything under a directory.

    Never raises for filesystem errors; see scan_directory for the error list.
    """
    return scan_directory(root, policy).total_bytes
