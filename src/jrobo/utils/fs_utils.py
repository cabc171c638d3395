"""Filesystem utility functions for the project.

Directory copying with top-level exclusions, destructive cleanup and age checks
used when provisioning disposable test sites.
"""

# all annotations are stored as strings and not evaluated at runtime, which can provide a minor performance improvement
from __future__ import annotations

import os
import shutil
import time
import typing as t

from jrobo.errors import SourceUnreadableError, UndeletableDirectoryError

SLASH = "/"
DIR_MODE = 0o755


def copy_tree(source_dir: str, dest_dir: str, exclude: t.Iterable[str] = ()) -> None:
    """Copy the contents of ``source_dir`` into ``dest_dir``.

    Entries named in ``exclude`` are skipped, but only directly under ``source_dir``;
    deeper directories are copied whole. ``dest_dir`` and missing parents are created,
    existing unrelated content in it is left alone.

    Args:
        source_dir: Directory to copy from.
        dest_dir: Directory to copy into.
        exclude: Top-level entry names to skip (exact match).

    Raises:
        SourceUnreadableError: ``source_dir`` cannot be listed.
    """
    exclude = frozenset(exclude)
    try:
        entries = list(os.scandir(source_dir))
    except OSError as e:
        raise SourceUnreadableError(source_dir, e) from e

    os.makedirs(dest_dir, mode=DIR_MODE, exist_ok=True)

    for entry in entries:
        if entry.name in exclude:
            continue
        dest = os.path.join(dest_dir, entry.name)
        if entry.is_dir(follow_symlinks=False):
            shutil.copytree(entry.path, dest, symlinks=True, dirs_exist_ok=True)
        else:
            shutil.copy2(entry.path, dest, follow_symlinks=False)


def remove_tree(path: str) -> None:
    """Delete a directory tree if it exists.

    Raises:
        UndeletableDirectoryError: the tree exists but could not be (fully) deleted.
    """
    if not os.path.lexists(path):
        return
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise UndeletableDirectoryError(path, e) from e


def age_seconds(path: str, now: float | None = None) -> float:
    """Seconds since ``path`` was last modified."""
    return (time.time() if now is None else now) - os.path.getmtime(path)


def is_stale(path: str, max_age: float, now: float | None = None) -> bool:
    """True if ``path`` is not a directory or is older than ``max_age`` seconds."""
    if not os.path.isdir(path):
        return True
    return age_seconds(path, now) > max_age


def windows_path(path: str) -> str:
    """Return the path with forward slashes turned into Windows separators."""
    return path.replace(SLASH, "\\")
