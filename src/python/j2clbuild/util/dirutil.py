# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

from j2clbuild.base.exceptions import CacheRemovalError

logger = logging.getLogger(__name__)


def safe_mkdir(directory: str | Path) -> None:
    """Ensure a directory is present.

    If it's not there, create it.  If it is, no-op.

    :API: public
    """
    try:
        os.makedirs(directory)
    except OSError as e:
        if e.errno != errno.EEXIST:
            raise


def safe_delete(filename: str | Path) -> None:
    """Delete a file safely.

    If it's not present, no-op.
    """
    try:
        os.unlink(filename)
    except OSError as e:
        if e.errno != errno.ENOENT:
            raise


def remove_all(root: str | Path) -> None:
    """Delete every file and directory under `root`, and then `root` itself.

    An absent root is a no-op. A symlinked root has only the link removed. Deletion carries on
    past individual failures so that as much as possible is removed, and then a single
    `CacheRemovalError` naming `root` and every path that could not be deleted is raised, with the
    first underlying `OSError` as its cause.

    :API: public
    """
    root = os.fspath(root)
    if os.path.islink(root):
        safe_delete(root)
        return
    if not os.path.lexists(root):
        return
    if not os.path.isdir(root):
        safe_delete(root)
        return

    failures: list[tuple[str, OSError]] = []

    def record(path: str, error: OSError) -> None:
        if error.errno == errno.ENOENT:
            # Vanished underneath us, which is what we wanted anyway.
            return
        logger.debug(f"Failed to remove {path}: {error}")
        failures.append((path, error))

    def walk_error(error: OSError) -> None:
        record(error.filename or root, error)

    def has_failed_beneath(directory: str) -> bool:
        prefix = directory + os.sep
        return any(path == directory or path.startswith(prefix) for path, _ in failures)

    def remove_dir(path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            # A directory left non-empty by an earlier failure is not a failure of its own.
            if not has_failed_beneath(path):
                record(path, e)

    for dirpath, dirnames, filenames in os.walk(root, topdown=False, onerror=walk_error):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            try:
                os.unlink(path)
            except OSError as e:
                record(path, e)
        for dirname in dirnames:
            path = os.path.join(dirpath, dirname)
            if os.path.islink(path):
                # Never follow a link out of the tree.
                try:
                    os.unlink(path)
                except OSError as e:
                    record(path, e)
            else:
                remove_dir(path)

    remove_dir(root)

    if failures:
        raise CacheRemovalError(root, [path for path, _ in failures]) from failures[0][1]
