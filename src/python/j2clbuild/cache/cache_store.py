# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from j2clbuild.base.exceptions import CacheRemovalError
from j2clbuild.jvm.coordinate import Coordinate
from j2clbuild.util.dirutil import remove_all, safe_mkdir

logger = logging.getLogger(__name__)


class CacheStore:
    """The directory holding every cached build output of a workspace.

    Each coordinate's outputs live in their own entry directory beneath the root, named after the
    coordinate and the hash of its inputs. The root as a whole is the only unit of invalidation.

    :API: public
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def entry_dir(self, coordinate: Coordinate, hash: str) -> Path:
        if not hash:
            raise ValueError(f"A hash is required for the cache entry of {coordinate}")
        return self._root / f"{coordinate.directory_safe_name}-{hash}"

    def create_entry(self, coordinate: Coordinate, hash: str) -> Path:
        entry = self.entry_dir(coordinate, hash)
        safe_mkdir(entry)
        return entry

    def remove_all(self) -> None:
        """Delete the root and everything beneath it.

        The root is first renamed to a sibling trash directory, so that no partially deleted entry
        is ever visible under the root, and the trash is then deleted. Trash left behind by an
        earlier failed removal is deleted too. Removing an absent root succeeds.

        :raises: CacheRemovalError naming the root if anything could not be deleted.
        """
        root = self._root
        absolute = Path(os.path.abspath(root))
        prefix = f".{absolute.name}.trash-"
        targets = []
        if absolute.parent.is_dir():
            targets = sorted(p for p in absolute.parent.iterdir() if p.name.startswith(prefix))

        if os.path.lexists(absolute):
            trash = absolute.with_name(f"{prefix}{uuid.uuid4().hex}")
            try:
                # A plain rename fails across devices instead of copying the tree.
                os.rename(absolute, trash)
            except OSError as e:
                logger.debug(f"Could not move {root} aside ({e}), deleting it in place")
                trash = absolute
            targets.append(trash)
        elif not targets:
            logger.debug(f"Cache {root} does not exist, nothing to remove")
            return

        failed_paths: list[str] = []
        first_error: BaseException | None = None
        for target in targets:
            logger.debug(f"Deleting {target}")
            try:
                remove_all(target)
            except CacheRemovalError as e:
                failed_paths.extend(e.failed_paths)
                if first_error is None:
                    first_error = e.__cause__
        if failed_paths:
            raise CacheRemovalError(root, failed_paths) from first_error

    def __repr__(self) -> str:
        return f"CacheStore(root={os.fspath(self._root)!r})"
