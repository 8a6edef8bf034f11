# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence


class J2clBuildException(Exception):
    """Base exception type for j2clbuild."""


class InvalidCoordinate(J2clBuildException, ValueError):
    """Indicates a coordinate that is missing part of its identity.

    :API: public
    """


class InvalidCoordinateString(InvalidCoordinate):
    """The coordinate string being parsed is invalid or malformed."""

    def __init__(self, coords: str) -> None:
        super().__init__(f"Received invalid artifact coordinates: {coords}")


class InvalidExclusion(J2clBuildException, ValueError):
    """An exclusion rule without both a group and an artifact."""


class CacheRemovalError(J2clBuildException, OSError):
    """Raised when some part of a cache directory tree could not be deleted.

    All individual failures are collected so the caller sees a single error for the whole root.
    """

    def __init__(self, root: str | Path, failed_paths: Sequence[str]) -> None:
        self.root = os.fspath(root)
        self.failed_paths = tuple(failed_paths)
        count = len(self.failed_paths)
        super().__init__(
            f"Failed to remove {count} path{'' if count == 1 else 's'} under {self.root}: "
            + ", ".join(self.failed_paths)
        )


class CleanFailure(J2clBuildException):
    """The clean goal failed, leaving the cache in an unknown state.

    :API: public
    """

    def __init__(self, root: str | Path, cause: BaseException) -> None:
        self.root = os.fspath(root)
        self.cause = cause
        super().__init__(f"Failed to clean {self.root}: {cause}")


class ConfigError(J2clBuildException):
    """Indicates an unreadable or invalid configuration file."""
