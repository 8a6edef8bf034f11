# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from j2clbuild.util.unique_list import UniqueList


class SourcesKind(Enum):
    """Which of a module's source trees to compile."""

    MAIN = "main"
    TEST = "test"

    @classmethod
    def from_option(cls, text: str) -> SourcesKind:
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown sources kind {text!r}, expected one of {valid}")


@dataclass(frozen=True)
class ModuleDescriptor:
    """The source and resource directories a module declares.

    Paths may be absolute, or relative to the module's base directory.
    """

    main_source_roots: tuple[str, ...] = ()
    test_source_roots: tuple[str, ...] = ()
    main_resource_roots: tuple[str, ...] = ()
    test_resource_roots: tuple[str, ...] = ()


def roots_for(kind: SourcesKind, descriptor: ModuleDescriptor) -> tuple[str, ...]:
    if kind is SourcesKind.MAIN:
        return descriptor.main_source_roots
    if kind is SourcesKind.TEST:
        return descriptor.test_source_roots
    raise ValueError(f"Unhandled sources kind: {kind!r}")


def resource_roots_for(kind: SourcesKind, descriptor: ModuleDescriptor) -> tuple[str, ...]:
    if kind is SourcesKind.MAIN:
        return descriptor.main_resource_roots
    if kind is SourcesKind.TEST:
        return descriptor.test_resource_roots
    raise ValueError(f"Unhandled sources kind: {kind!r}")


def resolve_source_roots(
    kind: SourcesKind, descriptor: ModuleDescriptor, base_dir: str | Path
) -> UniqueList[Path]:
    """The existing source directories, then resource directories, of the selected kind.

    Relative entries are resolved against `base_dir`. Entries that do not exist on disk, and
    repeats, are dropped.
    """
    resolved: UniqueList[Path] = UniqueList()
    for root in (*roots_for(kind, descriptor), *resource_roots_for(kind, descriptor)):
        path = Path(root) if os.path.isabs(root) else Path(base_dir, root)
        if path.is_dir():
            resolved.add(path)
    return resolved
