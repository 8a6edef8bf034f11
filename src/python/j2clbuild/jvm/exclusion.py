# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from j2clbuild.base.exceptions import InvalidExclusion
from j2clbuild.jvm.coordinate import Coordinate


@dataclass(frozen=True)
class Exclusion:
    """Excludes every version and classifier of the given `group` and `artifact`.

    :API: public
    """

    group: str
    artifact: str

    def __post_init__(self) -> None:
        if not (self.group and self.group.strip()) or not (self.artifact and self.artifact.strip()):
            raise InvalidExclusion(
                f"An exclusion requires both a group and an artifact, got {self.group!r} and "
                f"{self.artifact!r}"
            )

    @classmethod
    def from_coord_str(cls, s: str) -> Exclusion:
        group, sep, artifact = s.strip().partition(":")
        if not sep or ":" in artifact:
            raise InvalidExclusion(f"Expected an exclusion of the form group:artifact, got {s!r}")
        return cls(group, artifact)

    def matches(self, coordinate: Coordinate | None) -> bool:
        return (
            coordinate is not None
            and self.group == coordinate.group
            and self.artifact == coordinate.artifact
        )

    def to_coord_str(self) -> str:
        return f"{self.group}:{self.artifact}"

    def __str__(self) -> str:
        return self.to_coord_str()


def is_excluded(exclusions: Iterable[Exclusion], coordinate: Coordinate | None) -> bool:
    """True if any of `exclusions` matches `coordinate`."""
    return any(exclusion.matches(coordinate) for exclusion in exclusions)
