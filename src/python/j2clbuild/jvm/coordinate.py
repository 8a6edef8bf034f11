# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from j2clbuild.base.exceptions import InvalidCoordinate, InvalidCoordinateString

# Separates version from classifier in the tie-break key. NUL is not legal in either field.
_TIE_BREAK_SEPARATOR = "\0"


@dataclass(frozen=True)
class Coordinate:
    """A single Maven-style coordinate identifying a module or a resolved dependency.

    Two coordinates are the same classpath entry if group, artifact, version and classifier all
    match. Packaging only affects rendering. Ordering is deliberately not defined on the class:
    use `compare_coordinates` or `coordinate_sort_key`.

    String form, following Aether's DefaultArtifact:

        ${group}:${artifact}[:${packaging}[:${classifier}]]:${version}
    """

    REGEX = re.compile("([^: ]+):([^: ]+)(:([^: ]*)(:([^: ]+))?)?:([^: ]+)")

    group: str
    artifact: str
    version: str = ""
    classifier: str = ""
    packaging: str = field(default="jar", compare=False)

    def __post_init__(self) -> None:
        if not self.group or not self.group.strip():
            raise InvalidCoordinate(f"Coordinate is missing a group: {self!r}")
        if not self.artifact or not self.artifact.strip():
            raise InvalidCoordinate(f"Coordinate is missing an artifact: {self!r}")
        if self.version is None:
            object.__setattr__(self, "version", "")
        if self.classifier is None:
            object.__setattr__(self, "classifier", "")
        if not self.packaging:
            object.__setattr__(self, "packaging", "jar")
        if _TIE_BREAK_SEPARATOR in self.version or _TIE_BREAK_SEPARATOR in self.classifier:
            raise InvalidCoordinate(f"Coordinate contains a NUL character: {self!r}")

    @classmethod
    def from_coord_str(cls, s: str) -> Coordinate:
        """Parses from a coordinate string with optional `packaging` and `classifier` parts.

        See also: `to_coord_str`.
        """
        parts = cls.REGEX.fullmatch(s.strip())
        if parts is None:
            raise InvalidCoordinateString(s)
        return cls(
            group=parts.group(1),
            artifact=parts.group(2),
            version=parts.group(7),
            classifier=parts.group(6) or "",
            packaging=parts.group(4) or "jar",
        )

    def to_coord_str(self, versioned: bool = True) -> str:
        """Renders the form `from_coord_str` parses.

        :raises: InvalidCoordinate if `versioned` is requested of a coordinate with no version.
        """
        unversioned = f"{self.group}:{self.artifact}"
        if self.classifier:
            unversioned += f":{self.packaging}:{self.classifier}"
        elif self.packaging != "jar":
            unversioned += f":{self.packaging}"

        if versioned:
            if not self.version:
                raise InvalidCoordinate(f"Coordinate {unversioned} has no version to render")
            return f"{unversioned}:{self.version}"
        return unversioned

    @property
    def tie_break_key(self) -> str:
        """Version and classifier combined into one comparable string.

        Only consulted once group and artifact compare equal.
        """
        return f"{self.version}{_TIE_BREAK_SEPARATOR}{self.classifier}"

    @property
    def directory_safe_name(self) -> str:
        """These coordinates as a single directory name.

        Components are joined with `-`, and any `:` inside a component becomes `--`.
        """
        components = [self.group, self.artifact, self.packaging]
        if self.classifier:
            components.append(self.classifier)
        if self.version:
            components.append(self.version)
        return "-".join(component.replace(":", "--") for component in components)

    def sources(self) -> Coordinate:
        """The coordinate of the sources artifact published alongside this one."""
        return replace(self, classifier="sources")

    def __str__(self) -> str:
        return self.to_coord_str(versioned=bool(self.version))


def coordinate_sort_key(coordinate: Coordinate) -> tuple[str, str, str]:
    """A key for `sorted()` that orders by group, then artifact, then version and classifier."""
    return (coordinate.group, coordinate.artifact, coordinate.tie_break_key)


def compare_coordinates(left: Coordinate, right: Coordinate) -> int:
    """A three-way comparison: negative, zero or positive as `left` sorts before, level with or
    after `right`."""
    left_key = coordinate_sort_key(left)
    right_key = coordinate_sort_key(right)
    for left_part, right_part in zip(left_key, right_key):
        if left_part != right_part:
            return -1 if left_part < right_part else 1
    return 0
