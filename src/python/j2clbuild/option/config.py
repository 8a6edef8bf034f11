# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import toml

from j2clbuild.base.exceptions import ConfigError, InvalidExclusion
from j2clbuild.jvm.exclusion import Exclusion
from j2clbuild.util.logging import LogLevel

logger = logging.getLogger(__name__)

GLOBAL_SECTION = "GLOBAL"
DEFAULT_CACHE_DIR = os.path.join("%(buildroot)s", "target", "j2clbuild-cache")

_VALID_OPTIONS = frozenset({"cache_dir", "level", "excludes"})
_INTERPOLATION_RE = re.compile(r"%\((?P<name>[a-zA-Z_0-9]+)\)s")


@dataclass(frozen=True)
class BuildConfig:
    """The options for one build session, as read from a TOML file such as:

        [GLOBAL]
        cache_dir = "%(buildroot)s/target/j2clbuild-cache"
        level = "info"
        excludes = ["com.google.jsinterop:base"]

    `%(buildroot)s` and `%(homedir)s` are substituted in string values.
    """

    buildroot: Path
    cache_dir: Path
    level: LogLevel = LogLevel.INFO
    excludes: tuple[Exclusion, ...] = ()

    @classmethod
    def defaults(cls, buildroot: str | Path) -> BuildConfig:
        return cls.from_values({}, buildroot=buildroot)

    @classmethod
    def load(cls, path: str | Path, *, buildroot: str | Path | None = None) -> BuildConfig:
        """Loads config from the given TOML file.

        The buildroot defaults to the directory containing the file.
        """
        path = Path(path)
        try:
            content = path.read_text()
        except OSError as e:
            raise ConfigError(f"Config file {path} could not be read: {e}") from e
        try:
            values = toml.loads(content)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Config file {path} could not be parsed as TOML:\n  {e}") from e

        logger.debug(f"Loaded config from {path}")
        return cls.from_values(
            values.get(GLOBAL_SECTION, {}),
            buildroot=buildroot if buildroot is not None else path.parent,
            source=str(path),
        )

    @classmethod
    def from_values(
        cls,
        values: Mapping[str, Any],
        *,
        buildroot: str | Path,
        source: str = "<defaults>",
    ) -> BuildConfig:
        unknown = sorted(set(values) - _VALID_OPTIONS)
        if unknown:
            raise ConfigError(
                f"Invalid option(s) in [{GLOBAL_SECTION}] of {source}: {', '.join(unknown)}. "
                f"Valid options are: {', '.join(sorted(_VALID_OPTIONS))}"
            )

        seed_values = {"buildroot": os.fspath(buildroot), "homedir": os.path.expanduser("~")}

        cache_dir = _interpolate(
            _expect(values, "cache_dir", str, DEFAULT_CACHE_DIR, source), seed_values, source
        )
        level_text = _expect(values, "level", str, LogLevel.INFO.value, source)
        raw_excludes = _expect(values, "excludes", list, [], source)

        try:
            level = LogLevel.from_option(level_text)
            excludes = tuple(Exclusion.from_coord_str(str(exclude)) for exclude in raw_excludes)
        except (ValueError, InvalidExclusion) as e:
            raise ConfigError(f"Invalid value in {source}: {e}") from e

        return cls(
            buildroot=Path(buildroot),
            cache_dir=Path(cache_dir),
            level=level,
            excludes=excludes,
        )

    def with_overrides(
        self, *, cache_dir: str | Path | None = None, level: LogLevel | None = None
    ) -> BuildConfig:
        """Returns a copy with any command line values overlaid."""
        return BuildConfig(
            buildroot=self.buildroot,
            cache_dir=Path(cache_dir) if cache_dir is not None else self.cache_dir,
            level=level if level is not None else self.level,
            excludes=self.excludes,
        )


def _expect(values: Mapping[str, Any], option: str, expected: type, default: Any, source: str):
    value = values.get(option, default)
    if not isinstance(value, expected):
        raise ConfigError(
            f"Option {option} in {source} must be a {expected.__name__}, got {value!r}"
        )
    return value


def _interpolate(value: str, seed_values: Mapping[str, str], source: str) -> str:
    def substitute(match: re.Match) -> str:
        name = match.group("name")
        if name not in seed_values:
            raise ConfigError(f"Unknown interpolation %({name})s in {source}")
        return seed_values[name]

    return _INTERPOLATION_RE.sub(substitute, value)
