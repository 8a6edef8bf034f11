# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from colors import green, red

from j2clbuild.base.exceptions import CleanFailure, ConfigError, InvalidCoordinate
from j2clbuild.cache.cache_store import CacheStore
from j2clbuild.core.clean import clean
from j2clbuild.jvm.classpath import assemble_classpath
from j2clbuild.jvm.coordinate import Coordinate
from j2clbuild.option.config import BuildConfig
from j2clbuild.util.logging import LogLevel, configure_logging

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "j2clbuild.toml"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="j2clbuild")
    parser.add_argument(
        "--config",
        help=f"The TOML config file. Defaults to ./{CONFIG_FILE_NAME} if present.",
    )
    parser.add_argument("--cache-dir", help="Overrides the configured cache directory.")
    parser.add_argument(
        "--level",
        type=LogLevel.from_option,
        help="The log level: one of " + ", ".join(level.value for level in LogLevel),
    )
    goals = parser.add_subparsers(dest="goal", required=True)
    goals.add_parser("clean", help="Delete the whole build cache.")
    classpath = goals.add_parser(
        "classpath", help="Print the deduplicated classpath for the given coordinates."
    )
    classpath.add_argument("coordinates", nargs="+", metavar="group:artifact:version")
    classpath.add_argument(
        "--sort", action="store_true", help="Order entries by group, artifact and version."
    )
    return parser


def load_config(options: argparse.Namespace) -> BuildConfig:
    if options.config:
        config = BuildConfig.load(options.config)
    elif os.path.isfile(CONFIG_FILE_NAME):
        config = BuildConfig.load(CONFIG_FILE_NAME, buildroot=os.getcwd())
    else:
        config = BuildConfig.defaults(os.getcwd())
    return config.with_overrides(cache_dir=options.cache_dir, level=options.level)


def run_clean(config: BuildConfig) -> None:
    clean(CacheStore(config.cache_dir))
    print(green(f"Cleaned {config.cache_dir}"))


def run_classpath(config: BuildConfig, coordinates: Sequence[str], sort: bool) -> None:
    entries = assemble_classpath(
        (Coordinate.from_coord_str(c) for c in coordinates), config.excludes, sort=sort
    )
    for entry in entries:
        print(entry)


def main(argv: Sequence[str] | None = None) -> int:
    options = create_parser().parse_args(argv)
    try:
        config = load_config(options)
        configure_logging(config.level)
        if options.goal == "clean":
            run_clean(config)
        else:
            run_classpath(config, options.coordinates, options.sort)
    except (CleanFailure, ConfigError, InvalidCoordinate) as e:
        logger.debug("Goal failed", exc_info=True)
        print(red(str(e)), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
