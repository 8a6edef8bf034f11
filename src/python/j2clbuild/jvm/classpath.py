# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from typing import Iterable

from j2clbuild.jvm.coordinate import Coordinate, coordinate_sort_key
from j2clbuild.jvm.exclusion import Exclusion
from j2clbuild.util.logging import LogLevel
from j2clbuild.util.unique_list import UniqueList

logger = logging.getLogger(__name__)


def assemble_classpath(
    coordinates: Iterable[Coordinate],
    exclusions: Iterable[Exclusion] = (),
    *,
    sort: bool = False,
) -> UniqueList[Coordinate]:
    """Filter out excluded coordinates and collect the rest without duplicates.

    The first occurrence of a coordinate fixes its position, so a directly declared dependency is
    never displaced by a later transitive mention. When `sort` is set, the survivors are first put
    in group, artifact, version and classifier order.
    """
    exclusions = tuple(exclusions)
    survivors = []
    for coordinate in coordinates:
        matched = next((e for e in exclusions if e.matches(coordinate)), None)
        if matched is not None:
            logger.debug(f"Excluding {coordinate} from classpath, matched exclusion {matched}")
            continue
        survivors.append(coordinate)

    if sort:
        survivors.sort(key=coordinate_sort_key)

    classpath: UniqueList[Coordinate] = UniqueList()
    for coordinate in survivors:
        if not classpath.add(coordinate):
            LogLevel.TRACE.log(logger, f"Ignoring duplicate classpath entry {coordinate}")
    return classpath
