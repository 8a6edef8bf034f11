# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging

from j2clbuild.base.exceptions import CleanFailure
from j2clbuild.cache.cache_store import CacheStore

logger = logging.getLogger(__name__)


def clean(cache: CacheStore) -> None:
    """Delete all build products, creating a clean workspace.

    Must not run while any build step is reading or writing the same cache.
    """
    logger.info(f"Cleaning {cache.root}")
    try:
        cache.remove_all()
    except OSError as e:
        raise CleanFailure(cache.root, e) from e
    logger.info(f"Cleaned {cache.root}")
