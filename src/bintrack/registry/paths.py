"""Default install directory resolution from a PATH-like string."""

from __future__ import annotations

import logging
import os
import stat

logger = logging.getLogger(__name__)

SEARCH_PATH_SEPARATOR = ":"


def resolve_default_path(search_path: str) -> str:
    """Return the first directory on ``search_path`` with the world-write bit set.

    Candidates that cannot be stat'ed are skipped. Owner and group
    permissions are not considered. Returns an empty string when no
    candidate qualifies.
    """
    logger.debug("Search path is [%s]", search_path)
    for candidate in search_path.split(SEARCH_PATH_SEPARATOR):
        if not candidate:
            continue
        logger.debug("Checking path %s", candidate)
        try:
            st = os.stat(candidate)
        except OSError:
            continue
        if stat.S_ISDIR(st.st_mode) and st.st_mode & stat.S_IWOTH:
            logger.debug("%s is a world-writable directory, using it", candidate)
            return candidate
    return ""
