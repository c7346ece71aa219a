"""Filesystem stat collaborator."""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.models.projects import FileStat

logger = logging.getLogger(__name__)


def stat_path(path: Path) -> FileStat:
    """Return existence and mtime for *path*.  Never raises."""
    try:
        st = Path(path).stat()
    except OSError as exc:
        logger.debug("stat %s failed: %s", path, exc)
        return FileStat(exists=False)
    return FileStat(exists=True, modified_time=st.st_mtime)
