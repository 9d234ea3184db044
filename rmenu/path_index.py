#===============================================================================
#  rmenu | path_index.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Filesystem discovery of executables on the search path.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def search_path_dirs(path_value: Optional[str] = None) -> List[Path]:
    """Split a PATH-style value into directories, keeping order.

    Empty segments are dropped rather than read as the current directory.
    """
    if path_value is None:
        path_value = os.environ.get("PATH", "")
    return [Path(p) for p in path_value.split(os.pathsep) if p]


def is_executable(path: Path) -> bool:
    """True for a regular file (symlinks followed) with any execute bit set."""
    try:
        st = path.stat()
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXECUTE_BITS)


def is_displayable(name: str) -> bool:
    """False for names that are not valid UTF-8 on disk (surrogate-escaped)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def iter_executables(directory: Path) -> Iterator[str]:
    """Yield base names of executables directly inside *directory*.

    Missing or unreadable directories yield nothing.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Skipping %s: %s", directory, e)
        return

    for item in entries:
        if is_executable(item) and is_displayable(item.name):
            yield item.name


def scan_search_path(path_value: Optional[str] = None) -> FrozenSet[str]:
    """Scan every search-path directory once and return the executable names."""
    names = set()
    dirs = search_path_dirs(path_value)
    for directory in dirs:
        names.update(iter_executables(directory))

    logger.debug("Indexed %d executables from %d directories", len(names), len(dirs))
    return frozenset(names)
