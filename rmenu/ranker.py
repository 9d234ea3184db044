#===============================================================================
#  rmenu | ranker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Prefix filtering and ranking of executable names for the suggestion list.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import AbstractSet, List

from .constants import MAX_SUGGESTIONS


def rank_candidates(index: AbstractSet[str], prefix: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """Return up to *limit* names from *index* that start with *prefix*.

    Rules:
    - Matching is a literal, case-sensitive prefix test; "" matches everything
    - Shorter names rank first
    - Equal lengths are ordered lexicographically so the list is stable
      between frames
    """
    matches = [name for name in index if name.startswith(prefix)]
    matches.sort(key=lambda name: (len(name), name))
    return matches[:limit]
