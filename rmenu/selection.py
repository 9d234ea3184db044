#===============================================================================
#  rmenu | selection.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Tracks the highlighted suggestion row.
#
#  Notes
#  -----
#  - The lower rows only exist when there are enough candidates, so the upper
#    bound follows the live candidate count (capped at MAX_SUGGESTIONS).
#  - move_down() without a count keeps the fixed MAX_SUGGESTIONS - 1 bound.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from .constants import MAX_SUGGESTIONS


class SelectionCursor:
    """Highlighted row index, always within [0, limit)."""

    def __init__(self, limit: int = MAX_SUGGESTIONS):
        self.limit = limit
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def _upper(self, candidate_count: Optional[int]) -> int:
        if candidate_count is None:
            return self.limit - 1
        return max(0, min(self.limit, candidate_count) - 1)

    def move_up(self) -> None:
        if self._index > 0:
            self._index -= 1

    def move_down(self, candidate_count: Optional[int] = None) -> None:
        if self._index < self._upper(candidate_count):
            self._index += 1

    def clamp(self, candidate_count: int) -> None:
        """Pull the highlight back onto the last row when the list shrinks."""
        self._index = min(self._index, self._upper(candidate_count))

    def __repr__(self) -> str:
        return f"SelectionCursor(index={self._index}, limit={self.limit})"
