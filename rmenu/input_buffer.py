#===============================================================================
#  rmenu | input_buffer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  The editable entry line: text plus a cursor offset.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class InputBuffer:
    """Single-line text with a cursor, 0 <= cursor <= len(text)."""

    def __init__(self, text: str = ""):
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def insert_char(self, c: str) -> None:
        self._text = self._text[:self._cursor] + c + self._text[self._cursor:]
        self._cursor += 1

    def delete_before_cursor(self) -> None:
        if self._cursor == 0:
            return
        self._text = self._text[:self._cursor - 1] + self._text[self._cursor:]
        self._cursor -= 1

    def move_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def __repr__(self) -> str:
        return f"InputBuffer(text={self._text!r}, cursor={self._cursor})"
