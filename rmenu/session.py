#===============================================================================
#  rmenu | session.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  The interaction loop: one step per tick ranks the candidates, applies the
#  input drained for that tick, and either finishes with a launch request or
#  hands a view to the renderer.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, List, Optional

from .constants import MAX_SUGGESTIONS
from .input_buffer import InputBuffer
from .launcher import resolve_launch
from .models import FrameInput, FrameView, LaunchRequest, StepOutcome
from .ranker import rank_candidates
from .selection import SelectionCursor

logger = logging.getLogger(__name__)


class LauncherSession:
    """Owns the entry line and the highlight; reads a fixed executable index."""

    def __init__(self, index: AbstractSet[str], limit: int = MAX_SUGGESTIONS):
        self.index = index
        self.limit = limit
        self.buffer = InputBuffer()
        self.selection = SelectionCursor(limit)
        self.finished = False

    def candidates(self) -> List[str]:
        """Rank the index against the current text and keep the highlight on a real row."""
        ranked = rank_candidates(self.index, self.buffer.text, self.limit)
        self.selection.clamp(len(ranked))
        return ranked

    def view(self) -> FrameView:
        ranked = self.candidates()
        return FrameView(
            text=self.buffer.text,
            cursor=self.buffer.cursor,
            candidates=tuple(ranked),
            selection=self.selection.index,
        )

    def step(self, frame: FrameInput) -> StepOutcome:
        if self.finished:
            raise RuntimeError("Session already finished")

        if frame.close_requested:
            self.finished = True
            return StepOutcome(view=self.view(), finished=True)

        # Confirm acts on the list that was on screen before this tick's edits
        ranked = self.candidates()

        if frame.char is not None:
            self.buffer.insert_char(frame.char)

        if frame.confirm:
            request = resolve_launch(ranked, self.selection.index)
            if request is not None:
                self.finished = True
                return StepOutcome(view=self.view(), launch=request, finished=True)
            logger.debug("Confirm ignored: no candidate at row %d", self.selection.index)

        if frame.delete_held:
            self.buffer.delete_before_cursor()
        if frame.left:
            self.buffer.move_left()
        if frame.right:
            self.buffer.move_right()
        if frame.up:
            self.selection.move_up()
        if frame.down:
            self.selection.move_down(len(ranked))

        return StepOutcome(view=self.view())


def run_loop(
    session: LauncherSession,
    poll: Callable[[], FrameInput],
    render: Callable[[FrameView], None],
    spawn: Callable[[LaunchRequest], object],
) -> Optional[LaunchRequest]:
    """Drive *session* until it finishes.

    poll() supplies each tick's input, render() gets every view, and spawn()
    receives the launch request if one was confirmed. Returns that request
    (None when the host asked to close).
    """
    while True:
        outcome = session.step(poll())
        if outcome.finished:
            if outcome.launch is not None:
                spawn(outcome.launch)
            return outcome.launch
        render(outcome.view)
