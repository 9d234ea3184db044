#===============================================================================
#  rmenu | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Shared data models passed between the session, the window and the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class LaunchRequest:
    """A confirmed choice, handed to the spawner and then discarded."""
    program_name: str


@dataclass(frozen=True)
class FrameInput:
    """Input events drained for a single loop iteration."""
    char: Optional[str] = None      # at most one typed character per tick
    confirm: bool = False           # Enter pressed
    delete_held: bool = False       # Backspace is down (repeats every tick)
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    close_requested: bool = False


@dataclass(frozen=True)
class FrameView:
    """What the renderer needs to draw one frame."""
    text: str
    cursor: int
    candidates: Tuple[str, ...] = field(default_factory=tuple)
    selection: int = 0


@dataclass(frozen=True)
class StepOutcome:
    view: FrameView
    launch: Optional[LaunchRequest] = None
    finished: bool = False
