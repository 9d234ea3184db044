#===============================================================================
#  rmenu | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Turns the confirmed suggestion into a command and spawns it, either directly
#  or wrapped in a terminal emulator. Spawning is fire-and-forget.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import Callable, List, Optional, Sequence

from .errors import LaunchError
from .models import LaunchRequest

logger = logging.getLogger(__name__)

Popen = Callable[..., object]


def resolve_launch(candidates: Sequence[str], selection: int) -> Optional[LaunchRequest]:
    """Return a request for the highlighted candidate, or None.

    None covers an empty list and a highlight left past the end of a short
    list; confirming in those cases does nothing.
    """
    if selection < 0 or selection >= len(candidates):
        return None
    return LaunchRequest(program_name=candidates[selection])


def build_command(request: LaunchRequest, terminal_command: Sequence[str] = ()) -> List[str]:
    """Return the argv to spawn.

    kinds:
      - direct  : [program]
      - terminal: terminal_command + [program], e.g. alacritty -e <program>
    """
    return list(terminal_command) + [request.program_name]


def spawn(command: Sequence[str], popen: Popen = subprocess.Popen) -> None:
    """Start *command* detached from the launcher; its exit status is never read."""
    try:
        popen(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(f"Could not launch {' '.join(command)!r}: {e}") from e


def launch(request: LaunchRequest, terminal_command: Sequence[str] = (), popen: Popen = subprocess.Popen) -> List[str]:
    """Build and spawn the command for *request*; returns the argv used."""
    command = build_command(request, terminal_command)
    spawn(command, popen=popen)
    logger.info("Launched %s", " ".join(command))
    return command
