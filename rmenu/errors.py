#===============================================================================
#  rmenu | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Exception types surfaced to the window and the entry point.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class RmenuError(RuntimeError):
    """Base class for launcher errors."""


class LaunchError(RmenuError):
    """The chosen program could not be spawned."""


class StartupError(RmenuError):
    """A resource required at startup (e.g. the font) is unavailable."""
