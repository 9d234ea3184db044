#===============================================================================
#  rmenu | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Central place for suggestion limits, window sizing, theme, and defaults.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "rmenu"

# Rows shown under the entry line
MAX_SUGGESTIONS = 5

# --- Window ---
WINDOW_WIDTH = 640
TICK_INTERVAL_MS = 16

# --- Font ---
DEFAULT_FONT_PATH = "/usr/local/bin/iosevka-regular.ttf"
DEFAULT_FONT_SIZE = 32

# --- Launch ---
DEFAULT_TERMINAL = "alacritty -e"

# --- Theme (RRGGBBAA) ---
BG_COLOR = "#18181822"
HIGHLIGHT_COLOR = "#ffffff20"
TEXT_COLOR = "#f5f5f5ff"

# Rounded box geometry, as a fraction of the box height
CORNER_ROUNDNESS = 0.4
