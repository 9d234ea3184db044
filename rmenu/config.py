#===============================================================================
#  rmenu | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Launcher settings. Defaults come from constants.py and can be overridden
#  through RMENU_* environment variables; there is no config file.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from .constants import DEFAULT_FONT_PATH, DEFAULT_FONT_SIZE, DEFAULT_TERMINAL

logger = logging.getLogger(__name__)

ENV_TERMINAL = "RMENU_TERMINAL"
ENV_FONT = "RMENU_FONT"
ENV_FONT_SIZE = "RMENU_FONT_SIZE"
ENV_LOG_LEVEL = "RMENU_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LauncherConfig:
    terminal_command: Tuple[str, ...] = field(default_factory=lambda: tuple(shlex.split(DEFAULT_TERMINAL)))
    font_path: str = DEFAULT_FONT_PATH   # "" -> system monospace font
    font_size: int = DEFAULT_FONT_SIZE
    log_level: str = "WARNING"


def default_config() -> Dict[str, object]:
    d = LauncherConfig()
    return {
        "terminal_command": d.terminal_command,
        "font_path": d.font_path,
        "font_size": d.font_size,
        "log_level": d.log_level,
    }


def load_config(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Build the config from defaults plus environment overrides.

    Values that do not parse are logged and replaced by their default.
    """
    env = os.environ if environ is None else environ
    d = default_config()

    if ENV_TERMINAL in env:
        try:
            d["terminal_command"] = tuple(shlex.split(env[ENV_TERMINAL]))
        except ValueError as e:
            logger.warning("Ignoring %s=%r: %s", ENV_TERMINAL, env[ENV_TERMINAL], e)

    if ENV_FONT in env:
        d["font_path"] = env[ENV_FONT].strip()

    if ENV_FONT_SIZE in env:
        raw = env[ENV_FONT_SIZE].strip()
        try:
            size = int(raw)
        except ValueError:
            size = 0
        if size > 0:
            d["font_size"] = size
        else:
            logger.warning("Ignoring %s=%r: expected a positive integer", ENV_FONT_SIZE, raw)

    if ENV_LOG_LEVEL in env:
        level = env[ENV_LOG_LEVEL].strip().upper()
        if level in LOG_LEVELS:
            d["log_level"] = level
        else:
            logger.warning("Ignoring %s=%r: expected one of %s", ENV_LOG_LEVEL, level, ", ".join(LOG_LEVELS))

    return LauncherConfig(**d)
