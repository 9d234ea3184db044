#===============================================================================
#  rmenu | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Entry point: logging, config, font check, PATH index, window lifecycle.
#  Exit code 0 on close or launch, 1 when startup fails or the spawn fails.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from .config import load_config
from .constants import APP_TITLE
from .errors import StartupError
from .main_window import LauncherWindow
from .path_index import scan_search_path
from .session import LauncherSession
from .ui_widgets import load_font

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install the stderr handler once; later calls only change the level."""
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(getattr(logging, level, logging.WARNING))


def main() -> int:
    # config warnings need the handler in place before parsing
    configure_logging()
    config = load_config()
    configure_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)

    try:
        font = load_font(config)
    except StartupError as e:
        logger.error("%s", e)
        QMessageBox.critical(None, APP_TITLE, str(e))
        return 1

    session = LauncherSession(scan_search_path())
    w = LauncherWindow(session, config, font)
    w.show()
    w.activateWindow()
    return app.exec()
