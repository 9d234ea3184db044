#===============================================================================
#  rmenu | rmenu/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Frameless launcher window:
#    - Collects key events between ticks (typed characters are queued)
#    - A QTimer tick drains one FrameInput into the session
#    - Repaints the canvas from the returned view
#    - On a launch request, spawns the program and quits
#===============================================================================

from __future__ import annotations

import logging
from collections import deque
from typing import Deque

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QApplication, QMessageBox, QVBoxLayout, QWidget

from .config import LauncherConfig
from .constants import APP_TITLE, TICK_INTERVAL_MS
from .errors import LaunchError
from .launcher import launch
from .models import FrameInput, LaunchRequest
from .session import LauncherSession
from .ui_widgets import LauncherCanvas

logger = logging.getLogger(__name__)

CONFIRM_KEYS = (Qt.Key_Return, Qt.Key_Enter)
ARROW_KEYS = (Qt.Key_Left, Qt.Key_Right, Qt.Key_Up, Qt.Key_Down)


class LauncherWindow(QWidget):
    def __init__(self, session: LauncherSession, config: LauncherConfig, font, parent=None):
        super().__init__(parent)
        self.session = session
        self.config = config

        self.setWindowTitle(APP_TITLE)
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Dialog)
        self.setAttribute(Qt.WA_TranslucentBackground, True)

        self.canvas = LauncherCanvas(font)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)
        self.setFixedSize(self.canvas.size())

        self._chars: Deque[str] = deque()
        self._reset_pending()
        self._backspace_down = False

        self.canvas.show_frame(self.session.view())

        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self.tick)
        self.tick_timer.start()

    def _reset_pending(self):
        self._confirm = False
        self._backspace_tapped = False
        self._left = False
        self._right = False
        self._up = False
        self._down = False
        self._close = False

    # ----------------------------
    # Input collection
    # ----------------------------
    def keyPressEvent(self, event):
        key = event.key()

        if key == Qt.Key_Escape:
            self._close = True
        elif key in CONFIRM_KEYS:
            if not event.isAutoRepeat():
                self._confirm = True
        elif key == Qt.Key_Backspace:
            self._backspace_down = True
            self._backspace_tapped = True
        elif key in ARROW_KEYS and event.isAutoRepeat():
            # single presses only, like confirm
            return
        elif key == Qt.Key_Left:
            self._left = True
        elif key == Qt.Key_Right:
            self._right = True
        elif key == Qt.Key_Up:
            self._up = True
        elif key == Qt.Key_Down:
            self._down = True
        else:
            text = event.text()
            if text and text.isprintable():
                self._chars.extend(text)
                return
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key_Backspace and not event.isAutoRepeat():
            self._backspace_down = False
            return
        super().keyReleaseEvent(event)

    def drain_input(self) -> FrameInput:
        """Take this tick's events: one queued character plus the key flags."""
        frame = FrameInput(
            char=self._chars.popleft() if self._chars else None,
            confirm=self._confirm,
            delete_held=self._backspace_down or self._backspace_tapped,
            left=self._left,
            right=self._right,
            up=self._up,
            down=self._down,
            close_requested=self._close,
        )
        self._reset_pending()
        return frame

    # ----------------------------
    # Loop
    # ----------------------------
    def tick(self):
        outcome = self.session.step(self.drain_input())

        if not outcome.finished:
            self.canvas.show_frame(outcome.view)
            return

        self.tick_timer.stop()
        if outcome.launch is not None:
            self.launch_request(outcome.launch)
        else:
            QApplication.exit(0)

    def launch_request(self, request: LaunchRequest):
        try:
            launch(request, self.config.terminal_command)
        except LaunchError as e:
            logger.error("%s", e)
            QMessageBox.critical(self, "Launch failed", str(e))
            QApplication.exit(1)
            return
        QApplication.exit(0)

    def closeEvent(self, event):
        if not self.session.finished:
            self.tick_timer.stop()
            self.session.step(FrameInput(close_requested=True))
        super().closeEvent(event)
