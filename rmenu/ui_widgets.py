#===============================================================================
#  rmenu | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Painted widgets: the entry line with its cursor and the suggestion rows.
#  Keeps the main window/controller smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontDatabase, QFontMetricsF, QPainter
from PySide6.QtWidgets import QWidget

from .config import LauncherConfig
from .constants import BG_COLOR, CORNER_ROUNDNESS, HIGHLIGHT_COLOR, MAX_SUGGESTIONS, TEXT_COLOR, WINDOW_WIDTH
from .errors import StartupError
from .models import FrameView


def rgba(hex_rgba: str) -> QColor:
    """QColor from '#RRGGBBAA' (Qt's own parser reads '#AARRGGBB')."""
    h = hex_rgba.lstrip("#")
    return QColor(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), int(h[6:8], 16))


def load_font(config: LauncherConfig) -> QFont:
    """Load the configured font file, or the system monospace font when unset.

    Raises StartupError when the file is missing or Qt cannot read it.
    """
    if not config.font_path:
        font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
        font.setPixelSize(config.font_size)
        return font

    path = Path(config.font_path)
    if not path.is_file():
        raise StartupError(f"Font not found: {path}")

    font_id = QFontDatabase.addApplicationFont(str(path))
    families = QFontDatabase.applicationFontFamilies(font_id) if font_id != -1 else []
    if not families:
        raise StartupError(f"Font could not be loaded: {path}")

    font = QFont(families[0])
    font.setPixelSize(config.font_size)
    return font


@dataclass(frozen=True)
class Metrics:
    """Layout derived from the size of one character."""
    char_w: float
    char_h: float

    @classmethod
    def for_font(cls, font: QFont) -> "Metrics":
        fm = QFontMetricsF(font)
        return cls(char_w=fm.horizontalAdvance("a"), char_h=fm.height())

    @property
    def row_h(self) -> float:
        return self.char_h * 2.0

    @property
    def pad_left(self) -> float:
        return self.char_w

    @property
    def pad_top(self) -> float:
        return self.char_h / 2.0

    @property
    def margin_y(self) -> float:
        return self.pad_top / 2.0

    def window_height(self) -> int:
        # entry row + MAX_SUGGESTIONS rows, each two characters tall
        rows = (MAX_SUGGESTIONS + 1) * 2
        return int(rows * self.char_h) + int(self.pad_top * 2) + int(self.margin_y)


class LauncherCanvas(QWidget):
    """Draws a FrameView: rounded entry box, then one row per candidate."""

    def __init__(self, font: QFont, parent=None):
        super().__init__(parent)
        self.font_ = font
        self.metrics = Metrics.for_font(font)
        self.frame = FrameView(text="", cursor=0)

        self.setAttribute(Qt.WA_TranslucentBackground, True)
        self.setFixedSize(WINDOW_WIDTH, self.metrics.window_height())

    def show_frame(self, frame: FrameView) -> None:
        if frame != self.frame:
            self.frame = frame
            self.update()

    def _box(self, row: int) -> QRectF:
        m = self.metrics
        y = m.pad_top if row == 0 else m.row_h * row + m.pad_top + m.margin_y
        return QRectF(m.pad_left, y, self.width() - m.pad_left * 2.0, m.row_h)

    def paintEvent(self, event):
        m = self.metrics
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        p.fillRect(self.rect(), rgba(BG_COLOR))
        p.setFont(self.font_)
        radius = m.row_h * CORNER_ROUNDNESS / 2.0

        # Entry line
        entry = self._box(0)
        p.setPen(Qt.NoPen)
        p.setBrush(rgba(HIGHLIGHT_COLOR))
        p.drawRoundedRect(entry, radius, radius)

        text_x = m.pad_left * 1.5
        p.setPen(rgba(TEXT_COLOR))
        p.drawText(QRectF(text_x, entry.y(), entry.width(), entry.height()),
                   Qt.AlignLeft | Qt.AlignVCenter, self.frame.text)

        fm = QFontMetricsF(self.font_)
        caret_x = text_x + fm.horizontalAdvance(self.frame.text[:self.frame.cursor])
        top = entry.y() + (entry.height() - m.char_h) / 2.0
        p.drawLine(QPointF(caret_x, top), QPointF(caret_x, top + m.char_h))

        # Suggestions
        for i, name in enumerate(self.frame.candidates):
            box = self._box(i + 1)
            if i == self.frame.selection:
                p.setPen(Qt.NoPen)
                p.setBrush(rgba(HIGHLIGHT_COLOR))
                p.drawRoundedRect(box, radius, radius)
            p.setPen(rgba(TEXT_COLOR))
            p.drawText(QRectF(text_x, box.y(), box.width(), box.height()),
                       Qt.AlignLeft | Qt.AlignVCenter, name)

        p.end()
