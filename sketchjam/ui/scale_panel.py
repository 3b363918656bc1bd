from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt, QRect, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen, QFont

from sketchjam.logic.palette import NOTE_NAMES
from sketchjam.logic.scales import (ScalePreset, SELECTOR_WIDTH, TITLE_HEIGHT, ROW_HEIGHT, ROOT_X,
                                    ROOT_CELL, TYPE_BUTTON_WIDTH, STRIP_CELL, STRIP_COLS)
from sketchjam.styles import THEME

CELL_IDLE = QColor(0x48, 0x48, 0x48)
CELL_ACTIVE = QColor(0x60, 0x60, 0x60)
CELL_BORDER = QColor(0x30, 0x30, 0x30)
TEXT_IDLE = QColor(0xAA, 0xAA, 0xAA)


class ScaleSelector(QWidget):
    scale_changed = pyqtSignal()

    def __init__(self, preset, parent=None):
        super().__init__(parent)
        self.preset = preset
        self.setFixedSize(SELECTOR_WIDTH, TITLE_HEIGHT + 2 * ROW_HEIGHT)

    def mousePressEvent(self, event):
        pos = event.position()
        if self.preset.selector_press(int(pos.x()), int(pos.y())):
            self.scale_changed.emit()
            self.update()

    def draw_cell(self, painter, rect, text, active):
        painter.fillRect(rect, CELL_ACTIVE if active else CELL_IDLE)
        painter.setPen(CELL_BORDER)
        painter.drawRect(rect)
        painter.setPen(QColor(Qt.GlobalColor.white) if active else TEXT_IDLE)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, text)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(THEME['instrument_bg']))

        # === Title === #
        title_font = QFont(self.font().family(), 11)
        title_font.setBold(True)
        painter.setFont(title_font)
        painter.setPen(QColor(Qt.GlobalColor.white))
        painter.drawText(QRect(0, 0, SELECTOR_WIDTH, TITLE_HEIGHT), Qt.AlignmentFlag.AlignCenter, "SCALE PRESET")

        cell_font = QFont(self.font().family(), 8)
        cell_font.setBold(True)
        painter.setFont(cell_font)

        # === Root Notes === #
        for i, note in enumerate(NOTE_NAMES):
            rect = QRect(ROOT_X + i * ROOT_CELL, TITLE_HEIGHT, ROOT_CELL, ROW_HEIGHT)
            self.draw_cell(painter, rect, note, i == self.preset.root)

        # === Major / Minor === #
        for i, label in enumerate(("MAJOR", "MINOR")):
            rect = QRect(i * TYPE_BUTTON_WIDTH, TITLE_HEIGHT + ROW_HEIGHT, TYPE_BUTTON_WIDTH, ROW_HEIGHT)
            self.draw_cell(painter, rect, label, self.preset.major == (i == 0))


class ScaleStrip(QWidget):
    color_picked = pyqtSignal(tuple)

    def __init__(self, canvas_ref, preset, parent=None):
        super().__init__(parent)
        self.canvas = canvas_ref
        self.preset = preset
        self.setFixedSize(STRIP_COLS * STRIP_CELL, STRIP_CELL)

    def mousePressEvent(self, event):
        pos = event.position()
        color = self.preset.strip_press(int(pos.x()), int(pos.y()))
        if color is None: return
        self.canvas.state.set_current_color(color)
        self.color_picked.emit(color)
        self.canvas.update()
        self.update()

    def clear_selection(self):
        self.preset.clear_selection()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        label_font = QFont(self.font().family(), 9)
        label_font.setBold(True)
        painter.setFont(label_font)

        for col in range(STRIP_COLS):
            rect = QRect(col * STRIP_CELL, 0, STRIP_CELL, STRIP_CELL)
            painter.fillRect(rect, QColor(*self.preset.color(col)))

            # === Selection Indicator === #
            if col == self.preset.selected:
                painter.setBrush(Qt.BrushStyle.NoBrush)
                painter.setPen(QPen(QColor(Qt.GlobalColor.white), 2))
                painter.drawRect(rect.adjusted(1, 1, -2, -2))
                painter.setPen(QPen(QColor(Qt.GlobalColor.black), 1))
                painter.drawRect(rect.adjusted(3, 3, -4, -4))

            painter.setPen(QColor(Qt.GlobalColor.black))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.preset.note_name(col))


class ScalePanel(QDockWidget):
    def __init__(self, canvas_ref, parent=None):
        super().__init__("Scales", parent)
        self.canvas = canvas_ref
        self.preset = ScalePreset()

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        # 3. Layout
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 4. Content
        self.selector = ScaleSelector(self.preset)
        self.strip = ScaleStrip(self.canvas, self.preset)
        self.selector.scale_changed.connect(self.strip.update)
        self.layout.addWidget(self.selector)
        self.layout.addWidget(self.strip, alignment=Qt.AlignmentFlag.AlignHCenter)
