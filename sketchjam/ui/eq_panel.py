from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt, QRect, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen, QFont

from sketchjam.config import NUM_LEVELS
from sketchjam.styles import THEME
from sketchjam.logic.eq_controller import (EQController, cell_gray, PANEL_WIDTH, PANEL_HEIGHT,
                                           PADDING, BAR_Y, BAR_HEIGHT, CELL_WIDTH)


class EQBar(QWidget):
    level_changed = pyqtSignal(int)

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setFixedSize(PANEL_WIDTH, PANEL_HEIGHT)

    # === Forward pointer input === #
    def mousePressEvent(self, event):
        self.dispatch(event, "press")

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.MouseButton.LeftButton:
            self.dispatch(event, "drag")

    def dispatch(self, event, kind):
        pos = event.position()
        level = self.controller.handle_pointer_event(int(pos.x()), int(pos.y()), kind)
        if level is not None:
            self.level_changed.emit(level)
            self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(THEME['instrument_bg']))

        # === Title === #
        painter.setPen(QColor(Qt.GlobalColor.white))
        title_font = QFont(self.font().family(), 11)
        title_font.setBold(True)
        painter.setFont(title_font)
        painter.drawText(QRect(0, 0, PANEL_WIDTH, BAR_Y), Qt.AlignmentFlag.AlignCenter, "EQ SETTINGS")

        # === Brightness Bar === #
        for level in range(NUM_LEVELS):
            gray = cell_gray(level)
            painter.fillRect(PADDING + level * CELL_WIDTH, BAR_Y, CELL_WIDTH, BAR_HEIGHT,
                             QColor(gray, gray, gray))

        painter.setPen(QPen(QColor(THEME['btn_accent']), 2))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(PADDING + self.controller.level * CELL_WIDTH, BAR_Y, CELL_WIDTH, BAR_HEIGHT)

        # === Labels === #
        painter.setFont(QFont(self.font().family(), 9))
        painter.setPen(QColor(Qt.GlobalColor.gray))
        label_rect = QRect(PADDING, BAR_Y + BAR_HEIGHT, PANEL_WIDTH - 2 * PADDING, 25)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, "TREBLE")
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter, "BASS")


class EQPanel(QDockWidget):
    def __init__(self, context, canvas_ref, parent=None):
        super().__init__("EQ", parent)
        self.canvas = canvas_ref
        self.controller = EQController(context)

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
        self.bar = EQBar(self.controller)
        self.bar.level_changed.connect(lambda _level: self.canvas.update())
        self.layout.addWidget(self.bar)
