from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt, QRect, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen, QFont

from sketchjam.logic.palette import Palette, CELL_SIZE, PADDING, COLS, ROWS, note_for_column
from sketchjam.styles import THEME


class PaletteGrid(QWidget):
    color_picked = pyqtSignal(tuple)

    def __init__(self, canvas_ref, parent=None):
        super().__init__(parent)
        self.canvas = canvas_ref
        self.palette_model = Palette()
        self.setFixedSize(PADDING * 2 + COLS * CELL_SIZE, PADDING * 2 + ROWS * CELL_SIZE)

        # Start on C (red)
        self.canvas.state.current_color = self.palette_model.color(0, 0)

    def mousePressEvent(self, event):
        pos = event.position()
        color = self.palette_model.select_at(int(pos.x()), int(pos.y()))
        if color is None: return
        self.canvas.state.set_current_color(color)
        self.color_picked.emit(color)
        self.canvas.update()
        self.update()

    def clear_selection(self):
        self.palette_model.clear_selection()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(THEME['instrument_bg']))

        for row in range(ROWS):
            for col in range(COLS):
                x = PADDING + col * CELL_SIZE
                y = PADDING + row * CELL_SIZE
                painter.fillRect(x, y, CELL_SIZE, CELL_SIZE, QColor(*self.palette_model.color(row, col)))

                # === Selection Indicator === #
                if self.palette_model.selected == (row, col):
                    painter.setBrush(Qt.BrushStyle.NoBrush)
                    painter.setPen(QPen(QColor(Qt.GlobalColor.white), 2))
                    painter.drawRect(x + 1, y + 1, CELL_SIZE - 2, CELL_SIZE - 2)
                    painter.setPen(QPen(QColor(Qt.GlobalColor.black), 1))
                    painter.drawRect(x + 3, y + 3, CELL_SIZE - 6, CELL_SIZE - 6)

        # === Note Labels (top row) === #
        label_font = QFont(self.font().family(), 9)
        label_font.setBold(True)
        painter.setFont(label_font)
        painter.setPen(QColor(Qt.GlobalColor.black))
        for col in range(COLS):
            painter.drawText(QRect(PADDING + col * CELL_SIZE, PADDING, CELL_SIZE, CELL_SIZE),
                             Qt.AlignmentFlag.AlignCenter, note_for_column(col))


class PalettePanel(QDockWidget):
    def __init__(self, canvas_ref, parent=None):
        super().__init__("Colors", parent)
        self.canvas = canvas_ref

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
        self.grid = PaletteGrid(self.canvas)
        self.layout.addWidget(self.grid)
