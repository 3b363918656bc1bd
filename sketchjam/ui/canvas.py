from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPoint, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QPen, QColor, QTransform, QPainterPath

from sketchjam.config import OPACITY_STEP
from sketchjam.logic.grid import snap_to_grid, snap_to_grid_start

DRAW_MODE_KEYS = {
    Qt.Key.Key_D: "drum",
    Qt.Key.Key_F: "piano",
    Qt.Key.Key_G: "guitar",
}

NUDGE_KEYS = {  # Direction, scaled by the snap size
    Qt.Key.Key_Left: (-1, 0),
    Qt.Key.Key_Right: (1, 0),
    Qt.Key.Key_Up: (0, -1),
    Qt.Key.Key_Down: (0, 1),
}


class Canvas(QWidget):
    mode_changed = pyqtSignal(str)

    def __init__(self, context, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # === Data (owned by the context) === #
        self.context = context
        self.state = context.canvas

        # === View State === #
        self.scale_factor = 1.0
        self.offset_x = 0
        self.offset_y = 0

        # === Input State === #
        self.draw_mode = ""  # "", "drum", "snare", "piano", "guitar"
        self.last_mouse_pos = QPoint()
        self.panning = False
        self.drawing = False
        self.dragging = False
        self.marquee = False
        self.drag_start = None
        self.drag_current = None
        self.element_start = None

    def set_draw_mode(self, mode):
        self.draw_mode = mode or ""
        if self.draw_mode:
            self.state.clear_selection()
        self.setCursor(Qt.CursorShape.CrossCursor if self.draw_mode else Qt.CursorShape.ArrowCursor)
        self.mode_changed.emit(self.draw_mode)
        self.update()

    # === PAINTING === #
    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor("#383838"))

        view_transform = QTransform()
        view_transform.translate(self.offset_x, self.offset_y)
        view_transform.scale(self.scale_factor, self.scale_factor)
        painter.setTransform(view_transform)

        gray = self.state.background_gray
        painter.fillRect(QRectF(0, 0, self.state.width, self.state.height), QColor(gray, gray, gray))
        self.draw_grid(painter)

        for element in self.state.elements:
            self.draw_element(painter, element, view_transform)

        # === Selection === #
        for selected in self.state.selection:
            self.apply_element_transform(painter, selected, view_transform)
            painter.setOpacity(1.0)
            painter.setPen(QPen(QColor(0, 200, 255), 1))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(QRectF(selected.x, selected.y, selected.width, selected.height))
            painter.setTransform(view_transform)

        # === Draw Preview / Marquee === #
        if (self.drawing or self.marquee) and self.drag_start and self.drag_current:
            (x1, y1), (x2, y2) = self.drag_start, self.drag_current
            painter.setOpacity(1.0)
            painter.setPen(QPen(QColor(0, 200, 255), 1, Qt.PenStyle.DashLine))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(QRectF(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1)))

    def draw_grid(self, painter):
        r, g, b, a = self.state.grid_color
        painter.setPen(QPen(QColor(r, g, b, a), 1))
        step = self.state.grid_size
        for x in range(0, self.state.width + 1, step):
            painter.drawLine(x, 0, x, self.state.height)
        for y in range(0, self.state.height + 1, step):
            painter.drawLine(0, y, self.state.width, y)

    def apply_element_transform(self, painter, element, view_transform):
        painter.setTransform(view_transform)
        if element.rotation:
            t = QTransform()
            t.translate(element.x, element.y); t.rotate(element.rotation); t.translate(-element.x, -element.y)
            painter.setTransform(t, True)

    def draw_element(self, painter, element, view_transform):
        self.apply_element_transform(painter, element, view_transform)
        painter.setOpacity(element.opacity)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(*element.color))
        rect = QRectF(element.x, element.y, element.width, element.height)

        if element.element_type == "Snare Drum":
            # === Ring: outer circle minus a 50% inner circle === #
            inner = element.width / 2
            ring = QPainterPath()
            ring.addEllipse(rect)
            hole = QPainterPath()
            hole.addEllipse(QRectF(element.x + (element.width - inner) / 2,
                                   element.y + (element.height - inner) / 2, inner, inner))
            painter.drawPath(ring.subtracted(hole))
        elif element.element_type == "Drum":
            painter.drawEllipse(rect)
        else:
            painter.drawRect(rect)

        painter.setTransform(view_transform)

    # === INPUT EVENTS === #
    def mousePressEvent(self, event):
        self.setFocus()
        if event.modifiers() == Qt.KeyboardModifier.ShiftModifier:
            self.panning = True; self.last_mouse_pos = event.pos(); return

        pos = self.map_to_canvas(event.pos())
        x, y = pos.x(), pos.y()

        # === Start drawing a new element === #
        if self.draw_mode:
            self.drawing = True
            self.drag_start = snap_to_grid_start(x, y, self.state.grid_size)
            self.drag_current = self.drag_start
            self.update()
            return

        clicked = self.state.select_at(x, y)
        if clicked is None:
            # === Empty space starts a marquee === #
            self.marquee = True
            self.drag_start = (x, y)
            self.drag_current = (x, y)
            self.update()
            return

        # === Alt+click duplicates, then drags the copy === #
        if event.modifiers() & Qt.KeyboardModifier.AltModifier:
            clicked = self.state.duplicate_selected()

        self.dragging = True
        self.drag_start = (x, y)
        self.element_start = (clicked.x, clicked.y)
        self.state.begin_drag()
        self.update()

    def mouseMoveEvent(self, event):
        if self.panning:
            delta = event.pos() - self.last_mouse_pos
            self.offset_x += delta.x()
            self.offset_y += delta.y()
            self.last_mouse_pos = event.pos()
            self.update()
            return

        pos = self.map_to_canvas(event.pos())
        if self.drawing:
            self.drag_current = snap_to_grid(pos.x(), pos.y(), self.state.snap_size)
            self.update()
        elif self.marquee:
            self.drag_current = (pos.x(), pos.y())
            self.update()
        elif self.dragging and self.element_start:
            dx = pos.x() - self.drag_start[0]
            dy = pos.y() - self.drag_start[1]
            self.state.drag_selected_to(self.element_start[0] + dx, self.element_start[1] + dy)
            self.update()

    def mouseReleaseEvent(self, event):
        if self.panning: self.panning = False; return

        if self.drawing:
            pos = self.map_to_canvas(event.pos())
            end = snap_to_grid(pos.x(), pos.y(), self.state.snap_size)
            self.state.create_element(self.draw_mode, self.drag_start, end)
            self.set_draw_mode("")
        elif self.dragging:
            self.state.end_drag()
        elif self.marquee:
            pos = self.map_to_canvas(event.pos())
            self.state.select_in_rect(self.drag_start, (pos.x(), pos.y()))

        self.drawing = False
        self.dragging = False
        self.marquee = False
        self.drag_start = None
        self.drag_current = None
        self.element_start = None
        self.update()

    def keyPressEvent(self, event):
        key = event.key()
        modifiers = event.modifiers()

        if key == Qt.Key.Key_D and modifiers & Qt.KeyboardModifier.ControlModifier:
            self.set_draw_mode("snare")
        elif key in DRAW_MODE_KEYS and not modifiers & Qt.KeyboardModifier.ControlModifier:
            self.set_draw_mode(DRAW_MODE_KEYS[key])
        elif key == Qt.Key.Key_Escape:
            self.set_draw_mode("")
        elif key in NUDGE_KEYS:
            dx, dy = NUDGE_KEYS[key]
            step = self.state.snap_size
            self.state.move_selected(dx * step, dy * step)
        elif key == Qt.Key.Key_R:
            self.state.rotate_selected()
        elif key in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            self.state.delete_selected()
        elif key == Qt.Key.Key_BracketLeft:
            self.state.change_opacity(-OPACITY_STEP)
        elif key == Qt.Key.Key_BracketRight:
            self.state.change_opacity(OPACITY_STEP)
        else:
            super().keyPressEvent(event)
            return
        self.update()

    def map_to_canvas(self, widget_point):
        x = (widget_point.x() - self.offset_x) / self.scale_factor
        y = (widget_point.y() - self.offset_y) / self.scale_factor
        return QPointF(x, y)

    def wheelEvent(self, event):
        zoom_in = event.angleDelta().y() > 0
        self.scale_factor *= 1.1 if zoom_in else 0.9
        self.scale_factor = max(0.25, min(self.scale_factor, 4.0))
        self.update()
