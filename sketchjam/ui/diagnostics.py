from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QLabel
from PyQt6.QtCore import QTimer, Qt
import psutil
import os

from sketchjam.logic.palette import note_for_color

LOW_TEST_HZ = 100
HIGH_TEST_HZ = 8000


class DiagnosticsPanel(QDockWidget):
    def __init__(self, context, parent=None):
        super().__init__("System", parent)
        self.context = context

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable |
                         QDockWidget.DockWidgetFeature.DockWidgetFloatable |
                         QDockWidget.DockWidgetFeature.DockWidgetClosable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)
        layout = QVBoxLayout(self.container)

        # --- DATA LABELS ---
        self.lbl_ram = QLabel("MEM: 0.0 MB")
        self.lbl_undo = QLabel("UNDO: 0 / REDO: 0")
        self.lbl_eq = QLabel("BASS: 1.00 / TREBLE: 1.00")
        self.lbl_response = QLabel(f"{LOW_TEST_HZ} Hz: 1.00 / {HIGH_TEST_HZ} Hz: 1.00")
        self.lbl_note = QLabel("NOTE: -")
        for label in (self.lbl_ram, self.lbl_undo, self.lbl_eq, self.lbl_response, self.lbl_note):
            label.setObjectName("Readout")
            layout.addWidget(label)

        # Response only changes with the EQ level
        self._measured_eq = None

        # Timer setup
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh_diagnostics)
        self.timer.start(1000)

    def refresh_diagnostics(self):
        process = psutil.Process(os.getpid())
        mem_mb = process.memory_info().rss / (1024 * 1024)
        self.lbl_ram.setText(f"MEM: {mem_mb:.1f} MB")

        stats = self.context.history.get_stats()
        self.lbl_undo.setText(f"UNDO: {stats['undo_count']} / REDO: {stats['redo_count']}")

        eq = self.context.settings.current.eq
        self.lbl_eq.setText(f"BASS: {eq.bass_gain:.2f} / TREBLE: {eq.treble_gain:.2f}")

        sink = self.context.audio_sink
        if sink is not None and sink.eq != self._measured_eq:
            self._measured_eq = sink.eq
            low = sink.response_at(LOW_TEST_HZ)
            high = sink.response_at(HIGH_TEST_HZ)
            self.lbl_response.setText(f"{LOW_TEST_HZ} Hz: {low:.2f} / {HIGH_TEST_HZ} Hz: {high:.2f}")

        note = note_for_color(self.context.canvas.current_color)
        self.lbl_note.setText(f"NOTE: {note or '-'}")
