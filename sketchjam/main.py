import sys
import logging
from PyQt6.QtWidgets import QApplication, QMainWindow, QToolBar, QDockWidget
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QAction, QFont, QKeySequence

# Custom Imports
from sketchjam.ui.canvas import Canvas
from sketchjam.ui.tool_station import ToolStation
from sketchjam.ui.palette_panel import PalettePanel
from sketchjam.ui.scale_panel import ScalePanel
from sketchjam.ui.eq_panel import EQPanel
from sketchjam.ui.diagnostics import DiagnosticsPanel
from sketchjam.logic.audio_sink import AudioSink
from sketchjam.logic.context import SketchContext
from sketchjam import styles
from sketchjam import config_manager

logger = logging.getLogger(__name__)


class SketchJam(QMainWindow):
    def __init__(self):
        super().__init__()

        # 1. Config & Window Setup
        self.config = config_manager.CONFIG
        app_settings = self.config['app_settings']

        self.setWindowTitle(app_settings['title'])
        self.resize(app_settings['initial_width'], app_settings['initial_height'])
        self.setStyleSheet(styles.get_stylesheet())

        # 2. Owned State (the audio sink is handed in, never looked up globally)
        self.audio_sink = AudioSink()
        self.context = SketchContext.from_config(self.config, audio_sink=self.audio_sink)

        # 3. The Canvas
        self.canvas = Canvas(self.context, parent=self)
        self.setCentralWidget(self.canvas)

        # 4. The Docks
        self.station = ToolStation(self.canvas, parent=self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.station)

        self.palette_panel = PalettePanel(self.canvas, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.palette_panel)

        self.scale_panel = ScalePanel(self.canvas, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.scale_panel)

        # Picking from one color source clears the other's highlight
        self.palette_panel.grid.color_picked.connect(lambda _c: self.scale_panel.strip.clear_selection())
        self.scale_panel.strip.color_picked.connect(lambda _c: self.palette_panel.grid.clear_selection())

        self.eq_panel = EQPanel(self.context, self.canvas, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.eq_panel)

        self.diagnostics = DiagnosticsPanel(self.context, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.diagnostics)

        # 5. Menus & Actions
        self.setup_actions()
        self.setup_menubar()
        self.setup_toolbar()

        # Start Unlocked
        self.toggle_ui_lock(False)

    def setup_actions(self):
        """Define logic for menus and buttons"""
        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        # === Global Undo/Redo === #
        self.act_undo = QAction("Undo", self)
        self.act_undo.setShortcut(QKeySequence("Ctrl+Z"))
        self.act_undo.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        self.act_undo.triggered.connect(self.undo)

        self.act_redo = QAction("Redo", self)
        self.act_redo.setShortcuts([QKeySequence("Ctrl+Y"), QKeySequence("Ctrl+Shift+Z")])
        self.act_redo.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        self.act_redo.triggered.connect(self.redo)

        self.act_lock = QAction("Lock Workspace", self)
        self.act_lock.setCheckable(True)
        self.act_lock.toggled.connect(self.toggle_ui_lock)

    def setup_menubar(self):
        """Create the top text menu"""
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        file_menu.addAction(self.act_exit)

        edit_menu = menu.addMenu("&Edit")
        edit_menu.addAction(self.act_undo)
        edit_menu.addAction(self.act_redo)

        view_menu = menu.addMenu("&View")
        view_menu.addAction(self.act_lock)

        # Window menu lets users bring back closed panels
        win_menu = menu.addMenu("&Window")
        for dock in self.docks():
            win_menu.addAction(dock.toggleViewAction())

    def setup_toolbar(self):
        """Create the icon bar"""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setIconSize(QSize(16, 16))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.act_undo)
        toolbar.addAction(self.act_redo)
        toolbar.addSeparator()
        toolbar.addAction(self.act_lock)

    def docks(self):
        return [self.station, self.palette_panel, self.scale_panel, self.eq_panel, self.diagnostics]

    def undo(self):
        self.context.undo()
        self.canvas.update()

    def redo(self):
        self.context.redo()
        self.canvas.update()

    def toggle_ui_lock(self, locked):
        """Freezes or Unfreezes the panels"""
        for dock in self.docks():
            if locked:
                dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
            else:
                dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable |
                                QDockWidget.DockWidgetFeature.DockWidgetFloatable |
                                QDockWidget.DockWidgetFeature.DockWidgetClosable)


def main():
    logging.basicConfig(level=logging.INFO, format='%(name)s - %(levelname)s - %(message)s')
    app = QApplication(sys.argv)

    app.setFont(QFont(config_manager.CONFIG['theme']['font_family_ui'], 10))

    window = SketchJam()
    logger.info("SketchJam started (history limit %d)", window.context.history.limit)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
