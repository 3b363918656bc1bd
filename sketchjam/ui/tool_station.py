from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QPushButton, QLabel, QButtonGroup
from PyQt6.QtCore import Qt

TOOLS = [
    ("", "Select", "Esc"),
    ("drum", "Drum", "D"),
    ("snare", "Snare", "Ctrl+D"),
    ("piano", "Piano", "F"),
    ("guitar", "Guitar", "G"),
]


class ToolStation(QDockWidget):
    def __init__(self, canvas_ref, parent=None):
        super().__init__("Tools", parent)
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
        self.layout.setSpacing(10)
        self.layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # 4. Content
        title = QLabel("TOOLS")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setObjectName("PanelTitle")
        self.layout.addWidget(title)

        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons = {}
        for mode, label, shortcut in TOOLS:
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setToolTip(f"{label} ({shortcut})")
            btn.setFixedHeight(40)
            btn.clicked.connect(lambda _checked, m=mode: self.canvas.set_draw_mode(m))
            self.group.addButton(btn)
            self.layout.addWidget(btn)
            self.buttons[mode] = btn

        self.layout.addStretch()

        # Keep buttons in sync with keyboard mode changes
        self.canvas.mode_changed.connect(self.sync_mode)
        self.sync_mode(self.canvas.draw_mode)

    def sync_mode(self, mode):
        btn = self.buttons.get(mode)
        if btn is not None:
            btn.setChecked(True)
