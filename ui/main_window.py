"""
Main window for the Breathing Exercises application.
Navigates between the preset list and the exercise page.
"""

from PySide6.QtWidgets import QMainWindow, QStackedWidget
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QIcon, QCloseEvent, QPixmap, QPainter, QColor

from core.session_controller import SessionController

from .preset_page import PresetPage
from .exercise_page import ExercisePage


def create_app_icon() -> QIcon:
    """Create a simple app icon programmatically."""
    sizes = [16, 32, 48, 64]
    icon = QIcon()

    for size in sizes:
        pixmap = QPixmap(size, size)
        pixmap.fill(Qt.GlobalColor.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        # Outer ring (exhale) and inner disc (inhale)
        painter.setBrush(QColor("#66BB6A"))
        margin = size // 8
        painter.drawEllipse(margin, margin, size - 2*margin, size - 2*margin)

        painter.setBrush(QColor("#42A5F5"))
        inner_margin = size // 3
        painter.drawEllipse(
            inner_margin, inner_margin,
            size - 2*inner_margin, size - 2*inner_margin
        )

        painter.end()
        icon.addPixmap(pixmap)

    return icon


class MainWindow(QMainWindow):
    """
    Main application window with a preset list and an exercise page.
    """

    def __init__(self):
        super().__init__()

        self.controller = SessionController(self)

        self.setWindowTitle("Breathing Exercises")
        self.setMinimumSize(420, 600)
        self.resize(460, 700)
        self.setWindowIcon(create_app_icon())

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Set up the main UI."""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.preset_page = PresetPage()
        self.exercise_page = ExercisePage(self.controller)

        self.stack.addWidget(self.preset_page)
        self.stack.addWidget(self.exercise_page)

    def _connect_signals(self):
        """Connect signals from pages."""
        self.preset_page.preset_selected.connect(self._show_exercise)
        self.exercise_page.back_requested.connect(self._show_presets)

    @Slot(str)
    def _show_exercise(self, name: str):
        """Open the exercise page for a preset."""
        self.exercise_page.set_preset(name)
        self.stack.setCurrentWidget(self.exercise_page)
        self.setWindowTitle(f"Breathing Exercises - {self.exercise_page.preset.title}")

    @Slot()
    def _show_presets(self):
        """Return to the preset list."""
        self.stack.setCurrentWidget(self.preset_page)
        self.setWindowTitle("Breathing Exercises")

    def closeEvent(self, event: QCloseEvent):
        """Handle window close event."""
        self.controller.cleanup()
        event.accept()
