"""
Preset page widget for the Breathing Exercises application.
Lists the built-in breathing presets as large choice buttons.
"""

from typing import Optional
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QFont

from core.models import PRESETS


CHOICE_BUTTON_STYLE = """
    QPushButton {
        background-color: #2196F3;
        color: white;
        border: none;
        border-radius: 10px;
        font-size: 22px;
        font-weight: bold;
    }
    QPushButton:hover {
        background-color: #1E88E5;
    }
    QPushButton:pressed {
        background-color: #1976D2;
    }
"""


class PresetPage(QWidget):
    """
    Start page with one button per breathing preset.
    """

    # Emitted with the preset name when a choice is clicked
    preset_selected = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._buttons = {}
        self._setup_ui()

    def _setup_ui(self):
        """Set up the UI components."""
        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.setContentsMargins(30, 30, 30, 30)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        # Header
        header = QLabel("Breathing Exercises")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header_font = QFont()
        header_font.setPointSize(20)
        header_font.setBold(True)
        header.setFont(header_font)
        layout.addWidget(header)

        layout.addStretch()

        for preset in PRESETS.values():
            button = QPushButton(preset.title)
            button.setFixedSize(200, 100)
            button.setToolTip(f"{preset.description}\n{preset.pattern()}")
            button.setStyleSheet(CHOICE_BUTTON_STYLE)
            button.clicked.connect(
                lambda checked=False, name=preset.name: self._on_choice_clicked(name)
            )
            layout.addWidget(button, alignment=Qt.AlignmentFlag.AlignHCenter)
            self._buttons[preset.name] = button

        layout.addStretch()

    @Slot(str)
    def _on_choice_clicked(self, name: str):
        """Handle preset button click."""
        self.preset_selected.emit(name)
