"""
Exercise page widget for the Breathing Exercises application.
Shows the selected preset, the start button and the live countdown.
"""

from typing import Optional
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QProgressBar
)
from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QFont, QHideEvent

from core.models import BreathingPreset, Phase, SessionState, SessionStatus, get_preset
from core.session_controller import SessionController


# Bright phase colors
PHASE_COLORS = {
    Phase.INHALE: "#42A5F5",
    Phase.HOLD: "#FFA726",
    Phase.EXHALE: "#66BB6A",
}


class ExercisePage(QWidget):
    """
    Exercise page with countdown display and controls.
    """

    # Emitted when the user asks to go back to the preset list
    back_requested = Signal()

    def __init__(
        self,
        controller: SessionController,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self.controller = controller
        self._preset: Optional[BreathingPreset] = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Set up the UI components."""
        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.setContentsMargins(30, 30, 30, 30)

        # Navigation
        nav_layout = QHBoxLayout()
        self.back_btn = QPushButton("< Back")
        self.back_btn.setFlat(True)
        nav_layout.addWidget(self.back_btn)
        nav_layout.addStretch()
        layout.addLayout(nav_layout)

        # Preset title and description
        self.title_label = QLabel("")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title_font = QFont()
        title_font.setPointSize(20)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.description_label = QLabel("")
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet("font-size: 15px;")
        layout.addWidget(self.description_label)

        self.pattern_label = QLabel("")
        self.pattern_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.pattern_label.setStyleSheet("color: #757575; font-size: 13px;")
        layout.addWidget(self.pattern_label)

        # Start button
        self.start_btn = QPushButton("Start Exercise")
        self.start_btn.setFixedSize(200, 100)
        self.start_btn.setStyleSheet("""
            QPushButton {
                background-color: #2196F3;
                color: white;
                border: none;
                border-radius: 10px;
                font-size: 20px;
                font-weight: bold;
            }
            QPushButton:hover {
                background-color: #1E88E5;
            }
            QPushButton:pressed {
                background-color: #1976D2;
            }
        """)
        layout.addWidget(self.start_btn, alignment=Qt.AlignmentFlag.AlignHCenter)

        # Separator
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        layout.addWidget(line)

        # Countdown section, only visible while running
        self.countdown_box = QWidget()
        countdown_layout = QVBoxLayout(self.countdown_box)
        countdown_layout.setSpacing(10)

        self.phase_label = QLabel(Phase.INHALE.label)
        self.phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        phase_font = QFont()
        phase_font.setPointSize(22)
        phase_font.setBold(True)
        self.phase_label.setFont(phase_font)
        countdown_layout.addWidget(self.phase_label)

        self.time_label = QLabel("0")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        time_font = QFont()
        time_font.setPointSize(60)
        time_font.setBold(True)
        self.time_label.setFont(time_font)
        self.time_label.setMinimumHeight(100)
        countdown_layout.addWidget(self.time_label)

        self.cycle_label = QLabel("")
        self.cycle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.cycle_label.setStyleSheet("color: #757575; font-size: 14px;")
        countdown_layout.addWidget(self.cycle_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(8)
        countdown_layout.addWidget(self.progress_bar)

        self.countdown_box.setVisible(False)
        layout.addWidget(self.countdown_box)

        # Completion banner
        self.congrats_label = QLabel("Congrats!")
        self.congrats_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        congrats_font = QFont()
        congrats_font.setPointSize(22)
        congrats_font.setBold(True)
        self.congrats_label.setFont(congrats_font)
        self.congrats_label.setStyleSheet("color: #43A047;")
        self.congrats_label.setVisible(False)
        layout.addWidget(self.congrats_label)

        # Spacer
        layout.addStretch()

    def _connect_signals(self):
        """Connect widget signals to slots."""
        # Session controller signals
        self.controller.tick.connect(self._render)
        self.controller.state_changed.connect(self._render)
        self.controller.phase_changed.connect(self._on_phase_changed)
        self.controller.session_completed.connect(self._on_session_completed)

        # Button signals
        self.start_btn.clicked.connect(self._on_start_clicked)
        self.back_btn.clicked.connect(self._on_back_clicked)

    def set_preset(self, name: str):
        """Show the given preset and reset the page."""
        self.controller.stop()

        self._preset = get_preset(name)
        self.title_label.setText(self._preset.title)
        self.description_label.setText(self._preset.description)
        self.pattern_label.setText(
            f"Inhale {self._preset.inhale_seconds}s · "
            f"Hold {self._preset.hold_seconds}s · "
            f"Exhale {self._preset.exhale_seconds}s"
        )

        self.countdown_box.setVisible(False)
        self.congrats_label.setVisible(False)

    @property
    def preset(self) -> Optional[BreathingPreset]:
        return self._preset

    @Slot()
    def _on_start_clicked(self):
        """Handle start button click (restarts a running session)."""
        if self._preset is None:
            return
        self.congrats_label.setVisible(False)
        self.controller.start(self._preset.name)

    @Slot()
    def _on_back_clicked(self):
        """Handle back button click."""
        self.controller.stop()
        self.back_requested.emit()

    @Slot(SessionState)
    def _render(self, state: SessionState):
        """Update the countdown display from a session snapshot."""
        self.countdown_box.setVisible(state.status == SessionStatus.RUNNING)
        self.start_btn.setText("Restart" if state.is_running else "Start Exercise")

        if not state.is_running:
            return

        color = PHASE_COLORS.get(state.phase, "#212121")
        self.phase_label.setText(state.phase_label)
        self.phase_label.setStyleSheet(f"color: {color};")
        self.time_label.setText(str(state.remaining_seconds))
        self.cycle_label.setText(state.cycle_label())
        self.progress_bar.setValue(int(state.progress_percentage))

    @Slot(Phase, Phase)
    def _on_phase_changed(self, old_phase: Phase, new_phase: Phase):
        """Handle phase change - recolor the countdown."""
        color = PHASE_COLORS.get(new_phase, "#212121")
        self.time_label.setStyleSheet(f"color: {color};")

    @Slot(SessionState)
    def _on_session_completed(self, state: SessionState):
        """Handle session completion."""
        self.countdown_box.setVisible(False)
        self.congrats_label.setVisible(True)
        self.start_btn.setText("Start Exercise")

    def hideEvent(self, event: QHideEvent):
        """Stop the session when the page is navigated away from."""
        # Minimizing the window sends a spontaneous hide; keep breathing
        if not event.spontaneous():
            self.controller.stop()
        super().hideEvent(event)
