#!/usr/bin/env python3
"""
Breathing Exercises - guided, timed breathing sessions.

Three fixed presets, six cycles each:
- Calm (6-7-8)
- Box Breathing (4-4-4)
- Coffee (6-0-2)

Usage:
    pip install -e .
    python main.py

Set BREATHING_LOG_LEVEL=DEBUG to trace every phase change.

License: MIT
"""

import os
import sys
import signal
import logging
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt, QTimer

LOG_LEVEL_ENV = "BREATHING_LOG_LEVEL"


def setup_logging():
    """Configure root logging from the environment."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        print(f"Warning: unknown log level {level_name!r}, using WARNING")
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def setup_exception_handling():
    """Set up exception handling for cleaner error display."""
    def exception_hook(exctype, value, traceback):
        print(f"Unhandled exception: {exctype.__name__}: {value}")
        sys.__excepthook__(exctype, value, traceback)

    sys.excepthook = exception_hook


def setup_signal_handlers(app: QApplication):
    """Set up signal handlers for graceful shutdown."""
    def signal_handler(signum, frame):
        print("\nReceived interrupt signal, shutting down...")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    # Let the Python interpreter run periodically so signals are delivered
    heartbeat = QTimer(app)
    heartbeat.start(500)
    heartbeat.timeout.connect(lambda: None)


def main():
    """Main entry point for the Breathing Exercises application."""
    setup_logging()
    setup_exception_handling()

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName("Breathing Exercises")
    app.setApplicationDisplayName("Breathing Exercises")
    app.setOrganizationName("BreathingExercises")
    app.setOrganizationDomain("breathing.local")

    # Set application style
    app.setStyle("Fusion")

    # Light theme stylesheet
    app.setStyleSheet("""
        QMainWindow, QWidget {
            background-color: #fafafa;
            color: #212121;
        }

        QPushButton {
            padding: 8px 16px;
            border-radius: 5px;
            font-size: 13px;
        }
        QPushButton:flat {
            color: #1976D2;
            border: none;
        }
        QPushButton:flat:hover {
            color: #0D47A1;
        }

        QProgressBar {
            border: none;
            border-radius: 4px;
            background-color: #e0e0e0;
        }
        QProgressBar::chunk {
            border-radius: 4px;
            background-color: #2196F3;
        }

        QToolTip {
            background-color: #ffffff;
            color: #212121;
            border: 1px solid #2196F3;
            padding: 5px;
        }
    """)

    # Set up signal handlers
    setup_signal_handlers(app)

    # Import and create main window
    from ui.main_window import MainWindow
    window = MainWindow()
    window.show()

    # Run the application
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
