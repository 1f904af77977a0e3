"""Shared fixtures for the Breathing Exercises tests."""

import os

import pytest

# Widgets render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from core.phase_clock import PhaseClock
from core.session_controller import SessionController


@pytest.fixture(scope="session")
def qt_app():
    """QTimer and the pages need an application instance on the main thread."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def controller(qt_app):
    ctrl = SessionController()
    yield ctrl
    ctrl.cleanup()


@pytest.fixture
def clock(qt_app):
    return PhaseClock()


@pytest.fixture
def recorder():
    """Collect signal payloads by name."""
    class Recorder:
        def __init__(self):
            self.events = {}

        def listen(self, signal, name):
            signal.connect(lambda *args: self.events.setdefault(name, []).append(args))

        def __getitem__(self, name):
            return self.events.get(name, [])

    return Recorder()
