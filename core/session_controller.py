"""
Session controller for the Breathing Exercises application.
Implements the session state machine on top of a single 1 Hz tick.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .models import (
    BreathingPreset, Phase, SessionState, SessionStatus,
    CYCLES_PER_SESSION, get_preset
)
from .phase_clock import PhaseClock

logger = logging.getLogger(__name__)


class SessionController(QObject):
    """
    Core session engine implementing a state machine.

    States:
        IDLE: No session running
        RUNNING: Breathing cycles in progress
        COMPLETED: All cycles finished

    Signals:
        tick: Emitted once per tick with the current SessionState
        state_changed: Emitted on start and stop with the current SessionState
        status_changed: Emitted when status changes (provides old, new)
        phase_changed: Emitted on every phase boundary (provides old, new)
        session_completed: Emitted once when the last cycle finishes
    """

    # Signals
    tick = Signal(SessionState)
    state_changed = Signal(SessionState)
    status_changed = Signal(SessionStatus, SessionStatus)  # old, new
    phase_changed = Signal(Phase, Phase)  # old, new
    session_completed = Signal(SessionState)

    TICK_INTERVAL_MS = 1000
    TARGET_CYCLES = CYCLES_PER_SESSION

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._preset: Optional[BreathingPreset] = None
        self._status = SessionStatus.IDLE
        self._completed_cycles = 0

        self._clock = PhaseClock(self)
        self._clock.cycle_completed.connect(self.on_cycle_completed)
        self._clock.phase_changed.connect(self.phase_changed)

        # The only tick source; the phase countdown runs off it too
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(self.TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self.advance)

    @property
    def clock(self) -> PhaseClock:
        return self._clock

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def completed_cycles(self) -> int:
        return self._completed_cycles

    @property
    def is_running(self) -> bool:
        return self._status == SessionStatus.RUNNING

    @property
    def is_completed(self) -> bool:
        return self._status == SessionStatus.COMPLETED

    @property
    def is_idle(self) -> bool:
        return self._status == SessionStatus.IDLE

    @property
    def is_ticking(self) -> bool:
        """Check if the tick source is scheduled."""
        return self._qt_timer.isActive()

    def get_state(self) -> SessionState:
        """Build a snapshot of the current session."""
        return SessionState(
            preset=self._preset,
            phase=self._clock.phase,
            remaining_seconds=max(0, self._clock.remaining_seconds),
            completed_cycles=self._completed_cycles,
            total_cycles=self.TARGET_CYCLES,
            status=self._status,
        )

    def start(self, preset_name: str):
        """
        Start a new breathing session.
        Starting while a session is running restarts it.

        Args:
            preset_name: Name of a built-in preset (Calm, BoxBreathing, Coffee).

        Raises:
            UnknownPresetError: If the preset name is not known.
        """
        preset = get_preset(preset_name)

        if self.is_running:
            logger.info("Restarting session (%s)", self._preset.name)
            self._qt_timer.stop()
        elif self.is_completed:
            # A finished session goes back to idle before it runs again
            self._status = SessionStatus.IDLE
            self.status_changed.emit(SessionStatus.COMPLETED, SessionStatus.IDLE)

        old_status = self._status
        self._preset = preset
        self._completed_cycles = 0
        self._status = SessionStatus.RUNNING

        self._clock.load(preset)
        self._clock.reset(Phase.INHALE, preset.inhale_seconds)

        self._qt_timer.start()
        logger.info("Session started: %s (%s)", preset.name, preset.pattern())

        if old_status != self._status:
            self.status_changed.emit(old_status, self._status)
        self.state_changed.emit(self.get_state())

    def stop(self):
        """
        Stop the tick source. Safe to call any number of times.
        A completed session stays completed.
        """
        self._qt_timer.stop()

        if not self.is_running:
            return

        old_status = self._status
        self._status = SessionStatus.IDLE
        logger.info("Session stopped after %d/%d cycles",
                    self._completed_cycles, self.TARGET_CYCLES)

        self.status_changed.emit(old_status, self._status)
        self.state_changed.emit(self.get_state())

    @Slot()
    def on_cycle_completed(self):
        """Count a finished cycle and complete the session at the target."""
        if not self.is_running:
            return

        self._completed_cycles += 1
        logger.debug("Cycle %d/%d completed",
                     self._completed_cycles, self.TARGET_CYCLES)

        if self._completed_cycles >= self.TARGET_CYCLES:
            self._complete()

    @Slot()
    def advance(self):
        """
        Handle one tick.
        Public so a tick can be driven without waiting on the timer.
        """
        if not self.is_running:
            return

        self._clock.tick()

        state = self.get_state()
        logger.debug("Tick: %s %ss left", state.phase_label, state.remaining_seconds)
        self.tick.emit(state)

        if state.is_completed:
            self.session_completed.emit(state)

    def _complete(self):
        """Mark the session completed and halt the tick source."""
        old_status = self._status
        self._status = SessionStatus.COMPLETED
        logger.info("Session completed: %s, %d cycles",
                    self._preset.name, self._completed_cycles)

        self.status_changed.emit(old_status, self._status)
        # Already completed, so this only releases the timer
        self.stop()

    def cleanup(self):
        """Cleanup resources. Call before application exit."""
        self.stop()
