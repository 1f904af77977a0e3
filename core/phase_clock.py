"""
Phase clock for the Breathing Exercises application.
Counts down the seconds of one breathing phase and walks the
inhale -> hold -> exhale cycle.
"""

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

from .models import BreathingPreset, Phase

logger = logging.getLogger(__name__)


class PhaseClock(QObject):
    """
    Countdown within a single breathing phase.

    The clock has no timer of its own; the owner calls tick() once per
    second. Phases with a duration of 0 are passed through immediately
    and never consume a tick.

    Signals:
        phase_changed: Emitted on every phase boundary (old_phase, new_phase)
        cycle_completed: Emitted each time an exhale phase finishes
    """

    phase_changed = Signal(Phase, Phase)
    cycle_completed = Signal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._durations: Dict[Phase, int] = {}
        self._phase = Phase.INHALE
        self._remaining_seconds = 0

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        """Get seconds left in the current phase."""
        return self._remaining_seconds

    @property
    def is_loaded(self) -> bool:
        return bool(self._durations)

    def duration_of(self, phase: Phase) -> int:
        """Configured seconds for a phase (0 if nothing is loaded)."""
        return self._durations.get(phase, 0)

    def load(self, preset: BreathingPreset):
        """Use the phase durations of a preset."""
        self._durations = preset.durations
        logger.debug("Phase clock loaded %s (%s)", preset.name, preset.pattern())

    def reset(self, phase: Phase, duration: int):
        """
        Jump to a phase with the given countdown.

        Args:
            phase: Phase to enter.
            duration: Seconds to count down. 0 passes through the phase
                immediately.
        """
        if duration < 0:
            raise ValueError(f"Phase duration cannot be negative: {duration}")

        self._phase = phase
        self._remaining_seconds = duration

        if duration == 0:
            self._advance()

    def tick(self):
        """Count down one second, crossing into the next phase at zero."""
        if not self.is_loaded:
            raise RuntimeError("Phase clock ticked before a preset was loaded")

        self._remaining_seconds -= 1
        if self._remaining_seconds <= 0:
            self._advance()

    def _advance(self):
        """Move to the next phase, skipping phases with no duration."""
        # One full lap at most, so an all-zero pattern cannot spin forever
        for _ in range(len(Phase)):
            old_phase = self._phase
            new_phase = old_phase.next_phase

            self._phase = new_phase
            self._remaining_seconds = self.duration_of(new_phase)

            logger.debug("Phase %s -> %s (%ss)",
                         old_phase.label, new_phase.label, self._remaining_seconds)
            self.phase_changed.emit(old_phase, new_phase)

            if old_phase == Phase.EXHALE:
                self.cycle_completed.emit()

            if self._remaining_seconds > 0:
                return
