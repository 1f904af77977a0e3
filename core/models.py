"""
Data models for the Breathing Exercises application.
Uses dataclasses for clean, type-annotated data structures.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional


# Number of completed cycles that ends a session, for every preset
CYCLES_PER_SESSION = 6


class Phase(Enum):
    """Phases of a breathing cycle, in cyclic order."""
    INHALE = auto()
    HOLD = auto()
    EXHALE = auto()

    @property
    def label(self) -> str:
        """Human readable phase name."""
        return self.name.capitalize()

    @property
    def next_phase(self) -> "Phase":
        """Phase that follows this one (Exhale wraps back to Inhale)."""
        return _NEXT_PHASE[self]


_NEXT_PHASE = {
    Phase.INHALE: Phase.HOLD,
    Phase.HOLD: Phase.EXHALE,
    Phase.EXHALE: Phase.INHALE,
}


class SessionStatus(Enum):
    """Lifecycle of a breathing session."""
    IDLE = auto()
    RUNNING = auto()
    COMPLETED = auto()


class UnknownPresetError(ValueError):
    """Raised when a preset name is not one of the built-in presets."""


@dataclass(frozen=True)
class BreathingPreset:
    """
    Fixed breathing pattern.
    A duration of 0 means the phase is skipped.
    """
    name: str
    title: str
    description: str
    inhale_seconds: int
    hold_seconds: int
    exhale_seconds: int

    def __post_init__(self):
        """Validate durations."""
        for phase, seconds in self.durations.items():
            if seconds < 0:
                raise ValueError(
                    f"{self.name}: {phase.label} duration cannot be negative"
                )

    @property
    def durations(self) -> Dict[Phase, int]:
        """Seconds configured for each phase."""
        return {
            Phase.INHALE: self.inhale_seconds,
            Phase.HOLD: self.hold_seconds,
            Phase.EXHALE: self.exhale_seconds,
        }

    @property
    def cycle_seconds(self) -> int:
        """Length of one full inhale/hold/exhale cycle."""
        return self.inhale_seconds + self.hold_seconds + self.exhale_seconds

    @property
    def session_seconds(self) -> int:
        """Length of a full session."""
        return self.cycle_seconds * CYCLES_PER_SESSION

    def pattern(self) -> str:
        """Format the timing as e.g. 4-4-4."""
        return f"{self.inhale_seconds}-{self.hold_seconds}-{self.exhale_seconds}"


# Built-in presets, in display order
PRESETS: Dict[str, BreathingPreset] = {
    preset.name: preset for preset in (
        BreathingPreset(
            "Calm", "Calm",
            "Slow breathing with a long exhale to settle the nervous system.",
            6, 7, 8,
        ),
        BreathingPreset(
            "BoxBreathing", "Box Breathing",
            "Equal inhale, hold and exhale to steady focus.",
            4, 4, 4,
        ),
        BreathingPreset(
            "Coffee", "Coffee",
            "Deep inhale followed by a quick exhale for an energy boost.",
            6, 0, 2,
        ),
    )
}


def get_preset(name: str) -> BreathingPreset:
    """
    Look up a built-in preset by name.

    Raises:
        UnknownPresetError: If the name is not a built-in preset.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown preset {name!r}, expected one of {', '.join(PRESETS)}"
        ) from None


@dataclass(frozen=True)
class SessionState:
    """
    Read-only snapshot of a breathing session.
    Used to pass session state to UI components.
    """
    preset: Optional[BreathingPreset] = None
    phase: Phase = Phase.INHALE
    remaining_seconds: int = 0
    completed_cycles: int = 0
    total_cycles: int = CYCLES_PER_SESSION
    status: SessionStatus = SessionStatus.IDLE

    @property
    def phase_label(self) -> str:
        return self.phase.label

    @property
    def is_running(self) -> bool:
        return self.status == SessionStatus.RUNNING

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    @property
    def phase_seconds(self) -> int:
        """Configured length of the current phase."""
        if self.preset is None:
            return 0
        return self.preset.durations[self.phase]

    @property
    def progress_percentage(self) -> float:
        """Return progress through the whole session as percentage (0-100)."""
        if self.is_completed:
            return 100.0
        if self.preset is None or self.preset.cycle_seconds == 0:
            return 0.0

        # Seconds already spent in the current cycle
        elapsed = self.phase_seconds - self.remaining_seconds
        phase = Phase.INHALE
        while phase != self.phase:
            elapsed += self.preset.durations[phase]
            phase = phase.next_phase

        done = self.completed_cycles * self.preset.cycle_seconds + elapsed
        total = self.total_cycles * self.preset.cycle_seconds
        return min(100.0, (done / total) * 100.0)

    def format_remaining(self) -> str:
        """Format remaining phase time as M:SS."""
        minutes = self.remaining_seconds // 60
        seconds = self.remaining_seconds % 60
        return f"{minutes}:{seconds:02d}"

    def cycle_label(self) -> str:
        """Format the current cycle, e.g. Cycle 2 / 6."""
        current = min(self.completed_cycles + 1, self.total_cycles)
        if self.is_completed:
            current = self.total_cycles
        return f"Cycle {current} / {self.total_cycles}"
