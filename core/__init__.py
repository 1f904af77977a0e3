# Core module for Breathing Exercises application
from .models import (
    BreathingPreset, Phase, SessionState, SessionStatus,
    UnknownPresetError, PRESETS, CYCLES_PER_SESSION, get_preset
)
from .phase_clock import PhaseClock
from .session_controller import SessionController

__all__ = [
    'BreathingPreset', 'Phase', 'SessionState', 'SessionStatus',
    'UnknownPresetError', 'PRESETS', 'CYCLES_PER_SESSION', 'get_preset',
    'PhaseClock', 'SessionController',
]
