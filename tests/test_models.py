import pytest

from core.models import (
    BreathingPreset, Phase, SessionState, SessionStatus,
    UnknownPresetError, PRESETS, CYCLES_PER_SESSION, get_preset
)


def test_preset_table():
    timings = {
        name: (p.inhale_seconds, p.hold_seconds, p.exhale_seconds)
        for name, p in PRESETS.items()
    }
    assert timings == {
        "Calm": (6, 7, 8),
        "BoxBreathing": (4, 4, 4),
        "Coffee": (6, 0, 2),
    }
    assert list(PRESETS) == ["Calm", "BoxBreathing", "Coffee"]


def test_session_length_is_six_cycles():
    assert CYCLES_PER_SESSION == 6
    assert get_preset("BoxBreathing").session_seconds == 72
    assert get_preset("Coffee").session_seconds == 48


def test_get_unknown_preset():
    with pytest.raises(UnknownPresetError):
        get_preset("Sleepy")
    # Still a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):
        get_preset("calm")


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        BreathingPreset("Broken", "Broken", "", 4, -1, 4)


def test_phase_order_is_cyclic():
    assert Phase.INHALE.next_phase == Phase.HOLD
    assert Phase.HOLD.next_phase == Phase.EXHALE
    assert Phase.EXHALE.next_phase == Phase.INHALE
    assert [p.label for p in Phase] == ["Inhale", "Hold", "Exhale"]


def test_snapshot_helpers():
    state = SessionState(
        preset=get_preset("Calm"),
        phase=Phase.HOLD,
        remaining_seconds=3,
        completed_cycles=1,
        status=SessionStatus.RUNNING,
    )
    assert state.phase_label == "Hold"
    assert state.phase_seconds == 7
    assert state.format_remaining() == "0:03"
    assert state.cycle_label() == "Cycle 2 / 6"
    # one full cycle (21s) + inhale (6s) + 4s of hold, out of 126s
    assert state.progress_percentage == pytest.approx(31 / 126 * 100)


def test_snapshot_is_read_only():
    state = SessionState()
    with pytest.raises(AttributeError):
        state.completed_cycles = 3


def test_completed_snapshot():
    state = SessionState(
        preset=get_preset("Coffee"),
        completed_cycles=6,
        status=SessionStatus.COMPLETED,
    )
    assert state.is_completed
    assert not state.is_running
    assert state.progress_percentage == 100.0
    assert state.cycle_label() == "Cycle 6 / 6"
