import pytest

from core.models import Phase, get_preset


def load(clock, name):
    preset = get_preset(name)
    clock.load(preset)
    clock.reset(Phase.INHALE, preset.inhale_seconds)
    return preset


def test_phase_advances_after_exactly_its_duration(clock):
    load(clock, "Calm")

    for remaining in (5, 4, 3, 2, 1):
        clock.tick()
        assert clock.phase == Phase.INHALE
        assert clock.remaining_seconds == remaining

    clock.tick()
    assert clock.phase == Phase.HOLD
    assert clock.remaining_seconds == 7


def test_phase_order_is_cyclic(clock, recorder):
    load(clock, "BoxBreathing")
    recorder.listen(clock.phase_changed, "phase")

    for _ in range(24):
        clock.tick()

    assert recorder["phase"] == [
        (Phase.INHALE, Phase.HOLD),
        (Phase.HOLD, Phase.EXHALE),
        (Phase.EXHALE, Phase.INHALE),
    ] * 2


def test_cycle_completed_only_after_exhale(clock, recorder):
    load(clock, "BoxBreathing")
    recorder.listen(clock.cycle_completed, "cycle")

    for _ in range(11):
        clock.tick()
    assert recorder["cycle"] == []

    clock.tick()
    assert len(recorder["cycle"]) == 1
    assert clock.phase == Phase.INHALE
    assert clock.remaining_seconds == 4


def test_zero_duration_phase_skipped_without_a_tick(clock, recorder):
    load(clock, "Coffee")
    recorder.listen(clock.phase_changed, "phase")

    for _ in range(6):
        clock.tick()

    # Hold is entered and left in the same tick
    assert recorder["phase"] == [
        (Phase.INHALE, Phase.HOLD),
        (Phase.HOLD, Phase.EXHALE),
    ]
    assert clock.phase == Phase.EXHALE
    assert clock.remaining_seconds == 2


def test_coffee_cycle_takes_eight_ticks(clock, recorder):
    load(clock, "Coffee")
    recorder.listen(clock.cycle_completed, "cycle")

    for _ in range(7):
        clock.tick()
    assert recorder["cycle"] == []

    clock.tick()
    assert len(recorder["cycle"]) == 1
    assert clock.phase == Phase.INHALE


def test_reset_into_zero_duration_phase_advances(clock):
    clock.load(get_preset("Coffee"))
    clock.reset(Phase.HOLD, 0)

    assert clock.phase == Phase.EXHALE
    assert clock.remaining_seconds == 2


def test_reset_sets_phase_directly(clock):
    clock.load(get_preset("Calm"))
    clock.reset(Phase.EXHALE, 3)

    assert clock.phase == Phase.EXHALE
    assert clock.remaining_seconds == 3


def test_reset_rejects_negative_duration(clock):
    clock.load(get_preset("Calm"))
    with pytest.raises(ValueError):
        clock.reset(Phase.INHALE, -1)


def test_tick_before_load(clock):
    with pytest.raises(RuntimeError):
        clock.tick()
