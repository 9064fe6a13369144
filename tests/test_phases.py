"""Tests for the spin lifecycle."""

import pytest

from namewheel.phases import (
    DEMO_SPEED,
    STOP_SPEED,
    AcceleratingPhase,
    DeceleratingPhase,
    IdleDemoPhase,
    PostSpinPhase,
    deceleration_distance,
    deceleration_factor,
)
from namewheel.pointer import TAU


def _tick_until(wheel, phase_type, limit=10_000):
    for _ in range(limit):
        if isinstance(wheel.phase, phase_type):
            return
        wheel.tick()
    raise AssertionError(f"never reached {phase_type.__name__}")


def test_starts_in_idle_demo(make_wheel):
    wheel = make_wheel()
    assert isinstance(wheel.phase, IdleDemoPhase)
    assert wheel.speed == DEMO_SPEED
    assert not wheel.is_spinning()


def test_idle_demo_keeps_turning(make_wheel):
    wheel = make_wheel()
    for _ in range(10):
        wheel.tick()
    assert wheel.angle == pytest.approx(10 * DEMO_SPEED)
    assert isinstance(wheel.phase, IdleDemoPhase)


def test_full_lifecycle(make_wheel, spin_to_end):
    """Idle -> accelerating -> decelerating -> post-spin -> accelerating."""
    wheel = make_wheel()
    wheel.start_spin()
    assert isinstance(wheel.phase, AcceleratingPhase)
    assert wheel.is_spinning()

    _tick_until(wheel, DeceleratingPhase)
    assert wheel.is_spinning()

    spin_to_end(wheel)
    assert isinstance(wheel.phase, PostSpinPhase)
    assert wheel.speed == 0

    wheel.start_spin()
    assert isinstance(wheel.phase, AcceleratingPhase)


def test_accelerating_duration(make_wheel):
    wheel = make_wheel(spin_time=1)
    wheel.start_spin()
    assert wheel.phase.max_age == 20
    wheel = make_wheel(spin_time=10)
    wheel.start_spin()
    assert wheel.phase.max_age == 60


@pytest.mark.parametrize("slow_spin", [False, True])
def test_speed_profile(make_wheel, slow_spin):
    """Strictly faster while accelerating, never faster while decelerating."""
    wheel = make_wheel(slow_spin=slow_spin)
    wheel.start_spin()
    last = wheel.speed
    while isinstance(wheel.phase, AcceleratingPhase):
        wheel.tick()
        assert wheel.speed > last
        last = wheel.speed
    while wheel.is_spinning():
        wheel.tick()
        assert 0 <= wheel.speed <= last
        last = wheel.speed


def test_slow_spin_accelerates_a_tenth(make_wheel):
    deltas = {}
    for slow_spin in (False, True):
        wheel = make_wheel(slow_spin=slow_spin)
        wheel.start_spin()
        before = wheel.speed
        wheel.tick()
        deltas[slow_spin] = wheel.speed - before
    assert deltas[True] == pytest.approx(deltas[False] / 10)


@pytest.mark.parametrize("spin_time", [1, 2, 10])
def test_spin_lasts_spin_time(make_wheel, spin_time):
    """Ticks spent spinning match spin_time at 60 ticks per second."""
    wheel = make_wheel(spin_time=spin_time)
    wheel.start_spin()
    spinning_ticks = 0
    while wheel.is_spinning():
        wheel.tick()
        if wheel.is_spinning():
            spinning_ticks += 1
    assert abs(spinning_ticks - round(spin_time * 60)) <= 1


@pytest.mark.parametrize("slow_spin", [False, True])
def test_deceleration_reaches_stop_speed(make_wheel, slow_spin):
    """Whatever the entry speed, speed hits STOP_SPEED after max_age ticks."""
    wheel = make_wheel(slow_spin=slow_spin)
    wheel.start_spin()
    _tick_until(wheel, DeceleratingPhase)
    phase = wheel.phase
    for _ in range(int(phase.max_age)):
        wheel.tick()
    assert wheel.phase is phase
    assert wheel.speed == pytest.approx(STOP_SPEED, rel=1e-9)
    wheel.tick()
    assert isinstance(wheel.phase, PostSpinPhase)


@pytest.mark.parametrize("phase_type", [AcceleratingPhase, DeceleratingPhase])
def test_click_ignored_while_spinning(make_wheel, phase_type):
    wheel = make_wheel()
    wheel.start_spin()
    _tick_until(wheel, phase_type)
    phase = wheel.phase
    angle = wheel.angle
    wheel.start_spin()
    assert wheel.phase is phase
    assert wheel.angle == angle


def test_invariants_hold_every_tick(make_wheel):
    wheel = make_wheel(spin_time=3)
    wheel.start_spin()
    while wheel.is_spinning():
        wheel.tick()
        assert 0 <= wheel.angle < TAU
        assert wheel.speed >= 0


def test_deceleration_helpers():
    factor = deceleration_factor(0.5, 100)
    assert 0.5 * factor**100 == pytest.approx(STOP_SPEED)
    assert deceleration_factor(0, 100) == 1.0
    # Entry tick plus 100 decayed ticks
    expected = sum(0.5 * factor**k for k in range(101))
    assert deceleration_distance(0.5, 100) == pytest.approx(expected)
