"""Spin phases - the wheel's lifecycle state machine.

Exactly one phase is active per wheel. Phases never hold on to the wheel:
it is passed into every call, and a phase asks for a transition by returning
the next phase from ``tick()`` or ``click()``. The wheel swaps it in and calls
``enter()`` on it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from namewheel.wheel import Wheel

DEMO_SPEED = 0.005  # rad/tick
ACCELERATION = 0.01  # rad/tick^2
SLOW_ACCELERATION = 0.001
STOP_SPEED = 0.00015  # rad/tick


def deceleration_factor(start_speed: float, ticks: float) -> float:
    """Per-tick multiplier taking ``start_speed`` down to STOP_SPEED in ``ticks``."""
    if start_speed <= 0 or ticks <= 0:
        return 1.0
    return math.exp(math.log(STOP_SPEED / start_speed) / ticks)


def deceleration_distance(start_speed: float, ticks: float) -> float:
    """Angle covered from the start of deceleration until the wheel stops.

    Mirrors the wheel: the tick that enters deceleration still advances by
    ``start_speed``, then every decelerating tick advances by the decayed speed.
    """
    factor = deceleration_factor(start_speed, ticks)
    speed = total = start_speed
    for _ in range(math.floor(ticks)):
        speed *= factor
        total += speed
    return total


class SpinPhase:
    """Defaults shared by all phases: ignore ticks and clicks, not spinning."""

    def enter(self, wheel: Wheel) -> None:
        pass

    def tick(self, wheel: Wheel) -> SpinPhase | None:
        return None

    def click(self, wheel: Wheel) -> SpinPhase | None:
        return None

    def is_spinning(self) -> bool:
        return False

    def draw_this_frame(self) -> bool:
        return True

    def __repr__(self) -> str:
        return type(self).__name__


class IdleDemoPhase(SpinPhase):
    """Slow ambient rotation before the first spin."""

    def enter(self, wheel: Wheel) -> None:
        wheel.speed = DEMO_SPEED

    def click(self, wheel: Wheel) -> SpinPhase | None:
        return AcceleratingPhase()


class AcceleratingPhase(SpinPhase):
    def __init__(self) -> None:
        self.age = 0
        self.max_age = 0.0
        self.acceleration = ACCELERATION

    def enter(self, wheel: Wheel) -> None:
        self.age = 0
        self.max_age = wheel.get_state_time_lengths().accelerating
        if wheel.config.slow_spin:
            self.acceleration = SLOW_ACCELERATION

    def tick(self, wheel: Wheel) -> SpinPhase | None:
        wheel.speed += self.acceleration
        self.age += 1
        if self.age > self.max_age:
            # Landing is decided here, the wheel jumps to it
            wheel.set_random_position()
            return DeceleratingPhase()
        return None

    def is_spinning(self) -> bool:
        return True


class DeceleratingPhase(SpinPhase):
    """Geometric slowdown from the entry speed to STOP_SPEED.

    Speed is multiplied by a constant factor every tick, chosen so that it
    reaches STOP_SPEED after exactly ``max_age`` ticks whatever the entry speed.
    """

    def __init__(self) -> None:
        self.age = 0
        self.max_age = 0.0
        self.deceleration = 1.0

    def enter(self, wheel: Wheel) -> None:
        self.age = 0
        self.max_age = wheel.get_state_time_lengths().decelerating
        self.deceleration = deceleration_factor(wheel.speed, self.max_age)

    def tick(self, wheel: Wheel) -> SpinPhase | None:
        wheel.speed *= self.deceleration
        self.age += 1
        if self.age > self.max_age:
            return PostSpinPhase()
        return None

    def is_spinning(self) -> bool:
        return True


class PostSpinPhase(SpinPhase):
    """Wheel stopped on a result; clicking spins again."""

    def enter(self, wheel: Wheel) -> None:
        wheel.speed = 0.0
        wheel.spin_is_done()

    def click(self, wheel: Wheel) -> SpinPhase | None:
        return AcceleratingPhase()
