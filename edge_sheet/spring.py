"""
Spring animation runtime.
A mass-spring-damper integrated in fixed 1 ms steps, plus the narrow
AnimationRuntime interface the controller drives.
"""

import math
from typing import Optional, Protocol, Union, runtime_checkable

import msgspec

from .constants import ANIMATION_CONFIG
from .models import Offset


class SpringConfig(msgspec.Struct, frozen=True):
    mass: float = ANIMATION_CONFIG["mass"]
    tension: float = ANIMATION_CONFIG["tension"]
    friction: float = ANIMATION_CONFIG["friction"]
    precision: float = 0.01


@runtime_checkable
class AnimationRuntime(Protocol):
    """Anything that smooths a value toward a target"""

    def animate_to(
        self,
        target: Union[Offset, float],
        immediate: bool = False,
        initial_velocity: float = 0.0,
    ) -> None:
        ...


class Spring:
    """
    One-dimensional spring.

    Velocity is in units per millisecond, matching gesture velocities, so a
    release speed can seed the animation directly.
    """

    def __init__(self, value: float = 0.0, config: Optional[SpringConfig] = None):
        self.config = config or SpringConfig()
        self.value = float(value)
        self.target = float(value)
        self.velocity = 0.0

    @property
    def settled(self) -> bool:
        return (
            abs(self.velocity) <= self.config.precision
            and abs(self.target - self.value) <= self.config.precision
        )

    def animate_to(self, target: float, immediate: bool = False, initial_velocity: float = 0.0) -> None:
        """
        Retarget the spring.

        Args:
            target: New resting value
            immediate: Jump straight to the target without animating
            initial_velocity: Speed to start with; oriented toward the target.
                Zero keeps the current momentum.
        """
        self.target = float(target)

        if immediate:
            self.value = self.target
            self.velocity = 0.0
            return

        if initial_velocity:
            self.velocity = math.copysign(abs(initial_velocity), self.target - self.value)

    def step(self, dt_ms: float) -> float:
        """Advance by dt_ms milliseconds and return the new value"""
        if self.settled:
            self.value = self.target
            self.velocity = 0.0
            return self.value

        mass = self.config.mass
        tension = self.config.tension
        friction = self.config.friction

        for _ in range(max(1, int(round(dt_ms)))):
            spring_force = -tension * 0.000001 * (self.value - self.target)
            damping_force = -friction * 0.001 * self.velocity
            acceleration = (spring_force + damping_force) / mass
            self.velocity += acceleration
            self.value += self.velocity

            if self.settled:
                self.value = self.target
                self.velocity = 0.0
                break

        return self.value


class OffsetSpring:
    """Two springs animated together as one Offset"""

    def __init__(self, value: Optional[Offset] = None, config: Optional[SpringConfig] = None):
        value = value or Offset()
        self.x = Spring(value.x, config)
        self.y = Spring(value.y, config)

    @property
    def value(self) -> Offset:
        return Offset(x=self.x.value, y=self.y.value)

    @property
    def settled(self) -> bool:
        return self.x.settled and self.y.settled

    def animate_to(self, target: Offset, immediate: bool = False, initial_velocity: float = 0.0) -> None:
        self.x.animate_to(target.x, immediate, initial_velocity if target.x != self.x.value else 0.0)
        self.y.animate_to(target.y, immediate, initial_velocity if target.y != self.y.value else 0.0)

    def step(self, dt_ms: float) -> Offset:
        self.x.step(dt_ms)
        self.y.step(dt_ms)
        return self.value
