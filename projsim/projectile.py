"""Point-mass projectile with gravity, wind and linear air resistance."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .vector import Vector

EARTH_GRAVITY = -9.807


@dataclass
class Projectile:
    """A projectile with position, velocity and constant acceleration."""

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    acceleration: Vector = field(default_factory=lambda: Vector(0.0, EARTH_GRAVITY))

    def __post_init__(self) -> None:
        self.position = copy.copy(self.position)
        self.velocity = copy.copy(self.velocity)
        self.acceleration = copy.copy(self.acceleration)

    @property
    def speed(self) -> float:
        """Magnitude of the velocity."""
        return self.velocity.magnitude

    def set_gravity(self, gravity: float) -> None:
        """Set the vertical component of the acceleration."""
        self.acceleration.y = gravity

    def update(self, dt: float, wind: Vector | None = None) -> None:
        """Advance one step of length dt under gravity, optionally adding wind."""
        velocity = self.velocity + self.acceleration * dt
        if wind is not None:
            velocity = velocity + wind
        self.velocity = velocity
        self.position = self.position + velocity * dt

    def update_with_air_resistance(
        self, dt: float, coefficient: float, wind: Vector | None = None
    ) -> None:
        """Advance one step with drag proportional to speed, optionally adding wind."""
        speed = self.velocity.magnitude
        if speed == 0:
            drag = Vector(0.0, 0.0)
        else:
            drag = self.velocity.normalized() * (-coefficient * speed)
        total = self.acceleration + drag
        velocity = self.velocity + total * dt
        if wind is not None:
            velocity = velocity + wind
        self.velocity = velocity
        self.position = self.position + velocity * dt