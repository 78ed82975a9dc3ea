"""Launch settings chosen before a simulation starts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .vector import Vector

EPSILON = 0.001
RESISTANCE_ACTIVE_THRESHOLD = 0.001

HEIGHT_LIMITS = (100.0, 300.0)
SPEED_LIMITS = (1.0, 130.0)
ANGLE_LIMITS = (1.0, 90.0)


class GravityMode(Enum):
    """Celestial bodies the projectile can be launched on."""

    EARTH = ("Earth", -9.807, 0.02)
    MOON = ("Moon", -1.625, 0.0)
    MARS = ("Mars", -3.728, 0.006)

    def __init__(self, label: str, gravity: float, resistance: float) -> None:
        self.label = label
        self.gravity = gravity
        self.resistance = resistance


_NEXT_MODE = {
    GravityMode.EARTH: GravityMode.MOON,
    GravityMode.MOON: GravityMode.MARS,
    GravityMode.MARS: GravityMode.EARTH,
}


def gravity_mode_for(gravity: float) -> GravityMode | None:
    """The gravity mode whose acceleration matches, or None if none does."""
    for mode in GravityMode:
        if abs(gravity - mode.gravity) < EPSILON:
            return mode
    return None


def _clamp(value: float, limits: tuple[float, float]) -> float:
    low, high = limits
    return max(low, min(high, value))


def _fixed(value: float) -> str:
    return f"{value:f}"


@dataclass
class Setup:
    """User-adjustable launch parameters."""

    height: float = 100.0
    speed: float = 50.0
    angle: float = 45.0
    gravity: float = GravityMode.EARTH.gravity
    resistance_coefficient: float = GravityMode.EARTH.resistance

    def adjust_height(self, delta: float) -> float:
        """Change the launch height, kept within 100..300."""
        self.height = _clamp(self.height + delta, HEIGHT_LIMITS)
        return self.height

    def adjust_speed(self, delta: float) -> float:
        """Change the launch speed, kept within 1..130."""
        self.speed = _clamp(self.speed + delta, SPEED_LIMITS)
        return self.speed

    def adjust_angle(self, delta: float) -> float:
        """Change the launch angle in degrees, kept within 1..90."""
        self.angle = _clamp(self.angle + delta, ANGLE_LIMITS)
        return self.angle

    @property
    def air_resistance_active(self) -> bool:
        """Whether the drag coefficient is large enough to count as active."""
        return self.resistance_coefficient > RESISTANCE_ACTIVE_THRESHOLD

    def toggle_air_resistance(self) -> float:
        """Switch air resistance on or off for the current body; the Moon has none."""
        mode = gravity_mode_for(self.gravity)
        if mode is GravityMode.MOON:
            self.resistance_coefficient = 0.0
        elif mode is not None:
            self.resistance_coefficient = (
                0.0 if self.air_resistance_active else mode.resistance
            )
        return self.resistance_coefficient

    def cycle_gravity(self) -> GravityMode:
        """Move Earth -> Moon -> Mars -> Earth, resetting the drag coefficient."""
        current = gravity_mode_for(self.gravity)
        new_mode = _NEXT_MODE[current] if current is not None else GravityMode.EARTH
        self.gravity = new_mode.gravity
        self.resistance_coefficient = new_mode.resistance
        return new_mode

    def launch_velocity(self) -> Vector:
        """Initial velocity from the chosen speed and angle."""
        radians = math.radians(self.angle)
        return Vector(self.speed * math.cos(radians), self.speed * math.sin(radians))

    def status_lines(self) -> list[str]:
        """Text lines describing the current settings."""
        if self.air_resistance_active:
            air = f"(Air resistance is active: {_fixed(self.resistance_coefficient)})"
        else:
            air = "(Air resistance is not active)"
        mode = gravity_mode_for(self.gravity) or GravityMode.MARS
        return [
            f" The Speed of the Projectile is(1-130): {_fixed(self.speed)}",
            f" The Angle of the Projectile is(1-90): {_fixed(self.angle)}",
            f" The Height of the Projectile is(100-300): {_fixed(self.height)}",
            air,
            f"(Gravity mode = {mode.label})",
        ]