"""Time-stepped projectile flight with bouncing, peak and range tracking."""

from __future__ import annotations

import copy

from .projectile import Projectile
from .settings import GravityMode, gravity_mode_for
from .vector import Vector

TRACE_INTERVAL = 0.2
STOP_SPEED = 1.0
STOP_HEIGHT_MARGIN = 5.0

_BOUNCE = {
    GravityMode.EARTH: (0.8, 0.6),
    GravityMode.MOON: (0.9, 0.8),
    GravityMode.MARS: (0.85, 0.7),
}


def bounce_factors(gravity: float) -> tuple[float, float] | None:
    """Horizontal and vertical velocity retained on a bounce, or None if unknown."""
    mode = gravity_mode_for(gravity)
    return _BOUNCE.get(mode) if mode is not None else None


def _fixed(value: float) -> str:
    return f"{value:f}"


class Simulation:
    """State of one launch: projectile, elapsed time and reached landmarks."""

    def __init__(
        self,
        *,
        position_x: float = 10.0,
        position_y: float = 100.0,
        velocity: Vector | None = None,
        gravity: float = GravityMode.EARTH.gravity,
        resistance_coefficient: float = GravityMode.EARTH.resistance,
        time_scale: float = 3.0,
        window_height: float = 1000.0,
        wind: Vector | None = None,
        shape_radius: float = 10.0,
    ) -> None:
        self.position_x = position_x
        self.position_y = position_y
        self.launch_velocity = copy.copy(velocity) if velocity else Vector(120.0, 50.0)
        self.resistance_coefficient = resistance_coefficient
        self.time_scale = time_scale
        self.window_height = window_height
        self.wind = copy.copy(wind) if wind else Vector(0.0, 0.0)
        self.shape_radius = shape_radius
        self.projectile = Projectile(
            Vector(position_x, position_y),
            self.launch_velocity,
            Vector(0.0, gravity),
        )
        self._clear()

    def _clear(self) -> None:
        self.total_time = 0.0
        self.time_accumulator = 0.0
        self.first_touch_time = 0.0
        self.max_height_reached = False
        self.first_range_reached = False
        self.final_range_reached = False
        self.max_height_position = Vector()
        self.first_range_position = Vector()
        self.final_range_position = Vector()
        self.trace: list[tuple[float, float]] = []
        self.shape_position = self._to_screen(self.projectile.position)

    def _to_screen(self, position: Vector) -> tuple[float, float]:
        return (position.x, self.window_height - position.y)

    @property
    def gravity(self) -> float:
        """Vertical acceleration acting on the projectile."""
        return self.projectile.acceleration.y

    def reset(self) -> None:
        """Put the projectile back at its launch point and forget all progress."""
        self.projectile.position = Vector(self.position_x, self.position_y)
        self.projectile.velocity = copy.copy(self.launch_velocity)
        self._clear()

    def step(self, dt: float) -> None:
        """Advance the simulation by dt seconds of wall time."""
        self.time_accumulator += dt * self.time_scale
        self._move(dt)
        self._check_max_height()
        self._check_first_range()
        self._check_final_range()

    def _move(self, dt: float) -> None:
        if self.final_range_reached:
            return
        projectile = self.projectile
        projectile.update_with_air_resistance(
            self.time_scale * dt, self.resistance_coefficient, self.wind
        )
        if self.time_accumulator >= TRACE_INTERVAL:
            self.trace.append(self.shape_position)
            self.time_accumulator = 0.0
        self.total_time += dt * self.time_scale

        if projectile.position.y <= self.position_y and projectile.velocity.y < 0:
            factors = bounce_factors(self.gravity)
            if factors is not None:
                keep_x, keep_y = factors
                projectile.velocity = Vector(
                    projectile.velocity.x * keep_x, -projectile.velocity.y * keep_y
                )
            projectile.position = Vector(projectile.position.x, self.position_y)

        self.shape_position = self._to_screen(projectile.position)

    def _check_max_height(self) -> None:
        if not self.max_height_reached and self.projectile.velocity.y <= 0:
            self.max_height_position = copy.copy(self.projectile.position)
            self.max_height_reached = True

    def _check_first_range(self) -> None:
        if not self.first_range_reached and self.projectile.position.y <= self.position_y:
            self.first_range_reached = True
            self.first_touch_time = self.total_time
            self.first_range_position = Vector(self.projectile.position.x, self.position_y)

    def _check_final_range(self) -> None:
        projectile = self.projectile
        if (
            not self.final_range_reached
            and projectile.position.y <= self.position_y + STOP_HEIGHT_MARGIN
            and projectile.speed < STOP_SPEED
        ):
            self.final_range_reached = True
            self.final_range_position = Vector(projectile.position.x, self.position_y)
            projectile.position = copy.copy(self.final_range_position)
            projectile.velocity = Vector(0.0, 0.0)
        if self.final_range_reached:
            self.shape_position = (
                self.final_range_position.x - self.shape_radius,
                self.window_height - self.position_y - self.shape_radius,
            )

    def info_text(self) -> str:
        """Multi-line readout of position, speed, gravity and times."""
        position = self.projectile.position
        return (
            f"X: {_fixed(position.x - self.position_x)}"
            f"\t\t\tFirst Touch Range: {_fixed(self.first_range_position.x - self.position_x)}"
            f"\nY: {_fixed(position.y - self.position_y)}"
            f"\t\t\t Max Height: {_fixed(self.max_height_position.y - self.position_y)}"
            f"\nSpeed: {_fixed(self.projectile.speed)} m/s"
            f"\nGravity: {_fixed(abs(self.projectile.acceleration.y))} m/s^2"
            f"\nTime: {_fixed(self.total_time)}"
            f"\t\tFirst Touch Time: {_fixed(self.first_touch_time)} s"
        )

    def max_height_label(self) -> str:
        """Label shown at the peak of the flight."""
        return f"Max Height: {_fixed(self.max_height_position.y - self.position_y)} m"

    def first_range_label(self) -> str:
        """Label for the distance to the first ground contact."""
        return f"First Range: {_fixed(self.first_range_position.x - self.position_x)} m"

    def final_range_label(self) -> str:
        """Label for the distance at which the projectile came to rest."""
        return f"Final Range: {_fixed(self.final_range_position.x - self.position_x)} m"