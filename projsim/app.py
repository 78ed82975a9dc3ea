"""Interactive window: a setup screen for launch settings and the live flight view."""

from __future__ import annotations

import argparse
import math
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .settings import Setup  # noqa: E402
from .simulation import Simulation  # noqa: E402
from .vector import Vector  # noqa: E402

WINDOW_WIDTH = 1800
WINDOW_HEIGHT = 1000
POSITION_X = 10.0
FRAME_RATE = 120
INPUT_DELAY = 0.15
TITLE = "PROJECTILE SIMULATION"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)

PROJECTILE_RADIUS = 10
PEAK_RADIUS = 5

_FONT_PATHS = ("C:/Windows/Fonts/arial.ttf", "arial.ttf", "fonts/arial.ttf")

_INSTRUCTIONS = (
    "-----Press enter to start the simulation-----\n"
    "-----Use up and down arrow for the height-----\n"
    "-----Use left and right arrow for the speed-----\n"
    "-----Press A and D for the angle of the projectile-----\n"
    "-----Press K to activate and deactivate the air resistance-----\n"
    "-----Press G to change the gravity of the projectile-----"
)

_WATCHED_KEYS = (
    pygame.K_UP,
    pygame.K_DOWN,
    pygame.K_LEFT,
    pygame.K_RIGHT,
    pygame.K_a,
    pygame.K_d,
    pygame.K_k,
    pygame.K_g,
    pygame.K_RETURN,
    pygame.K_r,
)

Point = tuple[float, float]


def _rotate(px: float, py: float, degrees: float) -> Point:
    radians = math.radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return (px * cos - py * sin, px * sin + py * cos)


def velocity_arrow(
    position: Vector, speed: float, angle: float, window_height: float
) -> tuple[list[Point], list[Point]]:
    """Screen polygons (shaft, head) of an arrow showing speed and angle in degrees."""
    length = speed * 1.5
    shaft = length - 10
    ox = position.x + 10
    oy = window_height - position.y + 10
    rotation = -angle

    body = []
    for px, py in ((0.0, 0.0), (shaft, 0.0), (shaft, 3.0), (0.0, 3.0)):
        rx, ry = _rotate(px, py, rotation)
        body.append((ox + rx, oy + ry))

    bx, by = _rotate(shaft, 0.0, rotation)
    base = (ox + bx, oy + by)
    head = []
    for px, py in ((15.0, 0.0), (0.0, -10.0), (0.0, 10.0)):
        rx, ry = _rotate(px, py, rotation)
        head.append((base[0] + rx, base[1] + ry))
    return body, head


class App:
    """Setup screen and flight view driven by keyboard input."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        *,
        setup: Setup | None = None,
        window_height: float = WINDOW_HEIGHT,
    ) -> None:
        self.surface = surface
        self.setup = setup if setup is not None else Setup()
        self.window_height = window_height
        self.in_setup = True
        self.simulation = self._new_simulation()
        self._input_timer = 0.0
        self._fonts: dict[int, pygame.font.Font] = {}
        self._info = self.simulation.info_text()
        self._max_height_label = self.simulation.max_height_label()

    def _new_simulation(self) -> Simulation:
        return Simulation(
            position_x=POSITION_X,
            position_y=self.setup.height,
            velocity=self.setup.launch_velocity(),
            gravity=self.setup.gravity,
            resistance_coefficient=self.setup.resistance_coefficient,
            window_height=self.window_height,
        )

    def _launch(self) -> None:
        self.simulation = self._new_simulation()
        self.in_setup = False
        self._info = self.simulation.info_text()
        self._max_height_label = self.simulation.max_height_label()

    def _apply_setup_input(self, pressed: set[int]) -> bool:
        """Apply held setup keys; True if any of them did something."""
        detected = False
        setup = self.setup
        if pygame.K_UP in pressed:
            setup.adjust_height(5)
            detected = True
        if pygame.K_DOWN in pressed:
            setup.adjust_height(-5)
            detected = True
        if pygame.K_RIGHT in pressed:
            setup.adjust_speed(5)
            detected = True
        if pygame.K_LEFT in pressed:
            setup.adjust_speed(-5)
            detected = True
        if pygame.K_a in pressed:
            setup.adjust_angle(1)
            detected = True
        if pygame.K_d in pressed:
            setup.adjust_angle(-1)
            detected = True
        if pygame.K_k in pressed:
            setup.toggle_air_resistance()
            detected = True
        if pygame.K_g in pressed:
            setup.cycle_gravity()
            detected = True
        if pygame.K_RETURN in pressed:
            self._launch()
            detected = True
        return detected

    def _update(self, dt: float, pressed: set[int]) -> None:
        """Advance one frame of dt seconds with the given keys held."""
        self._input_timer += dt
        if self.in_setup:
            if self._input_timer > INPUT_DELAY and self._apply_setup_input(pressed):
                self._input_timer = 0.0
            return
        self._info = self.simulation.info_text()
        self._max_height_label = self.simulation.max_height_label()
        self.simulation.step(dt)
        if pygame.K_r in pressed:
            self.simulation.reset()
            self.in_setup = True

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            path = next((p for p in _FONT_PATHS if os.path.exists(p)), None)
            font = pygame.font.Font(path, size)
            self._fonts[size] = font
        return font

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("no surface to draw on")
        return self.surface

    def _text(self, text: str, size: int, x: float, y: float) -> None:
        surface = self._target()
        font = self._font(size)
        for row, line in enumerate(text.split("\n")):
            rendered = font.render(line.expandtabs(4), True, BLACK)
            surface.blit(rendered, (x, y + row * font.get_linesize()))

    def _arrow(self, position: Vector, speed: float, angle: float) -> None:
        surface = self._target()
        body, head = velocity_arrow(position, speed, angle, self.window_height)
        pygame.draw.polygon(surface, BLACK, body)
        pygame.draw.polygon(surface, BLACK, head)

    def _circle(self, top_left: Point, radius: int, color: tuple[int, int, int]) -> None:
        center = (top_left[0] + radius, top_left[1] + radius)
        pygame.draw.circle(self._target(), color, center, radius)

    def _line(self, start: Point, end: Point) -> None:
        pygame.draw.line(self._target(), BLACK, start, end)

    def draw_scene(self) -> None:
        """Draw the flight: projectile, readouts, landmarks and trace."""
        sim = self.simulation
        wh = self.window_height
        ground = wh - sim.position_y
        self._text("Press R for setup mode", 20, 1575, 10)
        self._circle(sim.shape_position, PROJECTILE_RADIUS, GREEN)

        if not sim.final_range_reached:
            velocity = sim.projectile.velocity
            angle = math.degrees(math.atan2(velocity.y, velocity.x))
            self._arrow(sim.projectile.position, sim.projectile.speed, angle)
        self._text(self._info, 16, 10, 10)

        if sim.max_height_reached:
            peak = sim.max_height_position
            self._text(self._max_height_label, 16, peak.x - 50, wh - 20 - peak.y)
            self._circle((peak.x, wh - peak.y), PEAK_RADIUS, BLACK)
            self._line((peak.x + 5, ground), (peak.x + 5, wh - peak.y))

        if sim.final_range_reached:
            final = sim.final_range_position
            self._line((sim.position_x, ground), (final.x, ground))
            self._text(sim.final_range_label(), 16, final.x / 2 - 50, ground - 30)

        if sim.first_range_reached:
            first = sim.first_range_position
            self._line((sim.position_x, ground), (first.x, ground))
            self._text(sim.first_range_label(), 16, first.x / 2 - 50, ground - 50)

        if len(sim.trace) >= 2:
            pygame.draw.lines(self._target(), BLACK, False, sim.trace)

    def draw_setup(self) -> None:
        """Draw the setup screen with the current settings and controls."""
        lines = self.setup.status_lines()
        self._text("WELCOME TO THE SETUP MODE", 64, 350, 200)
        self._text("\n".join(lines[:3]), 32, 470, 300)
        self._text(_INSTRUCTIONS, 32, 470, 450)
        self._text(lines[3], 32, 1320, 600)
        self._text(lines[4], 32, 1240, 640)

        height = self.setup.height
        self._circle((POSITION_X, self.window_height - height), PROJECTILE_RADIUS, GREEN)
        self._arrow(Vector(POSITION_X, height), self.setup.speed, self.setup.angle)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            if self.surface is None:
                self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            clock.tick()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                if not running:
                    break
                dt = clock.tick(FRAME_RATE) / 1000.0
                keys = pygame.key.get_pressed()
                pressed = {key for key in _WATCHED_KEYS if keys[key]}
                self._update(dt, pressed)

                self.surface.fill(WHITE)
                if self.in_setup:
                    self.draw_setup()
                else:
                    self.draw_scene()
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive projectile simulation."""
    parser = argparse.ArgumentParser(
        prog="projsim", description="Interactive projectile motion simulation."
    )
    parser.parse_args(argv)
    App().run()
    return 0