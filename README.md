# projsim

An interactive projectile motion simulator. Choose a launch height, speed and
angle, pick a gravity mode (Earth, Moon or Mars) and watch the projectile fly,
bounce and come to rest. The view marks the maximum height, the first point
where the projectile touches the ground and the final range. It also draws the
path the projectile followed.

## Installation

```
pip install .
```

This installs `pygame`, which draws the window.

## Running

```
projsim
```

The window opens in setup mode:

| Key               | Action                                          |
|-------------------|-------------------------------------------------|
| Up / Down         | launch height, 100–300, in steps of 5           |
| Right / Left      | launch speed, 1–130, in steps of 5              |
| A / D             | launch angle, 1–90°, in steps of 1              |
| K                 | turn air resistance on or off                   |
| G                 | switch gravity: Earth → Moon → Mars → Earth     |
| Enter             | start the simulation                            |
| R                 | go back to setup mode while it is running       |

Keys held in setup mode repeat at most every 0.15 s. The Moon has no
atmosphere, so air resistance stays off there. Mars has a weaker drag
coefficient (0.006) than Earth (0.02). Each surface keeps a different share of
the projectile's velocity when it bounces. A run stops once the projectile is
on the ground and slower than 1 m/s.

The window text uses `arial.ttf` if one is found in `C:/Windows/Fonts/`, the
current directory or `fonts/`. Otherwise it uses pygame's default font.

## Using the library

The physics works without a window:

```python
from projsim.vector import Vector, find_angle, parse_vector
from projsim.projectile import Projectile
from projsim.settings import Setup, GravityMode, gravity_mode_for
from projsim.simulation import Simulation, bounce_factors

setup = Setup()
setup.adjust_angle(15)
setup.cycle_gravity()            # Earth -> Moon, drag switched off
print(setup.status_lines())

projectile = Projectile(Vector(10, 100), Vector(30, 40))
projectile.update_with_air_resistance(0.01, 0.02, Vector(0, 0))
print(projectile.speed)          # a property

sim = Simulation(position_y=setup.height, velocity=setup.launch_velocity(),
                 gravity=setup.gravity,
                 resistance_coefficient=setup.resistance_coefficient)
while not sim.final_range_reached:
    sim.step(1 / 120)
print(sim.final_range_label())
```

- `Vector` is a mutable 2D vector. It supports `+`, `-`, unary `-`, scaling
  with `*` and `/`, indexing with `[0]` and `[1]`, `dot()` and `normalized()`,
  and it has a `magnitude` property. `parse_vector("3 4")` reads two numbers,
  and `find_angle(v1, v2)` returns the angle between two vectors in degrees.
- `Projectile` holds a position, a velocity and an acceleration. Use
  `update(dt, wind)` for a plain step or
  `update_with_air_resistance(dt, coefficient, wind)` for a step with drag.
  `set_gravity(g)` changes the vertical acceleration.
- `Setup` holds the launch settings. `gravity_mode_for(g)` returns the
  `GravityMode` whose gravity matches `g`, or `None`.
- `Simulation.step(dt)` moves a run forward by `dt` seconds of wall time, which
  are multiplied by `time_scale`, 3 by default. `reset()` starts the run over.
  `info_text()`, `max_height_label()`, `first_range_label()` and
  `final_range_label()` give the readouts the window shows.
  `bounce_factors(g)` gives the horizontal and vertical velocity kept on a
  bounce.
- `projsim.app.App` is the window. `velocity_arrow()` computes the arrow
  polygons it draws.

## Limitations

Wind is supported by `Projectile` and `Simulation`, but the window always
launches with no wind. Runs are not saved, and nothing can be exported.