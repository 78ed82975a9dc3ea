import pytest

from projsim.simulation import Simulation, bounce_factors
from projsim.vector import Vector

DT = 1 / 120


def run_until(sim, condition, limit=200_000):
    for _ in range(limit):
        if condition(sim):
            return True
        sim.step(DT)
    return condition(sim)


@pytest.mark.parametrize(
    "gravity, expected",
    [(-9.807, (0.8, 0.6)), (-1.625, (0.9, 0.8)), (-3.728, (0.85, 0.7))],
)
def test_bounce_factors_known(gravity, expected):
    assert bounce_factors(gravity) == expected


def test_bounce_factors_unknown():
    assert bounce_factors(-5.0) is None


def test_initial_state():
    sim = Simulation()
    assert sim.projectile.position == Vector(10.0, 100.0)
    assert sim.projectile.velocity == Vector(120.0, 50.0)
    assert sim.trace == []
    assert not sim.max_height_reached
    assert sim.shape_position == (10.0, 900.0)


def test_step_advances_scaled_time():
    sim = Simulation(time_scale=3.0)
    sim.step(0.01)
    sim.step(0.01)
    assert sim.total_time == pytest.approx(0.06)
    assert sim.projectile.position.x > 10.0


def test_max_height_found_near_peak():
    sim = Simulation(velocity=Vector(10.0, 30.0), resistance_coefficient=0.0)
    highest = sim.projectile.position.y
    while not sim.max_height_reached:
        sim.step(DT)
        highest = max(highest, sim.projectile.position.y)
    assert sim.max_height_position.y > sim.position_y
    assert sim.max_height_position.y == pytest.approx(highest, abs=1.0)
    assert sim.max_height_label().startswith("Max Height: ")


def test_first_range_is_on_ground_level():
    sim = Simulation(velocity=Vector(20.0, 20.0))
    assert run_until(sim, lambda s: s.first_range_reached)
    assert sim.first_range_position.y == sim.position_y
    assert sim.first_range_position.x > sim.position_x
    assert sim.first_touch_time == pytest.approx(sim.total_time)
    assert sim.first_range_label().endswith(" m")


def test_bounce_keeps_projectile_above_ground():
    sim = Simulation(velocity=Vector(20.0, 20.0))
    assert run_until(sim, lambda s: s.first_range_reached)
    assert sim.projectile.position.y >= sim.position_y
    assert sim.projectile.velocity.y >= 0


def test_projectile_comes_to_rest():
    sim = Simulation(velocity=Vector(20.0, 20.0))
    assert run_until(sim, lambda s: s.final_range_reached)
    assert sim.projectile.velocity == Vector(0.0, 0.0)
    assert sim.projectile.position.y == sim.position_y
    assert sim.final_range_position.x >= sim.first_range_position.x
    assert sim.shape_position == (
        sim.final_range_position.x - sim.shape_radius,
        sim.window_height - sim.position_y - sim.shape_radius,
    )


def test_no_motion_after_rest():
    sim = Simulation(velocity=Vector(20.0, 20.0))
    assert run_until(sim, lambda s: s.final_range_reached)
    position = Vector(sim.projectile.position.x, sim.projectile.position.y)
    elapsed = sim.total_time
    sim.step(DT)
    assert sim.projectile.position == position
    assert sim.total_time == elapsed


def test_trace_records_positions():
    sim = Simulation()
    for _ in range(120):
        sim.step(DT)
    assert len(sim.trace) > 0
    assert all(len(point) == 2 for point in sim.trace)


def test_reset_restores_launch_state():
    sim = Simulation(velocity=Vector(20.0, 20.0))
    assert run_until(sim, lambda s: s.first_range_reached)
    sim.reset()
    assert sim.projectile.position == Vector(10.0, 100.0)
    assert sim.projectile.velocity == Vector(20.0, 20.0)
    assert sim.total_time == 0.0
    assert sim.trace == []
    assert not sim.first_range_reached
    assert sim.first_range_position == Vector()


def test_info_text_layout():
    sim = Simulation()
    lines = sim.info_text().split("\n")
    assert len(lines) == 5
    assert lines[0].startswith("X: 0.000000")
    assert lines[3] == "Gravity: 9.807000 m/s^2"
    assert lines[4].endswith(" s")


def test_final_range_label_format():
    sim = Simulation()
    assert sim.final_range_label() == "Final Range: -10.000000 m"