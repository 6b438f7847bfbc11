import dataclasses
import math

import numpy as np
import pytest

from labsim.config import (
    BodySpec,
    CollisionConfig,
    OrbitalConfig,
    PendulumConfig,
    WaveConfig,
    build_bodies,
    circular_orbit_speed,
    solar_system_preset,
)
from labsim.types import Bounds


def test_pendulum_from_dict_camel_case():
    cfg = PendulumConfig.from_dict({"length": 2, "initialAngleDeg": 45, "damping": 0.1, "unknown": 1})
    assert cfg == PendulumConfig(length=2.0, gravity=9.8, initial_angle_deg=45.0, damping=0.1)


def test_orbital_from_dict():
    cfg = OrbitalConfig.from_dict({
        "gravitationalConstant": 1.5,
        "timeScale": 3,
        "maxSpeed": 20,
        "bodies": [
            {"mass": 100, "position": [0, 0], "fixed": True, "name": "Sun"},
            {"mass": 1, "initialPosition": [10, 0], "initialVelocity": [0, 2]},
        ],
    })
    assert cfg.gravitational_constant == 1.5
    assert cfg.time_scale == 3.0
    assert cfg.max_speed == 20.0
    assert cfg.bodies[0].fixed and cfg.bodies[0].name == "Sun"
    assert cfg.bodies[1].position == (10.0, 0.0)
    assert cfg.bodies[1].velocity == (0.0, 2.0)


def test_orbital_from_dict_default_bodies_do_not_follow_g():
    a = OrbitalConfig.from_dict({"gravitationalConstant": 5.0})
    b = OrbitalConfig.from_dict({"gravitationalConstant": 3.0})
    assert a.bodies == b.bodies == solar_system_preset()
    assert a.gravitational_constant == 5.0
    assert cfg.max_speed is None


def test_collision_from_dict_accepts_elasticity_alias():
    cfg = CollisionConfig.from_dict({"elasticity": 0.3, "useGravity": True, "bounds": [0, 0, 200, 100]})
    assert cfg.restitution == 0.3
    assert cfg.use_gravity
    assert cfg.bounds == Bounds(0.0, 0.0, 200.0, 100.0)
    # default balls are laid out inside the given box
    for spec in cfg.bodies:
        assert 0.0 < spec.position[0] < 200.0
        assert 0.0 < spec.position[1] < 100.0


def test_wave_from_dict_wave_type_alias():
    cfg = WaveConfig.from_dict({"waveType": "square", "frequency": 3, "samples": 50})
    assert cfg.shape == "square"
    assert cfg.frequency == 3.0
    assert cfg.samples == 50


def test_configs_copy_caller_sequences():
    pos = [1.0, 2.0]
    spec = BodySpec(mass=1.0, position=pos)
    pos[0] = 99.0
    assert spec.position == (1.0, 2.0)

    bodies = [spec]
    cfg = OrbitalConfig(bodies=bodies)
    bodies.append(spec)
    assert len(cfg.bodies) == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.time_scale = 2.0


def test_built_bodies_do_not_share_arrays():
    specs = (BodySpec(mass=1.0, position=(1.0, 2.0), velocity=(3.0, 4.0)),)
    a = build_bodies(specs)
    b = build_bodies(specs)
    a[0].position += 10.0
    assert np.array_equal(b[0].position, [1.0, 2.0])
    assert a[0].id == 0


def test_preset_speeds_are_circular():
    g = 3.0
    preset = solar_system_preset(g)
    star = preset[0]
    assert star.fixed
    for planet in preset[1:]:
        r = math.dist(planet.position, star.position)
        v = math.hypot(*planet.velocity)
        assert v == pytest.approx(math.sqrt(g * star.mass / r))


def test_circular_orbit_speed_degenerate():
    assert circular_orbit_speed(3.0, 100.0, 0.0) == 0.0
    assert circular_orbit_speed(0.0, 100.0, 5.0) == 0.0
