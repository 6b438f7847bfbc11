# MIT License (see LICENSE)
"""
Core type definitions shared by the simulations.

Defines the fundamental data structures:
- Body: a point mass with a collision radius, used by the orbital and
  collision experiments.
- PendulumState: angle, angular velocity and the parameters of one pendulum.
- Bounds: the axis-aligned container of the collision experiment.

The equations of motion are the usual Newtonian ones:
  - Linear:   F = m·a  →  a = F/m
  - Pendulum: α = -(g/L)·sin θ - c·ω
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

import numpy as np

from .constants import MIN_MASS
from .util import f64


WaveShape = Literal["sine", "square", "triangle", "sawtooth"]
WAVE_SHAPES: tuple[str, ...] = ("sine", "square", "triangle", "sawtooth")


@dataclass
class Body:
    """
    A 2D body with kinematic state, mass and a collision radius.

    Attributes:
        mass: Mass in kg. Expected > 0; non-positive masses are
            simulated as MIN_MASS (see effective_mass).
        position: Centre position [x, y].
        velocity: Linear velocity [vx, vy].
        radius: Collision radius (also the drawn radius).
        name: Display label.
        fixed: Immovable body. It still attracts others in the orbital demo.
        id: Insertion index assigned by the owning experiment.

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
    """
    mass: float
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    name: str = ""
    fixed: bool = False
    id: int = -1

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

    @property
    def effective_mass(self) -> float:
        """Mass clamped to at least MIN_MASS (NaN counts as MIN_MASS)."""
        m = float(self.mass)
        if not m >= MIN_MASS:
            return MIN_MASS
        return m

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m). Returns 0 for fixed bodies only."""
        if self.fixed:
            return 0.0
        return 1.0 / self.effective_mass

    @property
    def momentum(self) -> np.ndarray:
        return self.effective_mass * self.velocity

    @property
    def kinetic_energy(self) -> float:
        return 0.5 * self.effective_mass * float(np.dot(self.velocity, self.velocity))

    def summary(self) -> dict:
        """Plain-value view of the body for snapshots."""
        return {
            "id": self.id,
            "name": self.name,
            "mass": self.mass,
            "radius": self.radius,
            "fixed": self.fixed,
            "position": (float(self.position[0]), float(self.position[1])),
            "velocity": (float(self.velocity[0]), float(self.velocity[1])),
        }

    def copy(self) -> "Body":
        return Body(
            mass=self.mass,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            radius=self.radius,
            name=self.name,
            fixed=self.fixed,
            id=self.id,
        )


@dataclass(frozen=True)
class PendulumState:
    """
    State of a single damped pendulum.

    Attributes:
        angle: Displacement θ from the downward vertical in radians.
        angular_velocity: ω in rad/s.
        length: Rod length L in meters.
        gravity: Gravitational acceleration g in m/s².
        damping: Linear damping coefficient c in 1/s.
        time: Simulation clock in seconds.
    """
    angle: float
    angular_velocity: float = 0.0
    length: float = 1.0
    gravity: float = 9.8
    damping: float = 0.0
    time: float = 0.0


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned container [x_min, x_max] × [y_min, y_max]."""
    x_min: float = 0.0
    y_min: float = 0.0
    x_max: float = 800.0
    y_max: float = 500.0

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min
