# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for the energy/momentum readouts of the demos and for verifying
simulation correctness. In a closed system with no dissipation and no fixed
bodies, total momentum stays constant; kinetic energy is conserved by
collisions only when e = 1.
"""
from __future__ import annotations
import math

import numpy as np

from ..types import Body, PendulumState
from ..constants import MIN_SEPARATION


def kinetic_energy(bodies: list[Body]) -> float:
    """
    Total kinetic energy T = Σ ½ m v² of the movable bodies.
    """
    ke = 0.0
    for b in bodies:
        if b.fixed:
            continue
        ke += b.kinetic_energy
    return ke


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Total linear momentum P = Σ m v.

    Returns:
        Total momentum vector [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if b.fixed:
            continue
        p += b.momentum
    return p


def potential_energy(bodies: list[Body], G: float, min_distance: float = MIN_SEPARATION) -> float:
    """Gravitational potential energy U = -Σ G m_i m_j / d over pairs."""
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            d = max(float(np.linalg.norm(bodies[j].position - bodies[i].position)), min_distance)
            u -= G * bodies[i].effective_mass * bodies[j].effective_mass / d
    return u


def pendulum_energy(state: PendulumState) -> float:
    """
    Mechanical energy per unit mass of a pendulum:
        E/m = ½ L² ω² + g L (1 - cos θ)
    """
    L = state.length
    return 0.5 * L * L * state.angular_velocity ** 2 + state.gravity * L * (1.0 - math.cos(state.angle))
