# MIT License (see LICENSE)
"""
N-body gravitational integrator.

Each step:
  1. Accumulate pairwise gravity (forces.gravity_forces, fixed pair order).
  2. a = F_net / m for every movable body.
  3. Semi-implicit Euler with dt·time_scale: velocities, then positions.

Close encounters may produce large velocities and eject bodies; that is the
physics of the model and is not treated as an error. The optional max_speed
clamp exists only to keep a demo on screen.
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import MIN_SEPARATION
from ..types import Body
from ..util import norm
from .forces import gravity_forces
from .integrators import drift

logger = logging.getLogger(__name__)


def orbital_accelerations(bodies: list[Body], G: float, min_distance: float = MIN_SEPARATION) -> list[np.ndarray]:
    """Acceleration of every body; zero for fixed bodies."""
    forces = gravity_forces(bodies, G, min_distance)
    return [f * b.inv_mass for b, f in zip(bodies, forces)]


def orbital_step(
    bodies: list[Body],
    G: float,
    dt: float,
    time_scale: float = 1.0,
    max_speed: float | None = None,
    min_distance: float = MIN_SEPARATION,
) -> list[Body]:
    """
    Advance all bodies by one step.

    All accelerations are evaluated from the positions at the start of the
    step before any body moves.

    Args:
        bodies: Bodies in insertion order (modified in-place).
        G: Gravitational constant.
        dt: Timestep.
        time_scale: Multiplier applied to dt. Negative values are treated as 0.
        max_speed: Optional speed clamp (visualization safeguard).
        min_distance: Separation clamp for the force law.

    Returns:
        The same list, for chaining.
    """
    h = dt * max(0.0, time_scale)
    if h <= 0.0 or not bodies:
        return bodies

    accels = orbital_accelerations(bodies, G, min_distance)
    for b, a in zip(bodies, accels):
        if b.fixed:
            continue
        # velocity first, then position with the new velocity
        v = b.velocity + a * h
        if max_speed is not None:
            v = _limit_speed(b, v, max_speed)
        b.velocity = v
        drift(b, h)
    return bodies


def _limit_speed(body: Body, v: np.ndarray, max_speed: float) -> np.ndarray:
    s = norm(v)
    if s > max_speed > 0.0:
        logger.debug("body %d speed %.3g limited to %.3g", body.id, s, max_speed)
        return v * (max_speed / s)
    return v
