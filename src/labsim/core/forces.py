# MIT License (see LICENSE)
"""
Force generators for the orbital simulation.

Newtonian gravity between every pair of bodies, F = G·m_i·m_j / d², directed
along the separation vector. Masses below MIN_MASS are taken as MIN_MASS, so
gravity is always attractive. Pairs are visited in ascending (i, j) order and
Newton's third law is applied per pair, so the summation order (and therefore
the floating-point result) is identical from run to run.

Complexity is O(N²); the demos use single digits to low tens of bodies.
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import MIN_SEPARATION
from ..types import Body

logger = logging.getLogger(__name__)


def pair_force(a: Body, b: Body, G: float, min_distance: float = MIN_SEPARATION) -> np.ndarray:
    """
    Gravitational force exerted on a by b.

    The separation d is clamped to min_distance, which bounds the force when
    two bodies (nearly) coincide.
    """
    r = b.position - a.position
    d = float(np.sqrt(r[0] * r[0] + r[1] * r[1]))
    if d < min_distance:
        if d == 0.0:
            # Direction is undefined; a zero force is the only symmetric answer.
            return np.zeros(2, dtype=np.float64)
        logger.debug("separation %.3g clamped to %.3g (bodies %d, %d)", d, min_distance, a.id, b.id)
        d_eff = min_distance
    else:
        d_eff = d
    magnitude = G * a.effective_mass * b.effective_mass / (d_eff * d_eff)
    return magnitude * (r / d)


def gravity_forces(bodies: list[Body], G: float, min_distance: float = MIN_SEPARATION) -> list[np.ndarray]:
    """
    Net gravitational force on every body.

    Args:
        bodies: Bodies in insertion order.
        G: Gravitational constant.
        min_distance: Separation clamp used by pair_force.

    Returns:
        List of force vectors aligned with bodies.
    """
    n = len(bodies)
    forces = [np.zeros(2, dtype=np.float64) for _ in range(n)]
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            f = pair_force(bi, bodies[j], G, min_distance)
            # Newton's third law
            forces[i] += f
            forces[j] -= f
    return forces


def net_force(bodies: list[Body], index: int, G: float, min_distance: float = MIN_SEPARATION) -> np.ndarray:
    """Net force on bodies[index] alone (used for force-vector display)."""
    target = bodies[index]
    f = np.zeros(2, dtype=np.float64)
    for j, other in enumerate(bodies):
        if j != index:
            f += pair_force(target, other, G, min_distance)
    return f
