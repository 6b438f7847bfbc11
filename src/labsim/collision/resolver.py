# MIT License (see LICENSE)
"""
Impulse-based collision response for circular bodies.

The contact normal is n = normalize(p_B - p_A). Each velocity is split into a
normal and a tangential component; the normal components follow the 1-D
two-body law with coefficient of restitution e:

    v_nA' = ((m_A - e·m_B)·v_nA + (1 + e)·m_B·v_nB) / (m_A + m_B)
    v_nB' = ((m_B - e·m_A)·v_nB + (1 + e)·m_A·v_nA) / (m_A + m_B)

Tangential components are unchanged (frictionless contact). This preserves
m_A v_A + m_B v_B for any e, preserves kinetic energy for e = 1 and loses
energy for e < 1.

Walls are treated as bodies of infinite mass: the normal velocity component
is negated and scaled by e.

Key simplifications:
- Simultaneous contacts are resolved pair by pair in ascending index order.
- Overlapping bodies are not pushed apart unless positional correction is
  requested, so deep interpenetration can remain visible.
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import FALLBACK_NORMAL
from ..types import Body, Bounds
from ..util import clamp, f64, norm

logger = logging.getLogger(__name__)


def contact_normal(a: Body, b: Body) -> tuple[np.ndarray, float]:
    """
    Unit normal from a toward b and the centre distance.

    Coincident centres use FALLBACK_NORMAL.
    """
    d = b.position - a.position
    dist = norm(d)
    if dist < 1e-12:
        return f64(FALLBACK_NORMAL), dist
    return d / dist, dist


def in_contact(a: Body, b: Body) -> bool:
    """Overlap/contact test: |p_A - p_B| ≤ r_A + r_B."""
    _, dist = contact_normal(a, b)
    return dist <= a.radius + b.radius


def is_closing(a: Body, b: Body) -> bool:
    """True when the bodies approach each other along the contact normal."""
    n, _ = contact_normal(a, b)
    return float(np.dot(b.velocity - a.velocity, n)) < 0.0


def resolve(a: Body, b: Body, restitution: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Post-impact velocities of two bodies in contact.

    Does not modify the bodies. A fixed body behaves as infinitely heavy;
    non-positive masses are taken as MIN_MASS.

    Args:
        a: First body.
        b: Second body.
        restitution: Coefficient of restitution, clamped into [0, 1].

    Returns:
        Tuple (v_A', v_B').
    """
    e = clamp(restitution, 0.0, 1.0)
    n, _ = contact_normal(a, b)

    va, vb = a.velocity, b.velocity
    vna = float(np.dot(va, n))
    vnb = float(np.dot(vb, n))
    ta = va - vna * n
    tb = vb - vnb * n

    a_static = a.inv_mass == 0.0
    b_static = b.inv_mass == 0.0
    if a_static and b_static:
        return va.copy(), vb.copy()
    if a_static:
        vnb_new = vna - e * (vnb - vna)
        return va.copy(), tb + vnb_new * n
    if b_static:
        vna_new = vnb - e * (vna - vnb)
        return ta + vna_new * n, vb.copy()

    ma, mb = a.effective_mass, b.effective_mass
    total = ma + mb
    vna_new = ((ma - e * mb) * vna + (1.0 + e) * mb * vnb) / total
    vnb_new = ((mb - e * ma) * vnb + (1.0 + e) * ma * vna) / total
    return ta + vna_new * n, tb + vnb_new * n


def separate(a: Body, b: Body) -> None:
    """Push two overlapping bodies apart, each by half the overlap."""
    n, dist = contact_normal(a, b)
    overlap = a.radius + b.radius - dist
    if overlap <= 0.0:
        return
    if a.inv_mass == 0.0 and b.inv_mass == 0.0:
        return
    if a.inv_mass == 0.0:
        b.position = b.position + overlap * n
    elif b.inv_mass == 0.0:
        a.position = a.position - overlap * n
    else:
        a.position = a.position - 0.5 * overlap * n
        b.position = b.position + 0.5 * overlap * n


def resolve_pairs(bodies: list[Body], restitution: float, positional_correction: bool = False) -> int:
    """
    Resolve every touching, closing pair in ascending (i, j) order.

    Velocities are written back immediately, so later pairs see the result
    of earlier ones.

    Returns:
        Number of impacts resolved.
    """
    hits = 0
    n = len(bodies)
    for i in range(n):
        a = bodies[i]
        for j in range(i + 1, n):
            b = bodies[j]
            if not in_contact(a, b):
                continue
            if is_closing(a, b):
                a.velocity, b.velocity = resolve(a, b, restitution)
                logger.debug("impact between bodies %d and %d", a.id, b.id)
                hits += 1
            if positional_correction:
                separate(a, b)
    return hits


def resolve_boundary(body: Body, bounds: Bounds, restitution: float) -> bool:
    """
    Bounce a body off the container walls.

    For each wall the body touches while moving outward, the normal velocity
    component is negated and scaled by e and the body is placed back against
    the wall.

    Returns:
        True if any wall was hit.
    """
    if body.fixed:
        return False
    e = clamp(restitution, 0.0, 1.0)
    x, y = float(body.position[0]), float(body.position[1])
    vx, vy = float(body.velocity[0]), float(body.velocity[1])
    r = body.radius
    hit = False

    if x - r < bounds.x_min:
        x = bounds.x_min + r
        if vx < 0.0:
            vx = -vx * e
        hit = True
    elif x + r > bounds.x_max:
        x = bounds.x_max - r
        if vx > 0.0:
            vx = -vx * e
        hit = True

    if y - r < bounds.y_min:
        y = bounds.y_min + r
        if vy < 0.0:
            vy = -vy * e
        hit = True
    elif y + r > bounds.y_max:
        y = bounds.y_max - r
        if vy > 0.0:
            vy = -vy * e
        hit = True

    if hit:
        body.position = f64((x, y))
        body.velocity = f64((vx, vy))
    return hit
