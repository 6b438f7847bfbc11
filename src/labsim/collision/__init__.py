# MIT License (see LICENSE)
"""
Collision detection and response for the collision demo.

This subpackage provides:
    - Contact tests: overlap and closing-velocity checks.
    - Resolver: 1-D impulse along the contact normal with restitution.
    - Boundary: wall bounces against an axis-aligned container.

Typical usage:
    from labsim.collision import resolve_pairs, resolve_boundary

    for body in bodies:
        resolve_boundary(body, bounds, restitution=0.8)
    resolve_pairs(bodies, restitution=0.8)
"""
from .resolver import (
    contact_normal,
    in_contact,
    is_closing,
    resolve,
    resolve_pairs,
    resolve_boundary,
    separate,
)

__all__ = [
    # Contact tests
    "contact_normal",
    "in_contact",
    "is_closing",
    # Response
    "resolve",
    "resolve_pairs",
    "resolve_boundary",
    "separate",
]
