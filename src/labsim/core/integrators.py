# MIT License (see LICENSE)
"""
Numerical integrators for the demo simulations.

Every experiment uses semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + a(t)·dt
    x(t+dt) = x(t) + v(t+dt)·dt

Updating velocity before position keeps the energy error of oscillatory
systems bounded instead of growing every cycle as explicit Euler does, so an
undamped pendulum or a circular orbit keeps its amplitude over long runs.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TypeVar

import numpy as np

from ..types import Body

T = TypeVar("T", float, np.ndarray)


def symplectic_euler(x: T, v: T, a: T, dt: float) -> tuple[T, T]:
    """
    Advance one semi-implicit Euler step.

    Works for scalars (pendulum angle) and numpy vectors (body positions).

    Args:
        x: Position (or angle).
        v: Velocity (or angular velocity).
        a: Acceleration evaluated at the start of the step.
        dt: Timestep in seconds.

    Returns:
        Tuple (x', v').
    """
    v_new = v + a * dt
    x_new = x + v_new * dt
    return x_new, v_new


def integrate_body(body: Body, acceleration: np.ndarray, dt: float) -> None:
    """
    Advance a body in-place under a constant acceleration for dt.

    Fixed bodies are left untouched.
    """
    if body.fixed:
        return
    body.position, body.velocity = symplectic_euler(body.position, body.velocity, acceleration, dt)


def drift(body: Body, dt: float) -> None:
    """Move a body along its current velocity (no forces)."""
    if body.fixed:
        return
    body.position = body.position + body.velocity * dt
