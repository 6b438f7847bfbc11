# MIT License (see LICENSE)
"""
Damped simple pendulum.

Equation of motion for the angle θ from the downward vertical:
    d²θ/dt² = -(g/L)·sin θ - c·dθ/dt

The nonlinear sin θ term is kept; the small-angle period 2π√(L/g) is only
reported for comparison. Integration is semi-implicit Euler (see
integrators.py).
"""
from __future__ import annotations
import logging
import math

import numpy as np

from ..constants import MIN_DT, MAX_DT, MIN_LENGTH
from ..config import PendulumConfig
from ..types import PendulumState
from ..util import clamp
from .integrators import symplectic_euler

logger = logging.getLogger(__name__)


def initial_pendulum_state(config: PendulumConfig) -> PendulumState:
    """Pendulum released from rest at config.initial_angle_deg."""
    return PendulumState(
        angle=math.radians(config.initial_angle_deg),
        angular_velocity=0.0,
        length=config.length,
        gravity=config.gravity,
        damping=config.damping,
        time=0.0,
    )


def angular_acceleration(theta: float, omega: float, length: float, gravity: float, damping: float) -> float:
    """α = -(g/L)·sin θ - c·ω"""
    return -(gravity / length) * math.sin(theta) - damping * omega


def pendulum_step(state: PendulumState, dt: float) -> PendulumState:
    """
    Advance the pendulum by one step.

    Out-of-range parameters are clamped rather than rejected:
    L ≤ 0 becomes MIN_LENGTH, negative g or c become 0, and dt is clamped
    into [MIN_DT, MAX_DT].

    Args:
        state: Current state (not modified).
        dt: Timestep in seconds.

    Returns:
        The new state.
    """
    L = state.length
    if not L > MIN_LENGTH:
        logger.debug("pendulum length %r clamped to %g", L, MIN_LENGTH)
        L = MIN_LENGTH
    g = max(0.0, state.gravity)
    c = max(0.0, state.damping)
    h = clamp(dt, MIN_DT, MAX_DT)

    alpha = angular_acceleration(state.angle, state.angular_velocity, L, g, c)
    theta, omega = symplectic_euler(state.angle, state.angular_velocity, alpha, h)

    return PendulumState(
        angle=theta,
        angular_velocity=omega,
        length=state.length,
        gravity=state.gravity,
        damping=state.damping,
        time=state.time + h,
    )


def theoretical_period(length: float, gravity: float) -> float:
    """Small-angle period T = 2π√(L/g). Infinite when g ≤ 0."""
    if gravity <= 0:
        return math.inf
    return 2.0 * math.pi * math.sqrt(max(length, MIN_LENGTH) / gravity)


def bob_position(state: PendulumState, pivot: tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """
    Cartesian position of the bob (y axis pointing up).

    θ = 0 hangs straight down from the pivot.
    """
    L = max(state.length, MIN_LENGTH)
    return np.array(
        [pivot[0] + L * math.sin(state.angle), pivot[1] - L * math.cos(state.angle)],
        dtype=np.float64,
    )
