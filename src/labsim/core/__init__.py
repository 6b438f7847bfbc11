# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Integrators: semi-implicit (symplectic) Euler.
    - Forces: pairwise Newtonian gravity.
    - Pendulum: damped nonlinear pendulum step and derived quantities.
    - Orbital: N-body gravitational step.
    - Invariants: energy and momentum readouts.

Typical usage:
    from labsim.core import pendulum_step, orbital_step

    state = pendulum_step(state, dt=1/240)
    orbital_step(bodies, G=3.0, dt=1/240, time_scale=1.0)
"""
from .integrators import symplectic_euler, integrate_body, drift
from .forces import pair_force, gravity_forces, net_force
from .pendulum import (
    initial_pendulum_state,
    pendulum_step,
    theoretical_period,
    bob_position,
)
from .orbital import orbital_step, orbital_accelerations
from .invariants import kinetic_energy, linear_momentum, potential_energy, pendulum_energy

__all__ = [
    # Integrators
    "symplectic_euler",
    "integrate_body",
    "drift",
    # Forces
    "pair_force",
    "gravity_forces",
    "net_force",
    # Pendulum
    "initial_pendulum_state",
    "pendulum_step",
    "theoretical_period",
    "bob_position",
    # Orbital
    "orbital_step",
    "orbital_accelerations",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "potential_energy",
    "pendulum_energy",
]
