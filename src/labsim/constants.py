# MIT License (see LICENSE)
"""
Numeric constants and clamping bounds used throughout the simulations.

The demos run on user-adjustable sliders, so every integrator clamps its
inputs to these bounds instead of rejecting them.
"""
from __future__ import annotations

# Time step bounds (seconds). A frame slower than MAX_DT is integrated as
# MAX_DT so a stalled tab does not explode the integration on return.
MIN_DT: float = 1e-6
MAX_DT: float = 0.1

# Largest integration substep an experiment takes inside one frame.
DEFAULT_SUBSTEP: float = 1 / 240

# Smallest pendulum length accepted by the integrator (meters).
MIN_LENGTH: float = 1e-3

# Smallest separation used in the gravity law. Below this the force is
# evaluated as if the bodies were MIN_SEPARATION apart: F = G m1 m2 / d².
MIN_SEPARATION: float = 1e-3

# Smallest mass used by the force law and impulse response. Zero, negative
# or NaN masses are treated as MIN_MASS; only fixed bodies are infinitely heavy.
MIN_MASS: float = 1e-6

# Fallback contact normal for bodies whose centres coincide.
FALLBACK_NORMAL: tuple[float, float] = (1.0, 0.0)

# Wave speed assumed when reporting physical wavelength (m/s).
DEFAULT_WAVE_SPEED: float = 300.0

# Number of points kept per orbit trail.
DEFAULT_TRAIL_LENGTH: int = 300

# Slow-motion divisor applied to dt in the collision demo.
SLOW_MOTION_FACTOR: float = 5.0

# Orbital time units advanced per second of wall time at time_scale 1.
ORBIT_TIME_UNITS_PER_SECOND: float = 10.0

# Arrow lengths for the vector overlays, in simulation length units per
# unit of the drawn quantity.
VELOCITY_ARROW_SCALE: float = 10.0
FORCE_ARROW_SCALE: float = 0.5
FORCE_ARROW_MAX: float = 50.0
MOMENTUM_ARROW_SCALE: float = 0.5
