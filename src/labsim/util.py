# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Provides low-level 2D vector operations used by the integrators and the
collision resolver. All vector functions operate on numpy arrays of shape (2,).
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and velocities, and always
    returns a fresh array so callers never share state with configuration.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]. NaN collapses to lo."""
    if math.isnan(x):
        return lo
    return max(lo, min(hi, x))


def substeps(dt: float, max_substep: float) -> tuple[int, float]:
    """
    Split dt into n equal substeps no larger than max_substep.

    Returns:
        Tuple (n, h) with n * h == dt and h <= max_substep.
    """
    if max_substep <= 0:
        return 1, dt
    n = max(1, int(math.ceil(dt / max_substep - 1e-9)))
    return n, dt / n
