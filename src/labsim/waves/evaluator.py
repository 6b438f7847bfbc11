# MIT License (see LICENSE)
"""
Closed-form periodic waveforms with linear spatial damping.

Phase at horizontal position x and time t:
    φ = 2π·x/λ - 2π·f·t

Shapes (A = amplitude, D(x) = damping factor):
    sine:      A · sin φ · D(x)
    square:    A · sign(sin φ) · D(x)
    triangle:  A · (2/π)·asin(sin φ) · D(x)
    sawtooth:  A · ((φ mod 2π)/π - 1) · D(x)

    D(x) = max(0, 1 - d·x/W)   with W the visible width

The wavelength is a rendering-scale choice (visible width / frequency), so
callers pass it in. A frequency of zero means an infinite wavelength and the
curve is defined to be flat (displacement 0).
"""
from __future__ import annotations
import logging
import math

import numpy as np

from ..config import WaveConfig
from ..types import WAVE_SHAPES

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

_warned_shapes: set[str] = set()


def wavelength_for(width: float, frequency: float) -> float:
    """λ = width / f; infinite for f ≤ 0."""
    if frequency <= 0.0:
        return math.inf
    return width / frequency


def damping_factor(position, damping: float, visible_width: float):
    """
    Linear attenuation max(0, 1 - d·x/W), floored at zero.

    Accepts a scalar or a numpy array of positions.
    """
    if visible_width <= 0.0:
        return np.ones_like(position, dtype=np.float64) if isinstance(position, np.ndarray) else 1.0
    return np.maximum(0.0, 1.0 - damping * np.asarray(position, dtype=np.float64) / visible_width)


def _shape_values(shape: str, phase: np.ndarray) -> np.ndarray:
    if shape == "sine":
        return np.sin(phase)
    if shape == "square":
        return np.sign(np.sin(phase))
    if shape == "triangle":
        # clip guards asin against |sin| rounding a hair above 1
        return (2.0 / math.pi) * np.arcsin(np.clip(np.sin(phase), -1.0, 1.0))
    if shape == "sawtooth":
        return np.mod(phase, TWO_PI) / math.pi - 1.0
    if shape not in _warned_shapes:
        _warned_shapes.add(shape)
        logger.warning("unknown wave shape %r; drawing a flat line (known: %s)", shape, ", ".join(WAVE_SHAPES))
    return np.zeros_like(phase)


def evaluate_array(
    positions: np.ndarray,
    shape: str,
    amplitude: float,
    frequency: float,
    damping: float,
    wavelength: float,
    visible_width: float,
    time: float = 0.0,
) -> np.ndarray:
    """Vectorised evaluate() over an array of positions."""
    x = np.asarray(positions, dtype=np.float64)
    if frequency <= 0.0 or not math.isfinite(wavelength) or wavelength <= 0.0:
        return np.zeros_like(x)
    phase = TWO_PI * x / wavelength - TWO_PI * frequency * time
    return amplitude * _shape_values(shape, phase) * damping_factor(x, damping, visible_width)


def evaluate(
    position: float,
    shape: str,
    amplitude: float,
    frequency: float,
    damping: float,
    wavelength: float,
    visible_width: float,
    time: float = 0.0,
) -> float:
    """
    Displacement of the waveform at one position.

    Pure and total: defined for every real position. frequency ≤ 0 (or a
    non-finite wavelength) yields 0.0; an unknown shape yields 0.0.

    Args:
        position: Horizontal position x.
        shape: "sine", "square", "triangle" or "sawtooth".
        amplitude: Peak displacement A.
        frequency: Frequency f (cycles per visible width).
        damping: Spatial damping d.
        wavelength: λ in the same units as position.
        visible_width: W used by the damping factor.
        time: Clock for a travelling wave; 0 gives the static curve.

    Returns:
        The displacement.
    """
    y = evaluate_array(
        np.array([position], dtype=np.float64),
        shape, amplitude, frequency, damping, wavelength, visible_width, time,
    )
    return float(y[0])


def sample_curve(config: WaveConfig, time: float = 0.0) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample the configured wave across [0, width).

    One sample per unit of width unless config.samples is set.

    Returns:
        Tuple (xs, ys).
    """
    width = max(config.width, 0.0)
    if config.samples is not None:
        n = max(config.samples, 2)
        xs = np.linspace(0.0, width, n, endpoint=False)
    else:
        xs = np.arange(0.0, width, 1.0)
    wavelength = wavelength_for(width, config.frequency)
    ys = evaluate_array(
        xs, config.shape, config.amplitude, config.frequency,
        config.damping, wavelength, width, time,
    )
    return xs, ys


def derived_quantities(config: WaveConfig) -> dict[str, float | None]:
    """
    Period, physical wavelength and wave speed for the readout.

    Period and wavelength are None when the frequency is zero.
    """
    f = config.frequency
    if f <= 0.0:
        return {"period": None, "wavelength": None, "wave_speed": config.wave_speed}
    return {
        "period": 1.0 / f,
        "wavelength": config.wave_speed / f,
        "wave_speed": config.wave_speed,
    }
