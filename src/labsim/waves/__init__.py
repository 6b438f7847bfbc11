# MIT License (see LICENSE)
"""
Stateless waveform evaluation.

Typical usage:
    from labsim.waves import evaluate, wavelength_for

    lam = wavelength_for(width=700, frequency=2)
    y = evaluate(175.0, "sine", 80, 2, 0.0, lam, 700)
"""
from .evaluator import (
    evaluate,
    evaluate_array,
    damping_factor,
    wavelength_for,
    sample_curve,
    derived_quantities,
)

__all__ = [
    "evaluate",
    "evaluate_array",
    "damping_factor",
    "wavelength_for",
    "sample_curve",
    "derived_quantities",
]
