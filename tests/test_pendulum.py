import math

import numpy as np

from labsim.config import PendulumConfig
from labsim.constants import MAX_DT, MIN_DT, MIN_LENGTH
from labsim.core.invariants import pendulum_energy
from labsim.core.pendulum import (
    bob_position,
    initial_pendulum_state,
    pendulum_step,
    theoretical_period,
)
from labsim.types import PendulumState


def _run(state, dt, T):
    """Integrate for T seconds, returning (times, angles)."""
    n = int(round(T / dt))
    times = np.empty(n)
    angles = np.empty(n)
    for k in range(n):
        state = pendulum_step(state, dt)
        times[k] = state.time
        angles[k] = state.angle
    return times, angles


def _half_cycle_peaks(theta0, angles):
    """Largest |θ| between consecutive zero crossings (first segment includes θ0)."""
    peaks = []
    current = abs(theta0)
    prev = theta0
    for a in angles:
        if prev != 0.0 and np.sign(a) != np.sign(prev):
            peaks.append(current)
            current = 0.0
        current = max(current, abs(a))
        prev = a
    return peaks


def test_small_angle_period():
    """
    Small-angle period T = 2π sqrt(L/g) ≈ 2.007 s for L=1, g=9.8.
    Measured from upward zero crossings of θ over many cycles.
    """
    cfg = PendulumConfig(length=1.0, gravity=9.8, initial_angle_deg=10.0, damping=0.0)
    state = initial_pendulum_state(cfg)
    dt = 1 / 1000
    times, angles = _run(state, dt, 30.0)

    crossings = [
        times[k] for k in range(1, len(angles))
        if angles[k - 1] < 0.0 <= angles[k]
    ]
    periods = np.diff(crossings)
    measured = float(np.mean(periods))
    expected = theoretical_period(1.0, 9.8)
    err = abs(measured - expected) / expected
    print("period", measured, "exp", expected, "relerr", err)

    assert len(periods) >= 10
    assert abs(expected - 2.007) < 1e-3
    assert err <= 0.03


def test_undamped_amplitude_does_not_grow():
    """
    With c = 0, semi-implicit Euler must not inject energy: the peak angle of
    every half-cycle over 100 cycles stays at θ0 (no growth, no decay).
    """
    theta0 = math.radians(10.0)
    cfg = PendulumConfig(length=1.0, gravity=9.8, initial_angle_deg=10.0, damping=0.0)
    state = initial_pendulum_state(cfg)
    T = 100 * theoretical_period(1.0, 9.8) * 1.01
    _, angles = _run(state, 1 / 240, T)

    peaks = _half_cycle_peaks(theta0, angles)
    print("half-cycles", len(peaks), "max", max(peaks), "min", min(peaks))

    assert len(peaks) >= 200
    assert max(peaks) <= theta0 * (1 + 1e-3)
    assert min(peaks) >= theta0 * (1 - 1e-2)
    assert peaks[-1] <= peaks[0] * (1 + 1e-3)


def test_damped_amplitude_strictly_decreases():
    """With c > 0 the peak angle shrinks every half-cycle."""
    theta0 = math.radians(30.0)
    cfg = PendulumConfig(length=1.0, gravity=9.8, initial_angle_deg=30.0, damping=0.1)
    state = initial_pendulum_state(cfg)
    _, angles = _run(state, 1 / 240, 20 * theoretical_period(1.0, 9.8))

    peaks = _half_cycle_peaks(theta0, angles)
    assert len(peaks) >= 30
    assert all(b < a for a, b in zip(peaks, peaks[1:]))


def test_undamped_energy_bounded():
    """Energy of the undamped pendulum oscillates but does not drift."""
    state = PendulumState(angle=0.5, length=2.0, gravity=9.8)
    e0 = pendulum_energy(state)
    energies = []
    for _ in range(24000):
        state = pendulum_step(state, 1 / 240)
        energies.append(pendulum_energy(state))
    drift = abs(np.mean(energies[-2400:]) - np.mean(energies[:2400])) / e0
    assert drift <= 5e-3


def test_invalid_parameters_are_clamped():
    """Non-positive length, negative dt and oversized dt never raise."""
    state = PendulumState(angle=0.3, length=0.0, gravity=9.8)
    nxt = pendulum_step(state, 1 / 60)
    assert math.isfinite(nxt.angle) and math.isfinite(nxt.angular_velocity)
    # (g/L) uses the clamped length
    assert nxt.angular_velocity == -(9.8 / MIN_LENGTH) * math.sin(0.3) * (1 / 60)

    nxt = pendulum_step(PendulumState(angle=0.3), -1.0)
    assert nxt.time == MIN_DT

    nxt = pendulum_step(PendulumState(angle=0.3), 5.0)
    assert nxt.time == MAX_DT

    nxt = pendulum_step(PendulumState(angle=0.3, gravity=-9.8, damping=-1.0), 0.01)
    assert nxt.angle == 0.3
    assert nxt.angular_velocity == 0.0


def test_step_does_not_mutate_input():
    state = PendulumState(angle=0.3)
    pendulum_step(state, 0.01)
    assert state.angle == 0.3
    assert state.time == 0.0


def test_velocity_updated_before_position():
    """θ' uses the new ω: θ' = θ + (ω + α dt) dt."""
    state = PendulumState(angle=0.2, angular_velocity=0.5, length=1.0, gravity=9.8, damping=0.1)
    dt = 0.01
    alpha = -9.8 * math.sin(0.2) - 0.1 * 0.5
    nxt = pendulum_step(state, dt)
    assert math.isclose(nxt.angular_velocity, 0.5 + alpha * dt, rel_tol=1e-12)
    assert math.isclose(nxt.angle, 0.2 + (0.5 + alpha * dt) * dt, rel_tol=1e-12)


def test_theoretical_period_and_bob_position():
    assert math.isclose(theoretical_period(1.0, 9.8), 2 * math.pi * math.sqrt(1 / 9.8))
    assert theoretical_period(1.0, 0.0) == math.inf

    hanging = bob_position(PendulumState(angle=0.0, length=2.0))
    assert np.allclose(hanging, [0.0, -2.0])
    side = bob_position(PendulumState(angle=math.pi / 2, length=1.0), pivot=(1.0, 1.0))
    assert np.allclose(side, [2.0, 1.0])
