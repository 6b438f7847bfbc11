# MIT License (see LICENSE)
"""
labsim - Simulation core for a gallery of interactive science demos.

This package provides the per-frame physics behind the demos: a damped
pendulum, an N-body orbital system, colliding balls in a box and closed-form
waveforms, plus a frame scheduler that drives them and hands each frame to a
renderer as drawing primitives.

Main entry points:
    - PendulumExperiment, OrbitalExperiment, CollisionExperiment,
      WaveExperiment: the demos, each owning its own state.
    - FrameScheduler: mount/pause/resume/reset/unmount and per-frame ticks.
    - PendulumConfig, OrbitalConfig, CollisionConfig, WaveConfig: immutable
      parameter snapshots.

Submodules:
    - core: Integrators, gravity, pendulum and invariants.
    - collision: Contact tests and impulse resolution.
    - waves: Stateless waveform evaluation.
    - renderer: Drawing primitives and renderer adapters.

Example:
    from labsim import PendulumExperiment, FrameScheduler, PendulumConfig
    from labsim.renderer import BufferedRenderer

    exp = PendulumExperiment(PendulumConfig(length=1.0, initial_angle_deg=10))
    scheduler = FrameScheduler(exp, BufferedRenderer(), fixed_dt=1/60)
    scheduler.run(120)
"""
from .config import (
    BodySpec,
    PendulumConfig,
    OrbitalConfig,
    CollisionConfig,
    WaveConfig,
)
from .types import Body, PendulumState, Bounds
from .experiments import (
    Experiment,
    PendulumExperiment,
    OrbitalExperiment,
    CollisionExperiment,
    WaveExperiment,
)
from .scheduler import FrameScheduler
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "BodySpec",
    "PendulumConfig",
    "OrbitalConfig",
    "CollisionConfig",
    "WaveConfig",
    # State
    "Body",
    "PendulumState",
    "Bounds",
    # Experiments
    "Experiment",
    "PendulumExperiment",
    "OrbitalExperiment",
    "CollisionExperiment",
    "WaveExperiment",
    # Scheduling
    "FrameScheduler",
    "setup_logging",
]
