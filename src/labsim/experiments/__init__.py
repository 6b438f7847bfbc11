# MIT License (see LICENSE)
"""
The simulated demos.

Each experiment owns its state, is driven by a FrameScheduler and describes
its frame as renderer primitives.
"""
from .base import Experiment
from .pendulum import PendulumExperiment
from .orbital import OrbitalExperiment
from .collision import CollisionExperiment
from .wave import WaveExperiment

__all__ = [
    "Experiment",
    "PendulumExperiment",
    "OrbitalExperiment",
    "CollisionExperiment",
    "WaveExperiment",
]
