# MIT License (see LICENSE)
"""
Common experiment lifecycle.

An experiment owns the mutable state of one demo and exposes:
    reset(config)  -> rebuild state from a config snapshot
    configure(cfg) -> accept an edited snapshot, resetting when continuity breaks
    step(dt)       -> advance by one frame
    snapshot()     -> read-only summary of the state
    primitives()   -> what to draw

Each frame's dt is clamped to [MIN_DT, MAX_DT] and split into substeps no
larger than max_substep, so the result does not depend on the display
refresh rate.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..constants import DEFAULT_SUBSTEP, MAX_DT, MIN_DT
from ..renderer.primitives import Primitive
from ..util import clamp, substeps

logger = logging.getLogger(__name__)

C = TypeVar("C")


class Experiment(ABC, Generic[C]):
    """
    Base class for a simulated demo.

    Attributes:
        config: Current configuration snapshot.
        time: Simulation clock in seconds since the last reset.
        max_substep: Largest integration step taken inside one frame.
    """

    name: str = "experiment"

    def __init__(self, config: C | None = None, max_substep: float = DEFAULT_SUBSTEP):
        self.config: C = config if config is not None else self.default_config()
        self.max_substep = max_substep
        self.time = 0.0
        self.reset()

    # -- lifecycle -----------------------------------------------------------

    @classmethod
    @abstractmethod
    def default_config(cls) -> C:
        ...

    def reset(self, config: C | None = None) -> None:
        """
        Discard the current state and rebuild it from a config.

        Uses the given config, or the current one. Resetting twice with the
        same config yields identical state.
        """
        if config is not None:
            self.config = config
        self.time = 0.0
        self._build_state()
        logger.info("%s reset", self.name)

    def configure(self, config: C) -> None:
        """
        Accept an edited snapshot.

        Changes that break continuity of the motion reset the experiment;
        the rest take effect from the next step.
        """
        old = self.config
        self.config = config
        if self._requires_reset(old, config):
            self.reset()
        else:
            self._apply_live(config)

    def step(self, dt: float) -> None:
        """Advance one frame of (clamped) duration dt."""
        frame_dt = clamp(dt, MIN_DT, MAX_DT)
        n, h = substeps(self._scale_dt(frame_dt), self.max_substep)
        for _ in range(n):
            self._advance(h)
        self.time += n * h
        self._end_frame()

    # -- hooks ---------------------------------------------------------------

    @abstractmethod
    def _build_state(self) -> None:
        ...

    @abstractmethod
    def _advance(self, h: float) -> None:
        ...

    def _requires_reset(self, old: C, new: C) -> bool:
        return False

    def _apply_live(self, config: C) -> None:
        pass

    def _scale_dt(self, dt: float) -> float:
        return dt

    def _end_frame(self) -> None:
        pass

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        ...

    @abstractmethod
    def primitives(self) -> list[Primitive]:
        ...
