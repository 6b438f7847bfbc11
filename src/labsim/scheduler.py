# MIT License (see LICENSE)
"""
Frame scheduling for an experiment.

The FrameScheduler plays the role of a display-refresh callback: each tick()
advances the experiment once and hands its primitives to the renderer. It is
single-threaded; nothing suspends inside a step.

Lifecycle:
    mount()    -> start accepting ticks (clock re-based)
    pause()    -> stop advancing; state is left untouched
    resume()   -> continue; the paused interval is not integrated and any
                  config edited while paused is applied
    reset()    -> rebuild state from the current (or pending) config
    unmount()  -> permanent teardown; later ticks do nothing

Time step:
    With fixed_dt set, every tick integrates exactly fixed_dt. Otherwise the
    elapsed wall time since the previous tick is used. Either way the
    experiment clamps and substeps it, so fidelity does not depend on the
    refresh rate.
"""
from __future__ import annotations
import logging
import time
from contextlib import nullcontext
from typing import Any, Callable

from .experiments.base import Experiment
from .profiler import Profiler
from .renderer.adapter import RendererAdapter

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Drives one experiment per display refresh.

    Attributes:
        experiment: The experiment being driven.
        renderer: Optional renderer receiving each frame's primitives.
        clock: Monotonic clock in seconds (injectable for tests).
        fixed_dt: Nominal step per tick; None uses elapsed wall time.
        profiler: Optional Profiler timing the "step" and "render" sections.
    """

    def __init__(
        self,
        experiment: Experiment,
        renderer: RendererAdapter | None = None,
        clock: Callable[[], float] = time.perf_counter,
        fixed_dt: float | None = None,
        profiler: Profiler | None = None,
    ):
        self.experiment = experiment
        self.renderer = renderer
        self.clock = clock
        self.fixed_dt = fixed_dt
        self.profiler = profiler

        self.mounted = False
        self.paused = False
        self.frames = 0
        self._torn_down = False
        self._last: float | None = None
        self._pending_config: Any = None

    @property
    def running(self) -> bool:
        return self.mounted and not self.paused

    def mount(self) -> None:
        """Register the scheduler. A torn-down scheduler cannot be remounted."""
        if self._torn_down:
            logger.warning("mount() ignored: %s scheduler was unmounted", self.experiment.name)
            return
        if self.mounted:
            return
        self.mounted = True
        self._last = self.clock()
        logger.info("%s mounted", self.experiment.name)
        self._render()

    def unmount(self) -> None:
        """Tear down unconditionally. Safe to call more than once."""
        if self._torn_down:
            return
        self._torn_down = True
        self.mounted = False
        self.renderer = None
        self._pending_config = None
        logger.info("%s unmounted after %d frames", self.experiment.name, self.frames)

    def pause(self) -> None:
        if self.running:
            self.paused = True
            logger.debug("%s paused", self.experiment.name)

    def resume(self) -> None:
        if not (self.mounted and self.paused):
            return
        self.paused = False
        self._last = self.clock()
        if self._pending_config is not None:
            cfg, self._pending_config = self._pending_config, None
            self.experiment.configure(cfg)
        logger.debug("%s resumed", self.experiment.name)

    def toggle(self) -> None:
        """Pause if running, resume if paused."""
        if self.paused:
            self.resume()
        else:
            self.pause()

    def update_config(self, config: Any) -> None:
        """
        Hand a new config snapshot to the experiment.

        While paused the snapshot is held until the next resume or reset.
        """
        if self._torn_down:
            return
        if self.paused:
            self._pending_config = config
        else:
            self.experiment.configure(config)

    def reset(self, config: Any = None) -> None:
        """Rebuild the experiment from the given, pending or current config."""
        if self._torn_down:
            return
        if config is None:
            config = self._pending_config
        self._pending_config = None
        self.experiment.reset(config)
        self._last = self.clock()
        self._render()

    def tick(self, now: float | None = None) -> bool:
        """
        One display refresh.

        Args:
            now: Current clock reading; defaults to self.clock().

        Returns:
            True if the experiment was advanced and rendered.
        """
        if not self.running:
            return False
        if now is None:
            now = self.clock()
        if self.fixed_dt is not None:
            dt = self.fixed_dt
        else:
            dt = now - self._last if self._last is not None else 0.0
        self._last = now

        with self._section("step"):
            self.experiment.step(dt)
        self.frames += 1
        self._render()
        return True

    def run(self, frames: int, frame_interval: float | None = None) -> int:
        """
        Tick repeatedly, optionally sleeping between ticks.

        Mounts the scheduler if needed. Stops early if paused or unmounted
        from a render callback.

        Returns:
            Number of frames advanced.
        """
        if not self.mounted:
            self.mount()
        done = 0
        for _ in range(frames):
            if not self.tick():
                break
            done += 1
            if frame_interval:
                time.sleep(frame_interval)
        return done

    def _render(self) -> None:
        if self.renderer is None or not self.mounted:
            return
        with self._section("render"):
            self.renderer.render(self.experiment.time, self.experiment.primitives())

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)
