# MIT License (see LICENSE)
"""
Renderer adapters for the simulation output.

This module provides an abstract base class for rendering and a few concrete
implementations. The simulation core has no drawing dependency; a canvas,
SVG or plotting backend plugs in by subclassing RendererAdapter.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, TextIO
import sys

from .primitives import (
    Primitive,
    CirclePrimitive,
    LinePrimitive,
    PolylinePrimitive,
    TextPrimitive,
)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(experiment.time)
        for p in experiment.primitives():
            renderer.draw(p)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(experiment.time, experiment.primitives())
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw(self, primitive: Primitive) -> None:
        """Draw a single primitive."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, time: float, primitives: Iterable[Primitive]) -> None:
        """Convenience method: draw a whole frame."""
        self.begin_frame(time)
        for p in primitives:
            self.draw(p)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=0.0042 ===
        circle[body] 'Planet 1' r=5.00 @ (400.00, 220.00)
        line[rod] (0.00, 0.00) -> (0.50, -0.87)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw(self, primitive: Primitive) -> None:
        p = primitive
        if isinstance(p, CirclePrimitive):
            line = f"circle[{p.kind}] {p.label!r} r={p.radius:.2f} @ ({p.center[0]:.2f}, {p.center[1]:.2f})"
        elif isinstance(p, LinePrimitive):
            line = (f"line[{p.kind}] ({p.start[0]:.2f}, {p.start[1]:.2f}) -> "
                    f"({p.end[0]:.2f}, {p.end[1]:.2f})")
        elif isinstance(p, PolylinePrimitive):
            line = f"polyline[{p.kind}] {len(p.points)} points"
        elif isinstance(p, TextPrimitive):
            line = f"text[{p.kind}] {p.text}"
        else:
            line = f"{type(p).__name__}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Useful as a placeholder or for benchmarking without rendering overhead.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw(self, primitive: Primitive) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for later retrieval.

    Example:
        renderer = BufferedRenderer()
        scheduler = FrameScheduler(experiment, renderer)
        scheduler.run(100)
        for frame in renderer.frames:
            print(frame["time"], len(frame["primitives"]))
    """

    def __init__(self, max_frames: int | None = None):
        self.frames: list[dict] = []
        self.max_frames = max_frames
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "primitives": []}

    def draw(self, primitive: Primitive) -> None:
        if self._current_frame is None:
            return
        self._current_frame["primitives"].append(primitive)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None
            if self.max_frames is not None and len(self.frames) > self.max_frames:
                del self.frames[0]

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
