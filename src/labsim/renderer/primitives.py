# MIT License (see LICENSE)
"""
Drawing primitives handed to a renderer.

The simulations never draw. Each experiment describes its frame as a list of
these immutable records and a RendererAdapter turns them into pixels (or
text, or a buffer). Coordinates are in simulation units; scaling to the
screen is the renderer's business.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CirclePrimitive:
    """A filled circle (pendulum bob, planet, ball)."""
    center: tuple[float, float]
    radius: float
    label: str = ""
    kind: str = "body"


@dataclass(frozen=True)
class LinePrimitive:
    """A straight segment (pendulum rod, velocity or force vector)."""
    start: tuple[float, float]
    end: tuple[float, float]
    kind: str = "line"


@dataclass(frozen=True)
class PolylinePrimitive:
    """An open curve through points (orbit trail, sampled waveform)."""
    points: tuple[tuple[float, float], ...]
    kind: str = "curve"


@dataclass(frozen=True)
class TextPrimitive:
    """A short text annotation."""
    position: tuple[float, float]
    text: str
    kind: str = "label"


Primitive = Union[CirclePrimitive, LinePrimitive, PolylinePrimitive, TextPrimitive]


def point(v) -> tuple[float, float]:
    """Convert a 2-vector (array or sequence) to a plain float tuple."""
    return (float(v[0]), float(v[1]))
