# MIT License (see LICENSE)
"""
Render output contract and adapters.

This subpackage provides:
    - Primitives: circles, lines, polylines and text describing a frame.
    - RendererAdapter: abstract base class for drawing backends.
    - DebugRenderer: text output for debugging.
    - NullRenderer: no-op renderer for benchmarking.
    - BufferedRenderer: records frames for inspection or export.

The simulation core has no drawing dependency; these adapters are optional.
"""
from .primitives import (
    Primitive,
    CirclePrimitive,
    LinePrimitive,
    PolylinePrimitive,
    TextPrimitive,
)
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    # Primitives
    "Primitive",
    "CirclePrimitive",
    "LinePrimitive",
    "PolylinePrimitive",
    "TextPrimitive",
    # Adapters
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
