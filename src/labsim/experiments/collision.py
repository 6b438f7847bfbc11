# MIT License (see LICENSE)
"""
Collision demo: balls in a box with a configurable coefficient of restitution.

Per substep: optional gravity, free flight, wall bounces, then pairwise
impulses in ascending index order. Restitution, gravity and slow motion are
applied live; editing the bodies or the box restarts the demo.
"""
from __future__ import annotations
from typing import Any

import numpy as np

from ..collision.resolver import resolve_boundary, resolve_pairs
from ..config import CollisionConfig, build_bodies
from ..constants import MOMENTUM_ARROW_SCALE, SLOW_MOTION_FACTOR, VELOCITY_ARROW_SCALE
from ..core.integrators import drift, integrate_body
from ..core.invariants import kinetic_energy, linear_momentum
from ..renderer.primitives import CirclePrimitive, LinePrimitive, Primitive, point
from ..types import Body
from .base import Experiment

# Velocities are in units per second; arrows use units per frame at 60 fps.
_PER_FRAME = 1.0 / 60.0


class CollisionExperiment(Experiment[CollisionConfig]):
    name = "collision"
    bodies: list[Body]
    impacts: int

    @classmethod
    def default_config(cls) -> CollisionConfig:
        return CollisionConfig()

    def _build_state(self) -> None:
        self.bodies = build_bodies(self.config.bodies)
        self.impacts = 0

    def _requires_reset(self, old: CollisionConfig, new: CollisionConfig) -> bool:
        return old.bodies != new.bodies or old.bounds != new.bounds

    def _scale_dt(self, dt: float) -> float:
        return dt / SLOW_MOTION_FACTOR if self.config.slow_motion else dt

    def _advance(self, h: float) -> None:
        cfg = self.config
        g = np.array([0.0, cfg.gravity], dtype=np.float64)
        for b in self.bodies:
            if cfg.use_gravity:
                integrate_body(b, g, h)
            else:
                drift(b, h)
            resolve_boundary(b, cfg.bounds, cfg.restitution)
        self.impacts += resolve_pairs(self.bodies, cfg.restitution, cfg.positional_correction)

    def snapshot(self) -> dict[str, Any]:
        p = linear_momentum(self.bodies)
        return {
            "time": self.time,
            "bodies": [b.summary() for b in self.bodies],
            "kinetic_energy": kinetic_energy(self.bodies),
            "momentum": (float(p[0]), float(p[1])),
            "impacts": self.impacts,
        }

    def primitives(self) -> list[Primitive]:
        cfg = self.config
        out: list[Primitive] = []
        for b in self.bodies:
            c = point(b.position)
            out.append(CirclePrimitive(center=c, radius=b.radius, label=f"{b.mass:g}"))
            if cfg.show_velocity_vectors:
                tip = b.position + b.velocity * (VELOCITY_ARROW_SCALE * _PER_FRAME)
                out.append(LinePrimitive(start=c, end=point(tip), kind="velocity"))
            if cfg.show_momentum_vectors:
                tip = b.position + b.momentum * (MOMENTUM_ARROW_SCALE * _PER_FRAME)
                out.append(LinePrimitive(start=c, end=point(tip), kind="momentum"))
        return out
