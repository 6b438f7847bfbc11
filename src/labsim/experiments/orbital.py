# MIT License (see LICENSE)
"""
Orbital mechanics demo: a fixed star and planets under mutual gravity.

The gravitational constant and time scale are applied live. Editing the body
list restarts the system. Orbit trails keep the last trail_length positions
of every movable body, one point per frame.
"""
from __future__ import annotations
from collections import deque
from typing import Any

from ..config import OrbitalConfig, build_bodies
from ..constants import (
    FORCE_ARROW_MAX,
    FORCE_ARROW_SCALE,
    ORBIT_TIME_UNITS_PER_SECOND,
    VELOCITY_ARROW_SCALE,
)
from ..core.forces import net_force
from ..core.invariants import kinetic_energy, linear_momentum, potential_energy
from ..core.orbital import orbital_step
from ..renderer.primitives import (
    CirclePrimitive,
    LinePrimitive,
    PolylinePrimitive,
    Primitive,
    point,
)
from ..types import Body
from ..util import norm
from .base import Experiment


class OrbitalExperiment(Experiment[OrbitalConfig]):
    name = "orbital"
    bodies: list[Body]
    trails: dict[int, deque]

    @classmethod
    def default_config(cls) -> OrbitalConfig:
        return OrbitalConfig()

    def _build_state(self) -> None:
        self.bodies = build_bodies(self.config.bodies)
        maxlen = max(0, self.config.trail_length)
        self.trails = {b.id: deque(maxlen=maxlen) for b in self.bodies if not b.fixed}

    def _requires_reset(self, old: OrbitalConfig, new: OrbitalConfig) -> bool:
        return old.bodies != new.bodies or old.trail_length != new.trail_length

    def _advance(self, h: float) -> None:
        cfg = self.config
        orbital_step(
            self.bodies,
            cfg.gravitational_constant,
            h,
            time_scale=cfg.time_scale * ORBIT_TIME_UNITS_PER_SECOND,
            max_speed=cfg.max_speed,
        )

    def _end_frame(self) -> None:
        if not self.config.show_orbits:
            # a hidden trail restarts from the current position when shown again
            for trail in self.trails.values():
                trail.clear()
            return
        for b in self.bodies:
            trail = self.trails.get(b.id)
            if trail is not None and trail.maxlen:
                trail.append(point(b.position))

    def snapshot(self) -> dict[str, Any]:
        p = linear_momentum(self.bodies)
        ke = kinetic_energy(self.bodies)
        pe = potential_energy(self.bodies, self.config.gravitational_constant)
        return {
            "time": self.time,
            "bodies": [b.summary() for b in self.bodies],
            "kinetic_energy": ke,
            "potential_energy": pe,
            "total_energy": ke + pe,
            "momentum": (float(p[0]), float(p[1])),
            "trails": {k: tuple(v) for k, v in self.trails.items()},
        }

    def primitives(self) -> list[Primitive]:
        cfg = self.config
        out: list[Primitive] = []
        if cfg.show_orbits:
            for body_id, trail in self.trails.items():
                if len(trail) >= 2:
                    out.append(PolylinePrimitive(points=tuple(trail), kind=f"trail:{body_id}"))
        for i, b in enumerate(self.bodies):
            c = point(b.position)
            out.append(CirclePrimitive(center=c, radius=b.radius, label=b.name))
            if b.fixed:
                continue
            if cfg.show_velocity_vectors:
                tip = b.position + b.velocity * VELOCITY_ARROW_SCALE
                out.append(LinePrimitive(start=c, end=point(tip), kind="velocity"))
            if cfg.show_force_vectors:
                f = net_force(self.bodies, i, cfg.gravitational_constant)
                mag = norm(f)
                if mag > 0.0:
                    tip = b.position + (f / mag) * min(mag * FORCE_ARROW_SCALE, FORCE_ARROW_MAX)
                    out.append(LinePrimitive(start=c, end=point(tip), kind="force"))
        return out

