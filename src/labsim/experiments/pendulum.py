# MIT License (see LICENSE)
"""
Pendulum demo: one damped pendulum hanging from the origin.

Length, gravity and release angle restart the swing when edited; damping is
applied live.
"""
from __future__ import annotations
import dataclasses
import math
from typing import Any

from ..config import PendulumConfig
from ..core.invariants import pendulum_energy
from ..core.pendulum import (
    bob_position,
    initial_pendulum_state,
    pendulum_step,
    theoretical_period,
)
from ..renderer.primitives import CirclePrimitive, LinePrimitive, Primitive, TextPrimitive, point
from ..types import PendulumState
from .base import Experiment

PIVOT = (0.0, 0.0)
BOB_RADIUS = 0.1


class PendulumExperiment(Experiment[PendulumConfig]):
    name = "pendulum"
    state: PendulumState

    @classmethod
    def default_config(cls) -> PendulumConfig:
        return PendulumConfig()

    def _build_state(self) -> None:
        self.state = initial_pendulum_state(self.config)

    def _requires_reset(self, old: PendulumConfig, new: PendulumConfig) -> bool:
        return (
            old.length != new.length
            or old.initial_angle_deg != new.initial_angle_deg
            or old.gravity != new.gravity
        )

    def _apply_live(self, config: PendulumConfig) -> None:
        self.state = dataclasses.replace(self.state, damping=config.damping)

    def _advance(self, h: float) -> None:
        self.state = pendulum_step(self.state, h)

    @property
    def period(self) -> float:
        return theoretical_period(self.config.length, self.config.gravity)

    def snapshot(self) -> dict[str, Any]:
        s = self.state
        return {
            "time": self.time,
            "angle": s.angle,
            "angle_deg": math.degrees(s.angle),
            "angular_velocity": s.angular_velocity,
            "bob": point(bob_position(s, PIVOT)),
            "energy": pendulum_energy(s),
            "theoretical_period": self.period,
        }

    def primitives(self) -> list[Primitive]:
        bob = point(bob_position(self.state, PIVOT))
        return [
            CirclePrimitive(center=PIVOT, radius=0.025, kind="pivot"),
            LinePrimitive(start=PIVOT, end=bob, kind="rod"),
            CirclePrimitive(center=bob, radius=BOB_RADIUS, kind="bob"),
            TextPrimitive(position=PIVOT, text=f"Angle: {math.degrees(self.state.angle):.1f}°"),
        ]
