# MIT License (see LICENSE)
"""
Wave demo: a sampled waveform with wavelength and amplitude markers.

The curve is recomputed from the config every frame; the clock only matters
for a travelling wave.
"""
from __future__ import annotations
from typing import Any

from ..config import WaveConfig
from ..renderer.primitives import LinePrimitive, PolylinePrimitive, Primitive, TextPrimitive
from ..waves.evaluator import derived_quantities, sample_curve, wavelength_for
from .base import Experiment

# Horizontal offset of the wavelength and amplitude markers.
_MARKER_X = 50.0
_AMPLITUDE_X = 25.0


class WaveExperiment(Experiment[WaveConfig]):
    name = "wave"

    @classmethod
    def default_config(cls) -> WaveConfig:
        return WaveConfig()

    def _build_state(self) -> None:
        pass

    def _advance(self, h: float) -> None:
        pass

    @property
    def phase_time(self) -> float:
        return self.time if self.config.travelling else 0.0

    def curve(self):
        return sample_curve(self.config, self.phase_time)

    def snapshot(self) -> dict[str, Any]:
        xs, ys = self.curve()
        derived = derived_quantities(self.config)
        return {
            "time": self.time,
            "xs": tuple(float(x) for x in xs),
            "ys": tuple(float(y) for y in ys),
            "wavelength": wavelength_for(self.config.width, self.config.frequency),
            "period": derived["period"],
            "physical_wavelength": derived["wavelength"],
            "wave_speed": derived["wave_speed"],
        }

    def primitives(self) -> list[Primitive]:
        cfg = self.config
        xs, ys = self.curve()
        out: list[Primitive] = [
            LinePrimitive(start=(0.0, 0.0), end=(cfg.width, 0.0), kind="axis"),
            PolylinePrimitive(points=tuple(zip(xs.tolist(), ys.tolist())), kind="wave"),
        ]
        lam = wavelength_for(cfg.width, cfg.frequency)
        if cfg.show_wavelength and cfg.frequency > 0:
            y = -0.5 * abs(cfg.amplitude) - 10.0
            out.append(LinePrimitive(start=(_MARKER_X, y), end=(_MARKER_X + lam, y), kind="wavelength"))
            out.append(TextPrimitive(position=(_MARKER_X + 0.5 * lam, y), text="λ (wavelength)"))
        if cfg.amplitude > 0:
            out.append(LinePrimitive(start=(_AMPLITUDE_X, 0.0), end=(_AMPLITUDE_X, cfg.amplitude), kind="amplitude"))
            out.append(TextPrimitive(position=(_AMPLITUDE_X, 0.5 * cfg.amplitude), text="A"))
        return out
