# MIT License (see LICENSE)
"""
Configuration snapshots for each experiment.

The UI layer owns sliders and switches; the simulations only ever see an
immutable snapshot of their values. Each config is a frozen dataclass so it
can be passed by value every frame and compared cheaply. Edited snapshots are
derived with ``dataclasses.replace``.

``from_dict`` constructors accept the UI vocabulary (camelCase, as emitted by
the controls) as well as snake_case keys. Unknown keys are ignored and values
are not validated here: the integrators clamp whatever they receive.

Dictionary Format Overview:
---------------------------
pendulum:   {"length", "gravity", "initialAngleDeg", "damping"}
orbital:    {"gravitationalConstant", "timeScale", "trailLength", "maxSpeed",
             "bodies": [{"mass", "position", "velocity", "radius",
                         "name", "fixed"}]}
collision:  {"restitution" | "elasticity", "useGravity", "gravity",
             "slowMotion", "positionalCorrection",
             "bounds": [x_min, y_min, x_max, y_max], "bodies": [...]}
wave:       {"amplitude", "frequency", "shape" | "waveType", "damping",
             "width", "samples", "waveSpeed"}
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_TRAIL_LENGTH, DEFAULT_WAVE_SPEED
from .types import Body, Bounds, WaveShape


def _get(d: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in d."""
    for k in keys:
        if k in d:
            return d[k]
    return default


def _pair(v: Any) -> tuple[float, float]:
    return (float(v[0]), float(v[1]))


# =============================================================================
# Bodies
# =============================================================================

@dataclass(frozen=True)
class BodySpec:
    """
    Initial condition for one body.

    Attributes:
        mass: Mass (> 0 expected).
        position: Initial position (x, y).
        velocity: Initial velocity (vx, vy).
        radius: Collision / display radius.
        name: Display label.
        fixed: Immovable body.
    """
    mass: float
    position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    name: str = ""
    fixed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _pair(self.position))
        object.__setattr__(self, "velocity", _pair(self.velocity))

    def build(self, body_id: int) -> Body:
        """Create a fresh mutable Body for a simulation run."""
        return Body(
            mass=float(self.mass),
            position=self.position,
            velocity=self.velocity,
            radius=float(self.radius),
            name=self.name,
            fixed=self.fixed,
            id=body_id,
        )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BodySpec":
        return cls(
            mass=float(d["mass"]),
            position=_pair(_get(d, "position", "initialPosition", default=(0.0, 0.0))),
            velocity=_pair(_get(d, "velocity", "initialVelocity", default=(0.0, 0.0))),
            radius=float(d.get("radius", 0.0)),
            name=str(d.get("name", "")),
            fixed=bool(d.get("fixed", False)),
        )


def build_bodies(specs: tuple[BodySpec, ...]) -> list[Body]:
    """Instantiate bodies in insertion order; ids follow that order."""
    return [spec.build(i) for i, spec in enumerate(specs)]


def circular_orbit_speed(gravitational_constant: float, central_mass: float, radius: float) -> float:
    """
    Speed of a circular orbit around a much heavier body: v = sqrt(G M / r).

    Returns 0 for a non-positive radius or mass.
    """
    if radius <= 0 or central_mass <= 0 or gravitational_constant <= 0:
        return 0.0
    return math.sqrt(gravitational_constant * central_mass / radius)


def solar_system_preset(
    gravitational_constant: float = 3.0,
    center: tuple[float, float] = (400.0, 300.0),
) -> tuple[BodySpec, ...]:
    """
    A fixed star with four planets on circular orbits.

    Planets start above the star and move in +x, with speeds chosen so each
    traces a closed orbit under the given gravitational constant.
    """
    cx, cy = center
    star_mass = 10000.0
    star = BodySpec(mass=star_mass, position=(cx, cy), radius=25.0, name="Star", fixed=True)
    planets = [
        # (orbit radius, planet radius, mass)
        (80.0, 5.0, 10.0),
        (140.0, 8.0, 20.0),
        (200.0, 10.0, 30.0),
        (260.0, 7.0, 15.0),
    ]
    specs = [star]
    for k, (r, size, m) in enumerate(planets, start=1):
        v = circular_orbit_speed(gravitational_constant, star_mass, r)
        specs.append(BodySpec(
            mass=m, position=(cx, cy - r), velocity=(v, 0.0),
            radius=size, name=f"Planet {k}",
        ))
    return tuple(specs)


def three_ball_preset(bounds: Bounds = Bounds()) -> tuple[BodySpec, ...]:
    """Three balls of different mass heading towards each other."""
    w, h = bounds.width, bounds.height
    x0, y0 = bounds.x_min, bounds.y_min
    return (
        BodySpec(mass=10.0, position=(x0 + 0.2 * w, y0 + 0.5 * h), velocity=(150.0, 0.0), radius=30.0, name="1"),
        BodySpec(mass=20.0, position=(x0 + 0.8 * w, y0 + 0.5 * h), velocity=(-90.0, 0.0), radius=40.0, name="2"),
        BodySpec(mass=7.0, position=(x0 + 0.5 * w, y0 + 0.3 * h), velocity=(0.0, 60.0), radius=25.0, name="3"),
    )


# =============================================================================
# Experiment configs
# =============================================================================

@dataclass(frozen=True)
class PendulumConfig:
    """
    Attributes:
        length: Rod length L in meters.
        gravity: g in m/s².
        initial_angle_deg: Release angle in degrees (released from rest).
        damping: Linear damping coefficient c.
    """
    length: float = 1.0
    gravity: float = 9.8
    initial_angle_deg: float = 30.0
    damping: float = 0.05

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PendulumConfig":
        return cls(
            length=float(d.get("length", 1.0)),
            gravity=float(d.get("gravity", 9.8)),
            initial_angle_deg=float(_get(d, "initial_angle_deg", "initialAngleDeg", "initialAngle", default=30.0)),
            damping=float(d.get("damping", 0.05)),
        )


@dataclass(frozen=True)
class OrbitalConfig:
    """
    Attributes:
        gravitational_constant: G used in F = G m1 m2 / d².
        time_scale: Multiplier applied to dt before integration.
        bodies: Initial conditions, in insertion order.
            Omitted from a dict, the default preset is used; it does not
            follow gravitationalConstant, so editing G alone keeps the run.
        trail_length: Points kept per orbit trail (0 disables trails).
        max_speed: Optional speed clamp. A visualization safeguard only,
            not part of the gravity law; None leaves velocities untouched.
        show_orbits: Draw orbit trails.
        show_velocity_vectors: Draw velocity arrows.
        show_force_vectors: Draw net-force arrows.
    """
    gravitational_constant: float = 3.0
    time_scale: float = 1.0
    bodies: tuple[BodySpec, ...] = field(default_factory=solar_system_preset)
    trail_length: int = DEFAULT_TRAIL_LENGTH
    max_speed: float | None = None
    show_orbits: bool = True
    show_velocity_vectors: bool = True
    show_force_vectors: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "bodies", tuple(self.bodies))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "OrbitalConfig":
        g = float(_get(d, "gravitational_constant", "gravitationalConstant", default=3.0))
        bodies_data = d.get("bodies")
        bodies = (
            tuple(BodySpec.from_dict(b) for b in bodies_data)
            if bodies_data is not None else solar_system_preset()
        )
        max_speed = _get(d, "max_speed", "maxSpeed")
        return cls(
            gravitational_constant=g,
            time_scale=float(_get(d, "time_scale", "timeScale", default=1.0)),
            bodies=bodies,
            trail_length=int(_get(d, "trail_length", "trailLength", default=DEFAULT_TRAIL_LENGTH)),
            max_speed=None if max_speed is None else float(max_speed),
            show_orbits=bool(_get(d, "show_orbits", "showOrbits", default=True)),
            show_velocity_vectors=bool(_get(d, "show_velocity_vectors", "showVelocityVectors", default=True)),
            show_force_vectors=bool(_get(d, "show_force_vectors", "showForceVectors", default=False)),
        )


@dataclass(frozen=True)
class CollisionConfig:
    """
    Attributes:
        restitution: Coefficient of restitution e ∈ [0, 1].
        bodies: Initial conditions, in insertion order.
        bounds: Container walls.
        use_gravity: Apply a uniform downward (+y, screen space) acceleration.
        gravity: Magnitude of that acceleration.
        slow_motion: Integrate at one fifth of real time.
        positional_correction: Push overlapping bodies apart after resolution.
            Off by default: overlap is left visible.
        show_velocity_vectors: Draw velocity arrows.
        show_momentum_vectors: Draw momentum arrows.
    """
    restitution: float = 0.8
    bodies: tuple[BodySpec, ...] = field(default_factory=three_ball_preset)
    bounds: Bounds = field(default_factory=Bounds)
    use_gravity: bool = False
    gravity: float = 720.0
    slow_motion: bool = False
    positional_correction: bool = False
    show_velocity_vectors: bool = True
    show_momentum_vectors: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "bodies", tuple(self.bodies))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "CollisionConfig":
        b = d.get("bounds")
        bounds = Bounds(*(float(v) for v in b)) if b is not None else Bounds()
        bodies_data = d.get("bodies")
        bodies = (
            tuple(BodySpec.from_dict(x) for x in bodies_data)
            if bodies_data is not None else three_ball_preset(bounds)
        )
        return cls(
            restitution=float(_get(d, "restitution", "elasticity", default=0.8)),
            bodies=bodies,
            bounds=bounds,
            use_gravity=bool(_get(d, "use_gravity", "useGravity", default=False)),
            gravity=float(d.get("gravity", 720.0)),
            slow_motion=bool(_get(d, "slow_motion", "slowMotion", default=False)),
            positional_correction=bool(_get(d, "positional_correction", "positionalCorrection", default=False)),
            show_velocity_vectors=bool(_get(d, "show_velocity_vectors", "showVelocityVectors", default=True)),
            show_momentum_vectors=bool(_get(d, "show_momentum_vectors", "showMomentumVectors", default=False)),
        )


@dataclass(frozen=True)
class WaveConfig:
    """
    Attributes:
        amplitude: Peak displacement A.
        frequency: Cycles across the visible width (and Hz for the clock).
        shape: One of "sine", "square", "triangle", "sawtooth".
        damping: Linear spatial damping d ∈ [0, 1).
        width: Visible width; wavelength = width / frequency.
        samples: Number of curve samples (default: one per unit of width).
        wave_speed: Assumed propagation speed for derived quantities.
        travelling: Advance the phase with the clock instead of a static curve.
        show_wavelength: Draw the wavelength indicator.
    """
    amplitude: float = 80.0
    frequency: float = 2.0
    shape: WaveShape = "sine"
    damping: float = 0.0
    width: float = 700.0
    samples: int | None = None
    wave_speed: float = DEFAULT_WAVE_SPEED
    travelling: bool = False
    show_wavelength: bool = True

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "WaveConfig":
        samples = d.get("samples")
        return cls(
            amplitude=float(d.get("amplitude", 80.0)),
            frequency=float(d.get("frequency", 2.0)),
            shape=str(_get(d, "shape", "waveType", default="sine")),
            damping=float(d.get("damping", 0.0)),
            width=float(d.get("width", 700.0)),
            samples=None if samples is None else int(samples),
            wave_speed=float(_get(d, "wave_speed", "waveSpeed", default=DEFAULT_WAVE_SPEED)),
            travelling=bool(d.get("travelling", False)),
            show_wavelength=bool(_get(d, "show_wavelength", "showWavelength", default=True)),
        )
