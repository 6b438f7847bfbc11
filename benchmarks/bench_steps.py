"""
Microbenchmark: time per frame vs number of orbiting bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from labsim import BodySpec, FrameScheduler, OrbitalConfig, OrbitalExperiment
from labsim.config import circular_orbit_speed
from labsim.profiler import Profiler
from labsim.renderer import NullRenderer


def run(n: int, frames: int = 120):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    G, M = 3.0, 10000.0
    specs = [BodySpec(mass=M, position=(0.0, 0.0), radius=25.0, name="Star", fixed=True)]
    for k in range(n):
        r = 60.0 + 300.0 * float(rng.random())
        a = 2 * np.pi * float(rng.random())
        v = circular_orbit_speed(G, M, r)
        specs.append(BodySpec(
            mass=1.0 + float(rng.random()),
            position=(r * np.cos(a), r * np.sin(a)),
            velocity=(-v * np.sin(a), v * np.cos(a)),
            radius=3.0,
        ))

    exp = OrbitalExperiment(OrbitalConfig(gravitational_constant=G, bodies=tuple(specs)))
    scheduler = FrameScheduler(exp, NullRenderer(), fixed_dt=1/60, profiler=prof)
    scheduler.mount()

    # warmup
    for _ in range(10):
        scheduler.tick()

    prof.stats.reset()
    t0 = time.perf_counter()
    for _ in range(frames):
        scheduler.tick()
    t1 = time.perf_counter()

    per_frame = (t1 - t0) / frames
    return per_frame, prof.stats.summary()


if __name__ == "__main__":
    for n in [4, 16, 32, 64, 128]:
        per_frame, summary = run(n)
        print(f"N={n:4d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["step", "render"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
