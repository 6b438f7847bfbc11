import sys

from labsim import FrameScheduler, OrbitalConfig, OrbitalExperiment
from labsim.renderer import DebugRenderer

exp = OrbitalExperiment(OrbitalConfig(time_scale=1.0, trail_length=120, show_force_vectors=True))
scheduler = FrameScheduler(exp, fixed_dt=1/60)
scheduler.run(300)

# print the last frame only
DebugRenderer(sys.stdout).render(exp.time, exp.primitives())
s = exp.snapshot()
print("KE", s["kinetic_energy"], "momentum", s["momentum"])
