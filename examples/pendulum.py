from labsim import FrameScheduler, PendulumConfig, PendulumExperiment, setup_logging
from labsim.core.invariants import pendulum_energy

setup_logging(level="INFO")

exp = PendulumExperiment(PendulumConfig(length=1.0, gravity=9.8, initial_angle_deg=30.0, damping=0.05))
scheduler = FrameScheduler(exp, fixed_dt=1/60)

e0 = pendulum_energy(exp.state)
scheduler.run(600)

s = exp.snapshot()
print("t", s["time"], "angle_deg", s["angle_deg"], "bob", s["bob"])
print("T_theory", s["theoretical_period"], "E0", e0, "E", s["energy"])
