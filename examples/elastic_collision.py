from labsim import BodySpec, Bounds, CollisionConfig, CollisionExperiment, FrameScheduler
from labsim.renderer import BufferedRenderer

cfg = CollisionConfig(
    restitution=1.0,
    bounds=Bounds(0.0, 0.0, 800.0, 500.0),
    bodies=(
        BodySpec(mass=1.0, position=(200.0, 250.0), velocity=(+180.0, 0.0), radius=20.0, name="A"),
        BodySpec(mass=2.0, position=(600.0, 250.0), velocity=(-90.0, 0.0), radius=20.0, name="B"),
    ),
)
exp = CollisionExperiment(cfg)
renderer = BufferedRenderer(max_frames=10)
scheduler = FrameScheduler(exp, renderer, fixed_dt=1/60)

s0 = exp.snapshot()
scheduler.run(180)
s1 = exp.snapshot()

print("p0", s0["momentum"], "p1", s1["momentum"])
print("ke0", s0["kinetic_energy"], "ke1", s1["kinetic_energy"], "impacts", s1["impacts"])
print("v_final:", [b["velocity"] for b in s1["bodies"]])
