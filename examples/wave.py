from labsim import WaveConfig
from labsim.waves import derived_quantities, sample_curve

for shape in ["sine", "square", "triangle", "sawtooth"]:
    cfg = WaveConfig(amplitude=80.0, frequency=2.0, shape=shape, damping=0.5, samples=16)
    xs, ys = sample_curve(cfg)
    print(f"{shape:9s}", " ".join(f"{y:6.1f}" for y in ys))

print(derived_quantities(WaveConfig(frequency=2.0)))
