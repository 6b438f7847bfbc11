import io

from labsim.experiments import OrbitalExperiment
from labsim.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from labsim.renderer.primitives import (
    CirclePrimitive,
    LinePrimitive,
    PolylinePrimitive,
    TextPrimitive,
    point,
)


def test_debug_renderer_writes_one_line_per_primitive():
    out = io.StringIO()
    r = DebugRenderer(out)
    r.render(0.5, [
        CirclePrimitive(center=(1.0, 2.0), radius=3.0, label="Sun"),
        LinePrimitive(start=(0.0, 0.0), end=(1.0, -1.0), kind="rod"),
        PolylinePrimitive(points=((0.0, 0.0), (1.0, 1.0), (2.0, 0.0)), kind="wave"),
        TextPrimitive(position=(0.0, 0.0), text="A"),
    ])
    text = out.getvalue()
    print(text)
    assert text.startswith("=== Frame t=0.5000 ===")
    assert "circle[body] 'Sun' r=3.00 @ (1.00, 2.00)" in text
    assert "line[rod] (0.00, 0.00) -> (1.00, -1.00)" in text
    assert "polyline[wave] 3 points" in text
    assert "text[label] A" in text


def test_buffered_renderer_keeps_last_frames():
    r = BufferedRenderer(max_frames=3)
    for k in range(5):
        r.render(float(k), [CirclePrimitive(center=(0.0, 0.0), radius=1.0)])
    assert [f["time"] for f in r.frames] == [2.0, 3.0, 4.0]
    r.clear()
    assert r.frames == []


def test_buffered_renderer_ignores_draw_outside_frame():
    r = BufferedRenderer()
    r.draw(TextPrimitive(position=(0.0, 0.0), text="stray"))
    r.end_frame()
    assert r.frames == []


def test_null_renderer_accepts_experiment_frames():
    exp = OrbitalExperiment()
    NullRenderer().render(exp.time, exp.primitives())


def test_point_converts_arrays():
    import numpy as np

    p = point(np.array([1.5, -2.0]))
    assert p == (1.5, -2.0)
    assert all(type(c) is float for c in p)
