import io
import math

import numpy as np
import pytest

from ring_sim import Simulation, SimulationConfig
from ring_sim.core.invariants import solid_arc, gap_angles_wrapped
from ring_sim.renderer import DebugRenderer, NullRenderer, BufferedRenderer, scroll_offset


def test_debug_renderer_output():
    sim = Simulation(seed=1)
    out = io.StringIO()
    renderer = DebugRenderer(output=out)

    renderer.render_frame(sim.step())

    text = out.getvalue()
    print(text)
    assert "=== Tick 1 ===" in text
    assert "ring[1] r=200.0 @ (300.0, 400.0)" in text
    assert "ball[1] r=20.0 @ (300.0, 100.5)" in text
    assert "passed=[]" in text


def test_debug_renderer_terse():
    sim = Simulation(seed=1)
    out = io.StringIO()
    DebugRenderer(output=out, verbose=False).render_simulation(sim)
    assert "vy=" not in out.getvalue()
    assert "ω=" not in out.getvalue()


def test_null_renderer_accepts_frames():
    sim = Simulation(seed=1)
    NullRenderer().render_frame(sim.step())


def test_buffered_renderer_records_frames():
    sim = Simulation(seed=1)
    renderer = BufferedRenderer()
    for _ in range(10):
        renderer.render_frame(sim.step())

    assert [f["tick"] for f in renderer.frames] == list(range(1, 11))
    last = renderer.frames[-1]
    ring = last["rings"][0]
    start, end = ring["solid_arc"]
    assert np.isclose(end - start, 2 * math.pi - math.pi / 3)
    assert ring["position"] == [300.0, 400.0]
    assert last["projectiles"][0]["passed"] == []

    renderer.clear()
    assert renderer.frames == []


def test_solid_arc_follows_gap():
    sim = Simulation(seed=1)
    ring = sim.rings[0]
    start, end = solid_arc(ring)
    assert np.isclose(start, ring.gap_angle + ring.gap_width)
    assert np.isclose(end, ring.gap_angle + 2 * math.pi)


def test_gap_angles_stay_wrapped_during_run():
    sim = Simulation(config=SimulationConfig(variant="multi"), seed=8)
    sim.spawn_ring_below()
    sim.set_rotation_speed_multiplier(10)
    for _ in range(2000):
        sim.step()
        assert gap_angles_wrapped(sim.rings)


def test_scroll_offset_stays_zero_for_single_ring():
    sim = Simulation(seed=1)
    sim.projectiles[0].position[1] = 790.0
    assert scroll_offset(sim) == 0.0


def test_scroll_offset_follows_deepest_ball_down_the_stack():
    """Two extra rings make the world 1200 tall, so the camera may move 400."""
    sim = Simulation(config=SimulationConfig(variant="multi"), seed=1)
    sim.spawn_ring_below()
    sim.spawn_ring_below()
    assert scroll_offset(sim) == 0.0

    deep = sim.add_projectile(300.0, 700.0, 20.0)
    # 700 - 0.6 * 800
    assert np.isclose(scroll_offset(sim), 220.0)

    deep.position[1] = 1150.0
    assert scroll_offset(sim) == 400.0

    sim.projectiles = []
    assert scroll_offset(sim) == 0.0


def test_pygame_renderer_draws_gap_open():
    pygame = pytest.importorskip("pygame")
    from ring_sim.renderer.pygame_view import PygameRenderer, BACKGROUND, BALL_COLOR, RING_COLOR

    sim = Simulation(config=SimulationConfig(rotation_multiplier=0.0), seed=1)
    surface = pygame.Surface((600, 800))
    renderer = PygameRenderer(surface, flip=False)

    renderer.render_simulation(sim)

    # ball centre
    assert tuple(surface.get_at((300, 100)))[:3] == BALL_COLOR
    # middle of the gap, angle π + π/6
    gx = int(300 + 200 * math.cos(7 * math.pi / 6))
    gy = int(400 + 200 * math.sin(7 * math.pi / 6))
    assert tuple(surface.get_at((gx, gy)))[:3] == BACKGROUND
    # solid arc at angle 0
    near = {tuple(surface.get_at((500 + dx, 400 + dy)))[:3] for dx in range(-2, 3) for dy in range(-2, 3)}
    assert RING_COLOR in near


def test_pygame_renderer_random_colors_are_stable():
    pygame = pytest.importorskip("pygame")
    from ring_sim.renderer.pygame_view import PygameRenderer

    sim = Simulation(config=SimulationConfig(variant="multi"), seed=1)
    sim.spawn_ring_below()
    renderer = PygameRenderer(pygame.Surface((600, 800)), random_ring_colors=True, seed=4, flip=False)

    first = [renderer.ring_color(r) for r in sim.rings]
    assert [renderer.ring_color(r) for r in sim.rings] == first
    renderer.forget()
    assert renderer._colors == {}
