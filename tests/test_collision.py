import math

import numpy as np
import pytest

from ring_sim import Simulation, SimulationConfig
from ring_sim.collision.ring import RingEventKind, resolve_ring, resolve_rings
from ring_sim.core.invariants import kinetic_energy
from ring_sim.types import RingBoundary, Projectile


def make_ring(ring_id=1, position=(0.0, 0.0), radius=100.0, gap_angle=0.0, gap_width=math.pi / 3):
    ring = RingBoundary(position=position, radius=radius, gap_width=gap_width, gap_angle=gap_angle)
    ring.id = ring_id
    return ring


@pytest.mark.parametrize("position", [(0.0, 80.0), (0.0, -80.0), (80.0, 0.0), (60.0, 60.0), (0.0, 300.0)])
def test_no_interaction_outside_inner_disc(position):
    """A ball whose centre is at distance >= R - r is never touched by the ring."""
    ring = make_ring(radius=100.0)
    p = Projectile(position=position, radius=20.0, velocity_y=3.0)

    event = resolve_ring(p, ring)

    assert event is None
    assert np.allclose(p.position, position)
    assert p.velocity_y == 3.0
    assert p.passed == set()


def test_bounce_reflects_with_energy_loss():
    """Hitting the solid arc flips vertical velocity and keeps 70% of its magnitude."""
    # gap spans [0, π/3]: the top of the ring (angle -π/2) is solid
    ring = make_ring(radius=100.0, gap_angle=0.0)
    p = Projectile(position=(0.0, -90.0), radius=5.0, velocity_y=-4.0)

    event = resolve_ring(p, ring)

    assert event.kind is RingEventKind.BOUNCED
    assert np.isclose(event.angle, -math.pi / 2)
    assert np.isclose(p.velocity_y, 2.8)
    assert np.isclose(abs(p.velocity_y), 0.7 * 4.0)
    assert np.isclose(p.position[1], -95.0)
    assert p.passed == set()


def test_bounce_only_corrects_vertical_position():
    """The push back onto the disc edge moves y only; x is untouched."""
    ring = make_ring(radius=100.0, gap_angle=0.0)
    p = Projectile(position=(-60.0, 70.0), radius=5.0, velocity_y=5.0)
    angle = math.atan2(70.0, -60.0)

    event = resolve_ring(p, ring)

    assert event.kind is RingEventKind.BOUNCED
    assert p.position[0] == -60.0
    assert np.isclose(p.position[1], 95.0 * math.sin(angle))
    assert np.isclose(p.velocity_y, -3.5)


def test_pass_through_marks_ring_and_keeps_motion():
    ring = make_ring(ring_id=7, radius=100.0, gap_angle=0.0)
    # angle π/6 is in the middle of the gap [0, π/3]
    pos = (50.0 * math.cos(math.pi / 6), 50.0 * math.sin(math.pi / 6))
    p = Projectile(position=pos, radius=5.0, velocity_y=6.0)

    event = resolve_ring(p, ring)

    assert event.kind is RingEventKind.PASSED
    assert event.ring_id == 7
    assert p.passed == {7}
    assert p.has_passed
    assert np.allclose(p.position, pos)
    assert p.velocity_y == 6.0


def test_passed_ring_is_ignored_forever():
    """Once a ring is in the passed set, no position on the solid arc bounces the ball."""
    ring = make_ring(ring_id=3, radius=100.0, gap_angle=0.0)
    p = Projectile(position=(0.0, -90.0), radius=5.0, velocity_y=-4.0)
    p.passed.add(3)

    for angle in np.linspace(-math.pi, math.pi, 37):
        p.position[:] = (60.0 * math.cos(angle), 60.0 * math.sin(angle))
        assert resolve_ring(p, ring) is None
    assert p.velocity_y == -4.0
    assert p.passed == {3}


def test_multiple_rings_resolved_in_order():
    """Overlapping rings can each bounce the ball in the same tick."""
    a = make_ring(ring_id=1, radius=100.0, gap_angle=0.0)
    b = make_ring(ring_id=2, radius=120.0, gap_angle=0.0)
    p = Projectile(position=(0.0, -90.0), radius=5.0, velocity_y=-10.0)

    events = resolve_rings(p, [a, b])

    assert [e.ring_id for e in events] == [1, 2]
    assert all(e.kind is RingEventKind.BOUNCED for e in events)
    assert np.isclose(p.velocity_y, -10.0 * (-0.7) * (-0.7))


def test_bounce_dissipates_kinetic_energy():
    ring = make_ring(radius=100.0, gap_angle=0.0)
    p = Projectile(position=(0.0, 90.0), radius=5.0, velocity_y=8.0)
    ke0 = kinetic_energy([p])

    resolve_ring(p, ring)

    assert np.isclose(kinetic_energy([p]) / ke0, 0.49)


def test_integrate_applies_gravity_before_collision():
    ring = make_ring(radius=100.0)
    p = Projectile(position=(0.0, -500.0), radius=5.0, velocity_y=1.0)

    events = p.integrate([ring], gravity=0.5)

    assert events == []
    assert p.velocity_y == 1.5
    assert p.position[1] == -498.5


def test_falling_ball_bounces_on_top_of_fixed_ring():
    """
    Ring at (300,400) r=200, gap [π, 4π/3], no rotation; ball dropped at
    (300,100) r=20 under gravity 0.5.

    The ball reaches the disc at its top (angle -π/2), outside the gap, so
    every tick whose raw Euler position lands inside the disc must be
    corrected back to y=220 with velocity reflected at 70%. It never passes.
    """
    sim = Simulation(config=SimulationConfig(rotation_multiplier=0.0))
    ring = sim.rings[0]
    ball = sim.projectiles[0]
    assert np.allclose(ring.position, (300.0, 400.0))
    assert np.allclose(ball.position, (300.0, 100.0))

    bounces = 0
    for _ in range(400):
        y0, v0 = ball.y, ball.velocity_y
        v_raw = v0 + 0.5
        y_raw = y0 + v_raw
        sim.step()

        if abs(y_raw - 400.0) < 180.0:
            bounces += 1
            assert np.isclose(ball.y, 220.0)
            assert np.isclose(ball.velocity_y, -0.7 * v_raw)
        else:
            assert np.isclose(ball.y, y_raw)
            assert np.isclose(ball.velocity_y, v_raw)
        assert not ball.has_passed
        assert ball.x == 300.0

    assert bounces > 0
    assert len(sim.projectiles) == 1 and sim.projectiles[0] is ball


def test_ball_entering_through_gap_passes():
    """
    Same ring, ball dropped at x=150: it enters the disc from the upper left,
    where atan2 gives about -π + 0.55, which normalizes into [0, π/3] relative
    to a gap at π. It passes without a single bounce.
    """
    ring = make_ring(position=(300.0, 400.0), radius=200.0, gap_angle=math.pi)
    p = Projectile(position=(150.0, 100.0), radius=20.0)

    kinds = []
    ticks = 0
    while p.y <= 500.0 and ticks < 1000:
        kinds.extend(e.kind for e in p.integrate([ring], gravity=0.5))
        ticks += 1

    print("ticks", ticks, "events", kinds)
    assert p.y > 500.0
    assert kinds == [RingEventKind.PASSED]
    assert p.passed == {ring.id}
