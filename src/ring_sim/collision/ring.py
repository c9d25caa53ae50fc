# MIT License (see LICENSE)
"""
Ring-vs-projectile collision detection and resolution.

A ring is a circle with an angular gap. A projectile whose centre is inside
the ring's inner disc (shrunk by the projectile radius) either:

- lies in the gap: it is marked as having passed the ring, and is exempt
  from that ring forever after;
- lies against the solid arc: it is pushed back onto the inner disc boundary
  (vertical component only) and its vertical velocity is reflected with an
  energy-loss factor.

Only the inside of a ring is collidable. A projectile approaching a ring from
outside is unaffected until its centre enters the inner disc.

Precondition: ring.radius > projectile.radius. Degenerate geometry makes
every position count as inside and is not checked here.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from ..constants import TAU, BOUNCE_FACTOR
from ..util import norm

if TYPE_CHECKING:
    from ..types import RingBoundary, Projectile


class RingEventKind(str, Enum):
    """Outcome of a projectile touching a ring during one tick."""
    PASSED = "passed"
    BOUNCED = "bounced"


@dataclass(frozen=True)
class RingEvent:
    """
    A pass-through or bounce that happened during a tick.

    Attributes:
        kind: PASSED or BOUNCED.
        ring_id: Id of the ring involved.
        projectile_id: Id of the projectile involved.
        angle: Angle from the ring centre to the projectile centre (radians).
    """
    kind: RingEventKind
    ring_id: int
    projectile_id: int
    angle: float


def angular_gap_test(world_angle: float, gap_angle: float, gap_width: float) -> bool:
    """
    Check whether an absolute angle falls inside a gap.

    The gap spans [gap_angle, gap_angle + gap_width] (mod 2π). The extra
    2·2π keeps the left operand positive for any angle produced by atan2
    and any wrapped gap angle, so the remainder is taken of a positive value.

    Args:
        world_angle: Angle from the ring centre to a point, any real value.
        gap_angle: Current start angle of the gap, in [0, 2π).
        gap_width: Angular width of the gap, in (0, 2π).
    """
    normalized = (world_angle - gap_angle + 2 * TAU) % TAU
    return 0 <= normalized <= gap_width


def inside_inner_disc(projectile: "Projectile", ring: "RingBoundary") -> bool:
    """True when the projectile centre is strictly inside the collidable disc."""
    d = norm(projectile.position - ring.position)
    return d < ring.radius - projectile.radius


def resolve_ring(
    projectile: "Projectile",
    ring: "RingBoundary",
    bounce_factor: float = BOUNCE_FACTOR,
) -> RingEvent | None:
    """
    Resolve one projectile against one ring.

    Modifies the projectile in-place: adds the ring id to its passed set on a
    pass-through, or repositions it and reflects its vertical velocity on a
    bounce. Rings already passed are ignored.

    Args:
        projectile: The moving body.
        ring: The ring to test against.
        bounce_factor: Fraction of vertical speed kept after a bounce.

    Returns:
        The RingEvent that occurred, or None when nothing happened.
    """
    if ring.id in projectile.passed:
        return None
    if not inside_inner_disc(projectile, ring):
        return None

    dx = projectile.position[0] - ring.position[0]
    dy = projectile.position[1] - ring.position[1]
    angle = float(np.arctan2(dy, dx))

    if ring.in_gap(angle):
        projectile.passed.add(ring.id)
        return RingEvent(RingEventKind.PASSED, ring.id, projectile.id, angle)

    # Vertical-only correction; x is left where it is.
    projectile.position[1] = ring.position[1] + (ring.radius - projectile.radius) * np.sin(angle)
    projectile.velocity_y *= -bounce_factor
    return RingEvent(RingEventKind.BOUNCED, ring.id, projectile.id, angle)


def resolve_rings(
    projectile: "Projectile",
    rings: "list[RingBoundary]",
    bounce_factor: float = BOUNCE_FACTOR,
) -> list[RingEvent]:
    """
    Resolve a projectile against a sequence of rings, in order.

    Each ring is handled independently, so a projectile overlapping several
    rings may bounce more than once in a single tick.
    """
    events = []
    for ring in rings:
        event = resolve_ring(projectile, ring, bounce_factor)
        if event is not None:
            events.append(event)
    return events
