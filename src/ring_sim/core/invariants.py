# MIT License (see LICENSE)
"""
Utilities for checking simulation state.

Used by tests and debugging tools to verify that bounces dissipate energy and
that ring angles stay wrapped.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..constants import TAU

if TYPE_CHECKING:
    from ..types import Projectile, RingBoundary


def kinetic_energy(projectiles: "list[Projectile]") -> float:
    """
    Total vertical kinetic energy per unit mass.

    T = Σ 0.5 * v_y²

    A bounce with factor e scales a projectile's contribution by e².
    """
    return sum(0.5 * p.velocity_y * p.velocity_y for p in projectiles)


def gap_angles_wrapped(rings: "list[RingBoundary]") -> bool:
    """True when every ring's gap angle lies in [0, 2π)."""
    return all(0.0 <= r.gap_angle < TAU for r in rings)


def solid_arc(ring: "RingBoundary") -> tuple[float, float]:
    """
    Angular span of the collidable part of a ring.

    Returns:
        (start, end) with end - start = 2π - gap_width. The arc runs from the
        end of the gap round to its start.
    """
    start = ring.gap_angle + ring.gap_width
    return start, ring.gap_angle + TAU
