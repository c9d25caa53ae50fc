# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Gap test: whether an angle falls inside a ring's rotating gap.
    - Ring resolution: pass-through marking and energy-loss bounces.

Typical usage:
    from ring_sim.collision import resolve_rings

    for event in resolve_rings(projectile, rings):
        print(event.kind, event.ring_id)
"""
from .ring import (
    RingEvent,
    RingEventKind,
    angular_gap_test,
    inside_inner_disc,
    resolve_ring,
    resolve_rings,
)

__all__ = [
    "RingEvent",
    "RingEventKind",
    "angular_gap_test",
    "inside_inner_disc",
    "resolve_ring",
    "resolve_rings",
]
