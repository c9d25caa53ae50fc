# MIT License (see LICENSE)
"""
Core type definitions for the ring simulation.

Defines the two simulated entities:
- RingBoundary: a circle with a rotating angular gap.
- Projectile: a falling ball that bounces inside rings or falls through
  their gaps.

Both are plain dataclasses. Ids are assigned by Simulation when an entity is
added; pass-through tracking refers to rings by id, never by object identity.
Both compare by identity.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import GRAVITY, BOUNCE_FACTOR
from .util import f64, norm2, wrap_angle
from .core.integrators import euler_step
from .collision.ring import RingEvent, angular_gap_test, resolve_rings


@dataclass(eq=False)
class RingBoundary:
    """
    A circular boundary with a rotating gap.

    Attributes:
        position: Centre [x, y], fixed for the ring's lifetime.
        radius: Ring radius (> 0).
        gap_width: Angular width of the gap in radians, in (0, 2π).
        gap_angle: Start angle of the gap in radians, wrapped into [0, 2π).
        angular_velocity: Signed rotation rate in radians per tick.
        direction: Rotation sense (+1 or -1) chosen at creation. Kept so the
                   speed multiplier can be reapplied without losing the sign.
        id: Unique identifier assigned by Simulation.add_ring().
    """
    position: np.ndarray | tuple[float, float]
    radius: float
    gap_width: float
    gap_angle: float = 0.0
    angular_velocity: float = 0.0
    direction: int = 1
    id: int = -1

    def __post_init__(self) -> None:
        """Convert the centre to a float64 array and wrap the gap angle."""
        self.position = f64(self.position)
        self.gap_angle = wrap_angle(self.gap_angle)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def advance(self) -> None:
        """Rotate the gap by one tick's worth of angular velocity."""
        self.gap_angle = wrap_angle(self.gap_angle + self.angular_velocity)

    def in_gap(self, world_angle: float) -> bool:
        """Whether the absolute angle `world_angle` (radians) falls in the gap."""
        return angular_gap_test(world_angle, self.gap_angle, self.gap_width)

    def contains_point(self, x: float, y: float) -> bool:
        """Whether (x, y) lies strictly inside the ring's circle."""
        d = np.array([x - self.position[0], y - self.position[1]], dtype=np.float64)
        return norm2(d) < self.radius * self.radius

    def apply_speed(self, base_speed: float, multiplier: float) -> None:
        """Set the angular velocity from a base speed and a multiplier, keeping direction."""
        self.angular_velocity = self.direction * base_speed * multiplier


@dataclass(eq=False)
class Projectile:
    """
    A falling ball.

    Only vertical motion is simulated; x stays where the ball was spawned.

    Attributes:
        position: Centre [x, y].
        radius: Ball radius, fixed at creation.
        velocity_y: Vertical velocity in pixels per tick (positive is down).
        passed: Ids of the rings this ball has fallen through. Only grows.
        id: Unique identifier assigned by Simulation.add_projectile().
    """
    position: np.ndarray | tuple[float, float]
    radius: float
    velocity_y: float = 0.0
    passed: set[int] = field(default_factory=set)
    id: int = -1

    def __post_init__(self) -> None:
        """Convert the centre to a float64 array for consistent numerics."""
        self.position = f64(self.position)
        self.velocity_y = float(self.velocity_y)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def has_passed(self) -> bool:
        """True once the ball has fallen through at least one ring."""
        return len(self.passed) > 0

    def integrate(
        self,
        rings: list[RingBoundary],
        gravity: float = GRAVITY,
        bounce_factor: float = BOUNCE_FACTOR,
    ) -> list[RingEvent]:
        """
        Advance the ball by one tick and resolve it against `rings`.

        Gravity is applied first, then each ring is checked in sequence order.

        Returns:
            The pass-through and bounce events of this tick.
        """
        euler_step(self, gravity)
        return resolve_rings(self, rings, bounce_factor)

    def is_out_of_bounds(self, view_height: float) -> bool:
        """True once the whole ball is below the bottom of the view."""
        return bool(self.position[1] > view_height + self.radius)
