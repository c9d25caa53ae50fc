# MIT License (see LICENSE)
"""
Time-stepping for falling projectiles.

Projectiles only move vertically. One tick of Euler integration, velocity
first, is

    v_y <- v_y + g
    y   <- y + v_y

with g in pixels/tick². The result depends on the tick rate: callers must
step at a uniform cadence (one step per rendered frame) for reproducible
motion.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import Projectile


def euler_step(projectile: "Projectile", gravity: float) -> None:
    """
    Advance a projectile by one tick under constant gravity.

    Velocity is updated first and the new velocity moves the position.

    Args:
        projectile: Projectile to integrate (modified in-place).
        gravity: Downward acceleration per tick.
    """
    projectile.velocity_y += gravity
    projectile.position[1] += projectile.velocity_y
