# MIT License (see LICENSE)
"""
Simulation configuration.

SimulationConfig gathers every tunable of a run. Two variants are supported:

- "single": one ring. A ball that falls through the gap and drops below the
  ring is replaced by two smaller balls at the ring's centre height.
- "multi": rings keep appearing below the last one on a timer, and balls that
  have cleared every ring may spawn extra balls at the top.

The rotation-speed policy decides how the speed multiplier reaches rings:

- "reassign": changing the multiplier rewrites every existing ring's speed.
- "on_create": the multiplier is read only when a ring is created.

Config dict format (all keys optional):
{
  "variant": "single" | "multi",
  "speed_policy": "reassign" | "on_create",
  "view_width": float, "view_height": float,
  "gravity": float,
  "ring_radius": float,
  "gap_width": float,               # radians, in (0, 2π)
  "initial_gap_angle": float,
  "base_angular_speed": float,      # radians per tick at multiplier 1
  "bounce_factor": float,
  "ring_spacing": float,
  "ring_spawn_interval": float,     # seconds
  "bonus_spawn_probability": float,
  "rotation_multiplier": float,
  "max_rotation_multiplier": float
}
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any

from . import constants as C

VARIANTS = ("single", "multi")
SPEED_POLICIES = ("reassign", "on_create")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunable parameters of a simulation run.

    Attributes:
        variant: "single" or "multi" (see module docstring).
        speed_policy: "reassign" or "on_create".
        view_width, view_height: Canvas size. Projectiles below
                                 view_height + radius are removed.
        gravity: Downward acceleration per tick.
        ring_radius: Radius of every ring.
        gap_width: Angular width of the gap (radians).
        initial_gap_angle: Gap start angle of the first ring.
        base_angular_speed: Ring rotation in radians per tick at multiplier 1.
        bounce_factor: Fraction of vertical speed kept after a bounce.
        spawn_y: Height at which user and bonus balls appear.
        initial_radius: Radius of the ball created by reset().
        replacement_radius: Radius of the two balls spawned after a pass-through.
        replacement_offset: Horizontal offset of those two balls from the centre.
        ring_spacing: Vertical distance between consecutive rings (multi).
        ring_spawn_interval: Seconds between new rings (multi).
        bonus_spawn_probability: Per-tick chance that a ball which cleared
                                 every ring spawns another (multi).
        rotation_multiplier: Initial rotation-speed multiplier.
        max_rotation_multiplier: Upper clamp for the multiplier.
    """
    variant: str = "single"
    speed_policy: str = "reassign"
    view_width: float = C.VIEW_WIDTH
    view_height: float = C.VIEW_HEIGHT
    gravity: float = C.GRAVITY
    ring_radius: float = C.RING_RADIUS
    gap_width: float = C.GAP_WIDTH
    initial_gap_angle: float = C.INITIAL_GAP_ANGLE
    base_angular_speed: float = C.BASE_ANGULAR_SPEED
    bounce_factor: float = C.BOUNCE_FACTOR
    spawn_y: float = C.SPAWN_Y
    initial_radius: float = C.INITIAL_PROJECTILE_RADIUS
    replacement_radius: float = C.REPLACEMENT_RADIUS
    replacement_offset: float = C.REPLACEMENT_OFFSET
    ring_spacing: float = C.RING_SPACING
    ring_spawn_interval: float = C.RING_SPAWN_INTERVAL
    bonus_spawn_probability: float = C.BONUS_SPAWN_PROBABILITY
    rotation_multiplier: float = 1.0
    max_rotation_multiplier: float = C.MAX_ROTATION_MULTIPLIER

    def __post_init__(self) -> None:
        """Reject configurations the simulation cannot run."""
        if self.variant not in VARIANTS:
            raise ValueError(f"Unknown variant: '{self.variant}'")
        if self.speed_policy not in SPEED_POLICIES:
            raise ValueError(f"Unknown speed policy: '{self.speed_policy}'")
        if not self.view_width > 0 or not self.view_height > 0:
            raise ValueError(
                f"View size must be positive, got ({self.view_width}, {self.view_height})"
            )
        if not self.ring_radius > 0:
            raise ValueError(f"Ring radius must be positive, got {self.ring_radius}")
        if not 0 < self.gap_width < C.TAU:
            raise ValueError(f"Gap width must lie in (0, 2π), got {self.gap_width}")
        if not self.ring_spawn_interval > 0:
            raise ValueError(
                f"Ring spawn interval must be positive, got {self.ring_spawn_interval}"
            )
        if not 0.0 <= self.bonus_spawn_probability <= 1.0:
            raise ValueError(
                f"Bonus spawn probability must lie in [0, 1], got {self.bonus_spawn_probability}"
            )
        if not self.max_rotation_multiplier >= 0:
            raise ValueError(
                f"Max rotation multiplier must be non-negative, got {self.max_rotation_multiplier}"
            )

    @property
    def center_x(self) -> float:
        return self.view_width / 2


def config_from_dict(data: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a plain mapping.

    Missing keys take their defaults. Numeric values are coerced to float.

    Raises:
        ValueError: On unknown keys, non-numeric values, or values the
                    config itself rejects.
    """
    known = {f.name: f for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in ("variant", "speed_policy"):
            kwargs[key] = str(value)
            continue
        try:
            kwargs[key] = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Config value for '{key}' must be numeric, got {value!r}") from exc
    return SimulationConfig(**kwargs)
