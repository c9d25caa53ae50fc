# MIT License (see LICENSE)
"""
Constants used throughout the simulation.

Units are screen units: positions in pixels with y pointing down, velocities
in pixels per tick, angles in radians measured clockwise on screen (the
direction atan2 increases when y grows downwards).
"""
from __future__ import annotations

import math

TAU: float = 2.0 * math.pi

# Default canvas size.
VIEW_WIDTH: float = 600.0
VIEW_HEIGHT: float = 800.0

# Downward acceleration applied every tick (pixels/tick²).
GRAVITY: float = 0.5

# Vertical velocity is multiplied by -BOUNCE_FACTOR on a solid-arc hit.
BOUNCE_FACTOR: float = 0.7

# Ring geometry of the starting configuration.
RING_RADIUS: float = 200.0
GAP_WIDTH: float = math.pi / 3
INITIAL_GAP_ANGLE: float = math.pi

# Radians per tick at a rotation multiplier of 1.
BASE_ANGULAR_SPEED: float = 0.01

# Projectile spawning.
SPAWN_Y: float = 100.0
INITIAL_PROJECTILE_RADIUS: float = 20.0
REPLACEMENT_RADIUS: float = 15.0
REPLACEMENT_OFFSET: float = 15.0
RANDOM_RADIUS_MIN: float = 15.0
RANDOM_RADIUS_SPAN: float = 10.0

# Multi-ring variant.
RING_SPACING: float = 300.0
RING_SPAWN_INTERVAL: float = 3.0
BONUS_SPAWN_PROBABILITY: float = 0.3
BONUS_SPAWN_JITTER: float = 50.0

MAX_ROTATION_MULTIPLIER: float = 10.0
