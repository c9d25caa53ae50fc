# MIT License (see LICENSE)
"""
The simulation driver.

Simulation owns the rings and projectiles and advances them one tick at a
time. Each call to step():

    1. Advances every ring's gap angle.
    2. Integrates every projectile against the full ring sequence
       (gravity, then pass-through or bounce per ring).
    3. Applies the variant's spawn policy.
    4. Removes projectiles that fell below the world (the view, or the
       bottom of the ring stack in the multi variant).

Steps 3 and 4 never restructure the projectile list while iterating it: they
first mark projectiles, then rebuild the list.

The driver is single-threaded. step(), add_projectile(), reset() and
set_rotation_speed_multiplier() all read-modify-write the same collections
and must be called from the same thread (e.g. a frame callback and the UI
event handlers of one event loop).

Structure:
    - User creates a Simulation (optionally with a config, seed and clock).
    - A frame callback calls step() and renders the returned Frame.
    - UI events call add_projectile(), reset(), set_rotation_speed_multiplier().
"""
from __future__ import annotations
import logging
import math
import time
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from . import constants as C
from .config import SimulationConfig
from .types import RingBoundary, Projectile
from .collision.ring import RingEvent
from .profiler import Profiler

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """
    State exposed to the renderer after a step.

    Attributes:
        tick: Number of steps taken since the last reset.
        rings: The live ring list (insertion order).
        projectiles: The live projectile list.
        events: Pass-through and bounce events of this step.
    """
    tick: int
    rings: list[RingBoundary]
    projectiles: list[Projectile]
    events: list[RingEvent] = field(default_factory=list)


@dataclass
class Simulation:
    """
    Rotating-ring simulation world.

    Attributes:
        config: Tunable parameters (variant, geometry, spawn policy).
        seed: Seed for the random source when `rng` is not given.
        rng: Random source for radii, gap phases, directions and bonus rolls.
        clock: Seconds-returning callable driving the ring spawn timer
               (multi variant). Tests inject a fake clock.
        profiler: Optional Profiler timing each phase of step().
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    seed: int | None = None
    rng: np.random.Generator | None = None
    clock: Callable[[], float] = time.monotonic
    profiler: Profiler | None = None

    # Internal state
    rings: list[RingBoundary] = field(default_factory=list, init=False)
    projectiles: list[Projectile] = field(default_factory=list, init=False)
    tick: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Create the random source and the starting configuration."""
        if self.rng is None:
            self.rng = np.random.default_rng(self.seed)
        self.rotation_multiplier = self._clamp_multiplier(self.config.rotation_multiplier)
        self._next_ring_id = 1
        self._next_projectile_id = 1
        self._last_ring_spawn = self.clock()
        self.reset()

    @property
    def gravity(self) -> float:
        return self.config.gravity

    # ------------------------------------------------------------------
    # External interface
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Return to the starting configuration.

        One ring centred in the view with its gap at the initial angle, one
        ball above it, spawn timer restarted. The rotation multiplier is kept.
        """
        cfg = self.config
        self.rings = []
        self.projectiles = []
        self.tick = 0
        self._last_ring_spawn = self.clock()

        self.add_ring(RingBoundary(
            position=(cfg.center_x, cfg.view_height / 2),
            radius=cfg.ring_radius,
            gap_width=cfg.gap_width,
            gap_angle=cfg.initial_gap_angle,
        ))
        self.add_projectile(cfg.center_x, cfg.spawn_y, cfg.initial_radius)
        logger.info("simulation reset (variant=%s)", cfg.variant)

    def add_ring(self, ring: RingBoundary) -> int:
        """
        Add a ring, assign its id and set its speed from the current multiplier.

        Returns:
            The assigned ring id.
        """
        ring.id = self._next_ring_id
        self._next_ring_id += 1
        ring.apply_speed(self.config.base_angular_speed, self.rotation_multiplier)
        self.rings.append(ring)
        return ring.id

    def add_projectile(
        self,
        x: float | None = None,
        y: float | None = None,
        radius: float | None = None,
    ) -> Projectile:
        """
        Drop a new ball.

        Args:
            x: Horizontal position, defaults to the view centre.
            y: Vertical position, defaults to the spawn height.
            radius: Ball radius, defaults to a random value in [15, 25).

        Returns:
            The new projectile (already added, id assigned).
        """
        cfg = self.config
        if x is None:
            x = cfg.center_x
        if y is None:
            y = cfg.spawn_y
        if radius is None:
            radius = C.RANDOM_RADIUS_MIN + float(self.rng.random()) * C.RANDOM_RADIUS_SPAN

        p = Projectile(position=(x, y), radius=radius)
        p.id = self._next_projectile_id
        self._next_projectile_id += 1
        self.projectiles.append(p)
        return p

    def set_rotation_speed_multiplier(self, value: Any) -> float:
        """
        Update the rotation-speed multiplier from UI input.

        Accepts numbers or numeric strings. Non-numeric or non-finite input
        is ignored and the previous multiplier kept. Numeric input is clamped
        into [0, max_rotation_multiplier].

        With the "reassign" policy every existing ring picks up the new
        speed at once; with "on_create" only rings created later do.

        Returns:
            The multiplier in effect after the call.
        """
        try:
            v = float(value)
        except (TypeError, ValueError):
            logger.warning("ignoring non-numeric rotation speed %r", value)
            return self.rotation_multiplier
        if not math.isfinite(v):
            logger.warning("ignoring non-finite rotation speed %r", value)
            return self.rotation_multiplier

        self.rotation_multiplier = self._clamp_multiplier(v)
        if self.config.speed_policy == "reassign":
            for ring in self.rings:
                ring.apply_speed(self.config.base_angular_speed, self.rotation_multiplier)
        return self.rotation_multiplier

    def query_ring(self, point: tuple[float, float]) -> RingBoundary | None:
        """
        Find the most recently added ring whose circle contains `point`.

        Used for UI hit-testing.
        """
        px, py = point
        for ring in reversed(self.rings):
            if ring.contains_point(px, py):
                return ring
        return None

    def step(self) -> Frame:
        """Advance the simulation by one tick and return the new frame."""
        with self._section("rings"):
            for ring in self.rings:
                ring.advance()

        with self._section("projectiles"):
            events = self._integrate_projectiles()

        with self._section("spawn"):
            if self.config.variant == "single":
                self._spawn_replacements()
            else:
                self._spawn_bonus_projectiles()
                self._spawn_ring_on_timer()

        with self._section("despawn"):
            self._despawn()

        self.tick += 1
        return Frame(self.tick, self.rings, self.projectiles, events)

    # ------------------------------------------------------------------
    # Step phases
    # ------------------------------------------------------------------

    def _integrate_projectiles(self) -> list[RingEvent]:
        cfg = self.config
        events = []
        for p in self.projectiles:
            events.extend(p.integrate(self.rings, cfg.gravity, cfg.bounce_factor))
        for e in events:
            logger.debug(
                "projectile %d %s ring %d at %.3f rad (tick %d)",
                e.projectile_id, e.kind.value, e.ring_id, e.angle, self.tick,
            )
        return events

    def _spawn_replacements(self) -> None:
        """
        Single-ring policy.

        Every ball that has passed the ring and dropped below it fires a
        trigger. If any fired, all passed balls are dropped and each trigger
        adds two small balls at the ring's centre height.
        """
        ring = self.rings[0]
        threshold = ring.y + ring.radius
        triggers = sum(1 for p in self.projectiles if p.has_passed and p.y > threshold)
        if triggers == 0:
            return

        drop = [p.has_passed for p in self.projectiles]
        self.projectiles = [p for p, d in zip(self.projectiles, drop) if not d]

        cfg = self.config
        for _ in range(triggers):
            self.add_projectile(cfg.center_x - cfg.replacement_offset, ring.y, cfg.replacement_radius)
            self.add_projectile(cfg.center_x + cfg.replacement_offset, ring.y, cfg.replacement_radius)
        logger.info(
            "%d ball(s) passed ring %d, dropped %d, spawned %d",
            triggers, ring.id, sum(drop), 2 * triggers,
        )

    def eligible_for_bonus(self, projectile: Projectile) -> bool:
        """True when the projectile has cleared every ring currently present."""
        return len(projectile.passed) == len(self.rings)

    def _spawn_bonus_projectiles(self) -> None:
        """Multi-ring policy: balls that cleared every ring may spawn another."""
        cfg = self.config
        candidates = [p for p in self.projectiles if self.eligible_for_bonus(p)]
        for p in candidates:
            if self.rng.random() < cfg.bonus_spawn_probability:
                x = cfg.center_x + float(self.rng.uniform(-C.BONUS_SPAWN_JITTER, C.BONUS_SPAWN_JITTER))
                spawned = self.add_projectile(x, cfg.spawn_y)
                logger.debug("projectile %d spawned bonus projectile %d", p.id, spawned.id)

    def _spawn_ring_on_timer(self) -> None:
        """
        Multi-ring policy: every ring_spawn_interval seconds, add a ring below
        the last one. The timer keeps running while no balls exist; those
        intervals are skipped.
        """
        now = self.clock()
        if now - self._last_ring_spawn < self.config.ring_spawn_interval:
            return
        self._last_ring_spawn = now
        if not self.projectiles:
            return
        self.spawn_ring_below()

    def spawn_ring_below(self) -> RingBoundary:
        """
        Append a ring one spacing below the last ring.

        Same radius and gap width as the first ring; random gap phase and
        rotation direction.
        """
        cfg = self.config
        last = self.rings[-1]
        ring = RingBoundary(
            position=(last.x, last.y + cfg.ring_spacing),
            radius=cfg.ring_radius,
            gap_width=cfg.gap_width,
            gap_angle=float(self.rng.uniform(0.0, C.TAU)),
            direction=1 if self.rng.random() < 0.5 else -1,
        )
        self.add_ring(ring)
        logger.info("spawned ring %d at y=%.1f (%d rings)", ring.id, ring.y, len(self.rings))
        return ring

    @property
    def world_height(self) -> float:
        """
        Depth below which projectiles are removed.

        The view height for the single variant. In the multi variant the
        world extends down to the bottom of the lowest ring, so balls can
        reach every ring of the stack.
        """
        height = self.config.view_height
        if self.config.variant == "multi" and self.rings:
            last = self.rings[-1]
            height = max(height, last.y + last.radius)
        return height

    def _despawn(self) -> None:
        """Remove projectiles below the world."""
        height = self.world_height
        gone = [p.is_out_of_bounds(height) for p in self.projectiles]
        if not any(gone):
            return
        for p, g in zip(self.projectiles, gone):
            if g:
                logger.debug("projectile %d left the world at y=%.1f", p.id, p.y)
        self.projectiles = [p for p, g in zip(self.projectiles, gone) if not g]

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _clamp_multiplier(self, v: float) -> float:
        return min(max(float(v), 0.0), self.config.max_rotation_multiplier)
