# MIT License (see LICENSE)
"""
Renderer adapters for visualizing the simulation.

The simulation never draws. After each step a renderer reads the exposed ring
and projectile lists and draws them. Colours and other visuals are decided
here, never in the core.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import RingBoundary, Projectile
from ..core.invariants import solid_arc

if TYPE_CHECKING:
    from ..simulation import Simulation, Frame


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        frame = sim.step()
        renderer.render_frame(frame)

    Or, without a Frame:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """Begin drawing the frame for `tick`."""
        ...

    @abstractmethod
    def draw_ring(self, ring: RingBoundary) -> None:
        """Draw a ring with its gap left open."""
        ...

    @abstractmethod
    def draw_projectile(self, projectile: Projectile) -> None:
        """Draw a ball."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_frame(self, frame: "Frame") -> None:
        """Draw every ring, then every projectile, of a step's Frame."""
        self._render(frame.tick, frame.rings, frame.projectiles)

    def render_simulation(self, sim: "Simulation") -> None:
        """Draw the current state of a simulation."""
        self._render(sim.tick, sim.rings, sim.projectiles)

    def _render(self, tick: int, rings: list[RingBoundary], projectiles: list[Projectile]) -> None:
        self.begin_frame(tick)
        for ring in rings:
            self.draw_ring(ring)
        for p in projectiles:
            self.draw_projectile(p)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Tick 12 ===
        ring[1] r=200.0 @ (300.0, 400.0) gap=3.262+1.047 ω=0.0100
        ball[1] r=20.0 @ (300.0, 139.0) vy=6.00 passed=[]
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include angular velocity and passed rings.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, tick: int) -> None:
        self.output.write(f"=== Tick {tick} ===\n")

    def draw_ring(self, ring: RingBoundary) -> None:
        line = (
            f"ring[{ring.id}] r={ring.radius:.1f} @ ({ring.x:.1f}, {ring.y:.1f})"
            f" gap={ring.gap_angle:.3f}+{ring.gap_width:.3f}"
        )
        if self.verbose:
            line += f" ω={ring.angular_velocity:.4f}"
        self.output.write(line + "\n")

    def draw_projectile(self, projectile: Projectile) -> None:
        line = f"ball[{projectile.id}] r={projectile.radius:.1f} @ ({projectile.x:.1f}, {projectile.y:.1f})"
        if self.verbose:
            line += f" vy={projectile.velocity_y:.2f} passed={sorted(projectile.passed)}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_ring(self, ring: RingBoundary) -> None:
        pass

    def draw_projectile(self, projectile: Projectile) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records each frame as plain data.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            renderer.render_frame(sim.step())

        for frame in renderer.frames:
            print(frame["tick"], len(frame["projectiles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {
            "tick": tick,
            "rings": [],
            "projectiles": [],
        }

    def draw_ring(self, ring: RingBoundary) -> None:
        if self._current_frame is None:
            return
        start, end = solid_arc(ring)
        self._current_frame["rings"].append({
            "id": ring.id,
            "position": ring.position.tolist(),
            "radius": ring.radius,
            "gap_angle": ring.gap_angle,
            "gap_width": ring.gap_width,
            "solid_arc": [start, end],
        })

    def draw_projectile(self, projectile: Projectile) -> None:
        if self._current_frame is None:
            return
        self._current_frame["projectiles"].append({
            "id": projectile.id,
            "position": projectile.position.tolist(),
            "radius": projectile.radius,
            "velocity_y": projectile.velocity_y,
            "passed": sorted(projectile.passed),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()


def scroll_offset(sim: "Simulation", lead: float = 0.6) -> float:
    """
    Vertical camera offset that keeps the deepest ball on screen.

    The deepest ball sits `lead` of the way down the view. The offset is
    clamped to [0, world_height - view_height], so it stays 0 when the world
    fits the view (single variant, or a short ring stack).
    """
    view_h = sim.config.view_height
    limit = max(0.0, sim.world_height - view_h)
    if not sim.projectiles:
        return 0.0
    deepest = max(p.y for p in sim.projectiles)
    return min(max(deepest - lead * view_h, 0.0), limit)
