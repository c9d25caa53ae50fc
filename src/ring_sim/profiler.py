# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    for _ in range(600):
        sim.step()
    print(profiler.stats.summary()["projectiles"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) keyed by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to a dict with keys 'n' (sample count),
            'mean_ms', 'max_ms' and 'total_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """
    Context-manager based timer for the phases of Simulation.step().

    Phases recorded by the simulation: "rings", "projectiles", "spawn",
    "despawn".
    """

    def __init__(self, clock=time.perf_counter) -> None:
        self.stats = ProfileStats()
        self._clock = clock

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under `name`."""
        t0 = self._clock()
        try:
            yield
        finally:
            self.stats.add(name, self._clock() - t0)
