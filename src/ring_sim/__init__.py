# MIT License (see LICENSE)
"""
ring_sim - falling balls and rotating rings with a gap.

Balls fall under gravity and bounce off the inside of rotating rings, unless
they reach a ring while its gap faces them, in which case they fall through
and never collide with that ring again.

Main entry points:
    - Simulation: The world, stepped once per rendered frame.
    - SimulationConfig: Tunable parameters and variant selection.
    - RingBoundary: A ring with a rotating gap.
    - Projectile: A falling ball.

Submodules:
    - collision: Gap test and ring-vs-ball resolution.
    - core: Integrator and invariant checks.
    - renderer: Optional visualization adapters.

Example:
    from ring_sim import Simulation

    sim = Simulation(seed=1)
    for _ in range(120):
        frame = sim.step()
    print(frame.projectiles)
"""
from .simulation import Simulation, Frame
from .config import SimulationConfig, config_from_dict
from .types import RingBoundary, Projectile
from .collision import RingEvent, RingEventKind

__all__ = [
    # Simulation
    "Simulation",
    "Frame",
    # Configuration
    "SimulationConfig",
    "config_from_dict",
    # Entities
    "RingBoundary",
    "Projectile",
    # Events
    "RingEvent",
    "RingEventKind",
]
