# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Integrators: explicit Euler for falling projectiles.
    - Invariants: energy and angle checks for tests and debugging.

Typical usage:
    from ring_sim.core import euler_step

    euler_step(projectile, gravity=0.5)
"""
from .integrators import euler_step
from .invariants import kinetic_energy, gap_angles_wrapped, solid_arc

__all__ = [
    # Integrators
    "euler_step",
    # Invariants
    "kinetic_energy",
    "gap_angles_wrapped",
    "solid_arc",
]
