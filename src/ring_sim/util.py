# MIT License (see LICENSE)
"""
Utility functions for vector math, angles and environment switches.

All vector helpers operate on 2D vectors represented as numpy arrays of
shape (2,).
"""
from __future__ import annotations
import logging
import os

import numpy as np

from .constants import TAU


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets positions be passed as tuples or lists while keeping numerics
    consistent inside the simulation.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def wrap_angle(theta: float) -> float:
    """Wrap an angle into [0, 2π)."""
    wrapped = float(theta) % TAU
    # -1e-17 % TAU rounds to TAU itself
    return 0.0 if wrapped >= TAU else wrapped


def log_level(default: str = "INFO") -> int:
    """
    Logging level requested through the RING_SIM_LOG_LEVEL environment variable.

    Unknown names fall back to `default`.
    """
    name = os.environ.get("RING_SIM_LOG_LEVEL", default).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(default.upper())
