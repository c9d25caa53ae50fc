# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for benchmarks.
    - BufferedRenderer: Records frames as plain data.
    - scroll_offset: Camera offset following the deepest ball.

The pygame renderer lives in `ring_sim.renderer.pygame_view` and needs the
optional `viewer` extra; it is not imported here.

Typical usage:
    from ring_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_frame(sim.step())
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    scroll_offset,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "scroll_offset",
]
