# examples/single_ring.py
import logging

from ring_sim import Simulation
from ring_sim.renderer import DebugRenderer
from ring_sim.util import log_level

logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

sim = Simulation(seed=7)
renderer = DebugRenderer(verbose=True)

for _ in range(600):
    frame = sim.step()
    if frame.events or frame.tick % 60 == 0:
        renderer.render_frame(frame)

print("tick:", sim.tick)
print("balls:", [(p.id, round(p.y, 1), sorted(p.passed)) for p in sim.projectiles])
