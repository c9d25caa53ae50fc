# examples/multi_ring.py
# Headless multi-ring run. A fake clock advances 1/60 s per step so rings
# appear on schedule without waiting in real time.
import logging

from ring_sim import Simulation, SimulationConfig
from ring_sim.util import log_level

logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

now = [0.0]
sim = Simulation(
    config=SimulationConfig(variant="multi", ring_spawn_interval=2.0),
    seed=3,
    clock=lambda: now[0],
)

for _ in range(1200):
    now[0] += 1 / 60
    sim.step()

print("rings:", [(r.id, r.y, r.direction) for r in sim.rings])
print("balls:", len(sim.projectiles), "world height:", sim.world_height)
print("cleared all rings:", sum(sim.eligible_for_bonus(p) for p in sim.projectiles))
