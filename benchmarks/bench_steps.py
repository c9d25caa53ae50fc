"""
Microbenchmark: time per step vs number of balls.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from ring_sim import Simulation, SimulationConfig
from ring_sim.profiler import Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    # Tall view so balls stay alive for the whole run
    cfg = SimulationConfig(variant="single", view_height=1e9)
    sim = Simulation(config=cfg, seed=12345, profiler=prof)

    rng = np.random.default_rng(12345)
    for _ in range(n - 1):
        x = cfg.center_x + float(rng.uniform(-60.0, 60.0))
        y = cfg.spawn_y + float(rng.uniform(0.0, 50.0))
        sim.add_projectile(x, y)

    # warmup
    for _ in range(30):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["rings", "projectiles", "spawn", "despawn"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
