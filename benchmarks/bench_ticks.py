"""
Microbenchmark: time per tick vs pool capacity (pool kept full).
Run:
  python benchmarks/bench_ticks.py
"""
import time

import numpy as np
from particle_sim import Simulation, SimulationConfig, SpawnRequest
from particle_sim.core.invariants import kinetic_energy
from particle_sim.profiler import Profiler


def run(n: int, mode: str, ticks: int = 300):
    prof = Profiler()
    sim = Simulation(SimulationConfig(capacity=n, initial_mode=mode), profiler=prof)

    rng = np.random.default_rng(12345)
    for _ in range(n):
        x, y = rng.uniform(-0.8, 0.8, size=2)
        sim.spawn(SpawnRequest(float(x), float(y), vx=float(rng.normal()), vy=float(rng.normal())))

    t0 = time.perf_counter()
    for _ in range(ticks):
        sim.tick()
    t1 = time.perf_counter()

    return (t1 - t0) / ticks, prof.stats.summary(), kinetic_energy(sim.pool)


if __name__ == "__main__":
    for mode in ["small-gravity-euler", "small-gravity-rk4", "small-attractor-euler", "small-attractor-rk4"]:
        print(mode)
        for n in [50, 100, 250, 500]:
            per_tick, summary, ke = run(n, mode)
            print(f"  N={n:4d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}  KE={ke:10.3f}")
            for k in ["integrate", "age"]:
                if k in summary:
                    print("   ", k, summary[k])
        print()
