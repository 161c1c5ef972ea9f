"""
Euler vs RK4 under identical settings.

Each scheme gets the same single particle and the same step size; the
printout shows how far the two trajectories drift apart.
"""
from particle_sim import Simulation, SimulationConfig, SpawnRequest

PAIRS = [
    ("small-gravity-euler", "small-gravity-rk4"),
    ("large-gravity-euler", "large-gravity-rk4"),
    ("small-attractor-euler", "small-attractor-rk4"),
    ("large-attractor-euler", "large-attractor-rk4"),
]
start = SpawnRequest(0.6, 0.0, vx=0.0, vy=2.5)

for euler_id, rk4_id in PAIRS:
    results = []
    for mode in (euler_id, rk4_id):
        sim = Simulation(SimulationConfig(capacity=1, initial_mode=mode))
        sim.tick(start)
        for _ in range(40):
            sim.tick()
        p = sim.pool[0]
        results.append((p.x, p.y))
    (xe, ye), (xr, yr) = results
    print(f"{euler_id:24s} ({xe:+.5f}, {ye:+.5f})")
    print(f"{rk4_id:24s} ({xr:+.5f}, {yr:+.5f})  diff=({xr - xe:+.2e}, {yr - ye:+.2e})")
