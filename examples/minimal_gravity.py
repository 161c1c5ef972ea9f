# examples/minimal_gravity.py
from particle_sim import Simulation, SimulationConfig, SpawnRequest
from particle_sim.logging_config import setup_logging

setup_logging()

sim = Simulation(SimulationConfig(capacity=100))
sim.apply_command("small-gravity-euler")

sim.tick(SpawnRequest(0.0, 0.5, vx=0.3, vy=1.0))
for _ in range(100):
    sim.tick()

for view in sim.snapshot():
    print("pos:", (view.x, view.y), "life:", view.ttl_ratio)
