"""
Scripted pointer session: hold, drag, switch modes by key, clear.

Mirrors what an interactive host does each frame:
    spawn = pointer.spawn_request(sim.rng)
    sim.tick(spawn)
    renderer.render(sim)
"""
import logging

from particle_sim import PointerState, Simulation, SimulationConfig
from particle_sim.modes import HELP_TEXT
from particle_sim.logging_config import setup_logging
from particle_sim.renderer import DebugRenderer

setup_logging(logging.INFO)
print(HELP_TEXT)

sim = Simulation(SimulationConfig(seed=2021))
pointer = PointerState(screen_size=sim.config.screen_size)
renderer = DebugRenderer(verbose=False)

script = {0: "k", 60: "+", 120: "B", 180: "s", 200: "r", 260: "o"}

pointer.press(700, 500)
for frame in range(300):
    if frame in script:
        key = script[frame]
        sim.apply_command(key)
        renderer.handle_command(key)
    if frame < 240:
        pointer.motion(700, 500 - frame // 10)
    elif pointer.held:
        pointer.release()

    sim.tick(pointer.spawn_request(sim.rng))
    if frame % 30 == 0:
        renderer.render(sim)
