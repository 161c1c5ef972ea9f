# MIT License (see LICENSE)
"""
Renderer adapters for particle visualization.

The simulation has no drawing dependency. A renderer consumes the snapshot
once per frame and owns the purely visual state: point size and colour.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ..constants import DEFAULT_POINT_SIZE
from ..modes import ModeCommand, parse_command
from ..types import Integrator, ParticleView

if TYPE_CHECKING:
    from ..simulation import Simulation

logger = logging.getLogger(__name__)


def particle_color(view: ParticleView) -> tuple[float, float, float]:
    """
    RGB colour of a particle, fading to black as its lifetime runs out.

    RK4 particles fade from magenta, Euler particles from cyan, so the two
    schemes are distinguishable on screen.
    """
    r = view.ttl_ratio
    if view.integrator is Integrator.RK4:
        return (r, 0.0, r)
    return (0.0, r, r)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses plug into a graphics backend (OpenGL points, matplotlib
    scatter, a web canvas...). Usage:

        renderer.begin_frame(sim.tick_count)
        for view in sim.snapshot():
            renderer.draw_particle(view)
        renderer.end_frame()

    Or use the convenience method render(sim).
    """

    point_size: float = DEFAULT_POINT_SIZE

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """
        Begin a new frame.

        Args:
            tick: Number of ticks the simulation has run.
        """
        ...

    @abstractmethod
    def draw_particle(self, view: ParticleView) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render(self, simulation: "Simulation") -> None:
        """Draw every live particle of a simulation as one frame."""
        self.begin_frame(simulation.tick_count)
        for view in simulation.snapshot():
            self.draw_particle(view)
        self.end_frame()

    def handle_command(self, command) -> str | None:
        """
        React to point-size commands; everything else is ignored.

        Returns:
            Description of the change, or None if nothing changed.
        """
        cmd = parse_command(command)
        if cmd is ModeCommand.GROW_POINTS:
            self.point_size += 1.0
            message = f"Point size increased to {self.point_size:g}"
        elif cmd is ModeCommand.SHRINK_POINTS and self.point_size > 1.0:
            self.point_size -= 1.0
            message = f"Point size decreased to {self.point_size:g}"
        else:
            return None
        logger.info(message)
        return message


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame 42 (2 particles) ===
        (0.120, -0.334, 0.000) life=0.93 rk4
        (0.118, -0.301, 0.000) life=0.87 rk4
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If False, only frame headers are written.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._count = 0
        self._lines: list[str] = []
        self._tick = 0

    def begin_frame(self, tick: int) -> None:
        self._tick = tick
        self._count = 0
        self._lines = []

    def draw_particle(self, view: ParticleView) -> None:
        self._count += 1
        if self.verbose:
            self._lines.append(
                f"({view.x:.3f}, {view.y:.3f}, {view.z:.3f}) "
                f"life={view.ttl_ratio:.2f} {view.integrator.value}"
            )

    def end_frame(self) -> None:
        self.output.write(f"=== Frame {self._tick} ({self._count} particles) ===\n")
        for line in self._lines:
            self.output.write(line + "\n")
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_particle(self, view: ParticleView) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for later inspection or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.tick(spawn)
            renderer.render(sim)

        for frame in renderer.frames:
            print(frame["tick"], len(frame["particles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {
            "tick": tick,
            "point_size": self.point_size,
            "particles": [],
        }

    def draw_particle(self, view: ParticleView) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "position": [view.x, view.y, view.z],
            "ttl_ratio": view.ttl_ratio,
            "color": list(particle_color(view)),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()
