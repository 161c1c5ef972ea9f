# MIT License (see LICENSE)
"""
Simulation modes and the controller that switches between them.

A Mode is the (model, integrator, time_step, max_ttl) tuple the tick runs
with. It changes only in response to a ModeCommand:

- One of eight presets: {gravity, attractor} x {Euler, RK4} x {small, large dt}.
- FROZEN: stop integrating and aging; keeps the current dt, max_ttl and
  integrator so that resuming rescales from where it stopped.
- CLEAR: empty the pool; the mode itself is untouched.
- GROW_POINTS / SHRINK_POINTS: for the renderer only; a no-op here.

Every mode switch rescales the lifetimes of live particles so each keeps
the same fraction of its life under the new maximum.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum

from .constants import DEFAULT_MAX_TTL, DEFAULT_TIME_STEP
from .pool import ParticlePool
from .types import Integrator, Model

logger = logging.getLogger(__name__)


class ModeCommand(Enum):
    """Discrete commands accepted between ticks."""
    SMALL_GRAVITY_EULER = "small-gravity-euler"
    LARGE_GRAVITY_EULER = "large-gravity-euler"
    SMALL_ATTRACTOR_EULER = "small-attractor-euler"
    LARGE_ATTRACTOR_EULER = "large-attractor-euler"
    SMALL_GRAVITY_RK4 = "small-gravity-rk4"
    LARGE_GRAVITY_RK4 = "large-gravity-rk4"
    SMALL_ATTRACTOR_RK4 = "small-attractor-rk4"
    LARGE_ATTRACTOR_RK4 = "large-attractor-rk4"
    FROZEN = "frozen"
    CLEAR = "clear"
    GROW_POINTS = "grow-points"
    SHRINK_POINTS = "shrink-points"


@dataclass(frozen=True)
class Mode:
    """
    Active simulation settings.

    Attributes:
        model: Force model, or FROZEN for no dynamics.
        integrator: Scheme used by the step function (also drives colouring).
        time_step: dt passed to the step function each tick.
        max_ttl: Lifetime of a freshly spawned particle.
    """
    model: Model
    integrator: Integrator
    time_step: float
    max_ttl: float

    @property
    def frozen(self) -> bool:
        return self.model is Model.FROZEN


@dataclass(frozen=True)
class Preset:
    """A named mode reachable with one command."""
    model: Model
    integrator: Integrator
    time_step: float
    max_ttl: float
    label: str

    def to_mode(self) -> Mode:
        return Mode(self.model, self.integrator, self.time_step, self.max_ttl)


DEFAULT_MODE = Mode(Model.FROZEN, Integrator.EULER, DEFAULT_TIME_STEP, DEFAULT_MAX_TTL)

FROZEN_LABEL = "Simulation Stopped"
CLEAR_LABEL = "Particles Cleared"

# Small and large steps are shared between Euler and RK4 so the two schemes
# can be compared under identical settings.
PRESETS: dict[ModeCommand, Preset] = {
    ModeCommand.SMALL_GRAVITY_EULER: Preset(
        Model.GRAVITY, Integrator.EULER, 0.005, 15.0,
        "Gravity - Small Time Step - Euler Integration"),
    ModeCommand.LARGE_GRAVITY_EULER: Preset(
        Model.GRAVITY, Integrator.EULER, 0.02, 5.0,
        "Gravity - Big Time Step - Euler Integration"),
    ModeCommand.SMALL_ATTRACTOR_EULER: Preset(
        Model.ATTRACTOR, Integrator.EULER, 0.0018, 70.0,
        "Black Hole - Small Time Step - Euler Integration"),
    ModeCommand.LARGE_ATTRACTOR_EULER: Preset(
        Model.ATTRACTOR, Integrator.EULER, 0.01, 50.0,
        "Black Hole - Big Time Step - Euler Integration"),
    ModeCommand.SMALL_GRAVITY_RK4: Preset(
        Model.GRAVITY, Integrator.RK4, 0.005, 15.0,
        "Gravity - Small Time Step - Runge-Kutta Integration"),
    ModeCommand.LARGE_GRAVITY_RK4: Preset(
        Model.GRAVITY, Integrator.RK4, 0.02, 5.0,
        "Gravity - Big Time Step - Runge-Kutta Integration"),
    ModeCommand.SMALL_ATTRACTOR_RK4: Preset(
        Model.ATTRACTOR, Integrator.RK4, 0.0018, 70.0,
        "Black Hole - Small Time Step - Runge-Kutta Integration"),
    ModeCommand.LARGE_ATTRACTOR_RK4: Preset(
        Model.ATTRACTOR, Integrator.RK4, 0.01, 50.0,
        "Black Hole - Big Time Step - Runge-Kutta Integration"),
}

# Lower case selects the small step, upper case the large one.
KEY_BINDINGS: dict[str, ModeCommand] = {
    "s": ModeCommand.FROZEN,
    "S": ModeCommand.FROZEN,
    "g": ModeCommand.SMALL_GRAVITY_EULER,
    "G": ModeCommand.LARGE_GRAVITY_EULER,
    "b": ModeCommand.SMALL_ATTRACTOR_EULER,
    "B": ModeCommand.LARGE_ATTRACTOR_EULER,
    "r": ModeCommand.SMALL_GRAVITY_RK4,
    "R": ModeCommand.LARGE_GRAVITY_RK4,
    "k": ModeCommand.SMALL_ATTRACTOR_RK4,
    "K": ModeCommand.LARGE_ATTRACTOR_RK4,
    "o": ModeCommand.CLEAR,
    "O": ModeCommand.CLEAR,
    "+": ModeCommand.GROW_POINTS,
    "-": ModeCommand.SHRINK_POINTS,
}

HELP_TEXT = (
    "Keypresses to change simulation types:\n"
    "'s' or 'S' - Freeze simulation (particles won't age or move)\n"
    "'g' or 'G' - Standard gravity with Euler\n"
    "'b' or 'B' - Blackhole with Euler\n"
    "'r' or 'R' - Standard gravity with RK4\n"
    "'k' or 'K' - Blackhole with RK4\n"
    "'o' or 'O' - Clear all the particles off the screen\n"
    "'+' or '-' - Make the particles larger or smaller"
)


def parse_command(value) -> ModeCommand | None:
    """
    Resolve a command from a ModeCommand, its string id or a key character.

    Returns None for anything unrecognized.
    """
    if isinstance(value, ModeCommand):
        return value
    if not isinstance(value, str):
        return None
    if value in KEY_BINDINGS:
        return KEY_BINDINGS[value]
    try:
        return ModeCommand(value)
    except ValueError:
        return None


class ModeController:
    """
    Owns the active Mode and applies commands to it and to the pool.

    Commands must be applied between ticks, never during an integration pass.
    """

    def __init__(self, pool: ParticlePool, mode: Mode = DEFAULT_MODE) -> None:
        self._pool = pool
        self._mode = mode
        self._pool.rescale_ttl(self._pool.max_ttl, mode.max_ttl)

    @property
    def mode(self) -> Mode:
        return self._mode

    def apply(self, command) -> str | None:
        """
        Apply a command.

        Args:
            command: ModeCommand, command id or key character.

        Returns:
            Description of the accepted command, or None if it was ignored.
        """
        cmd = parse_command(command)
        if cmd is None:
            return None

        if cmd is ModeCommand.CLEAR:
            self._pool.clear()
            label = CLEAR_LABEL
        elif cmd is ModeCommand.FROZEN:
            # Lifetimes are unchanged; the multiply by 1 keeps every switch
            # going through rescale_ttl.
            self._pool.rescale_ttl(self._mode.max_ttl, self._mode.max_ttl)
            self._mode = replace(self._mode, model=Model.FROZEN)
            label = FROZEN_LABEL
        elif cmd in PRESETS:
            preset = PRESETS[cmd]
            self._pool.rescale_ttl(self._mode.max_ttl, preset.max_ttl)
            self._mode = preset.to_mode()
            label = preset.label
        else:
            # Point-size commands belong to the renderer.
            return None

        logger.info(label)
        return label
