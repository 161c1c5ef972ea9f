# MIT License (see LICENSE)
"""
JSON serialization of simulation configuration.

Particle state is transient and never saved; only the settings needed to
recreate a session are.

JSON Schema Overview:
---------------------
{
  "capacity": int,              # Pool size, default: 500
  "age_decrement": float,       # ttl removed per tick, default: 0.1
  "initial_mode": string,       # Command id, e.g. "small-attractor-rk4"
  "screen_size": int,           # Host window edge in pixels, default: 1000
  "tick_interval_ms": int,      # Host tick period, default: 15
  "seed": int,                  # Spawn-jitter seed, default: none
  "forces": {                   # Optional
    "gravity": float,           # Default: -9.8
    "attractor_strength": float,# Default: 10.0
    "r2_floor": float           # Default: 1e-4
  }
}

Unknown keys are ignored so newer files still load.
"""
from __future__ import annotations
import json
from typing import Any

from ..config import ForceParams, SimulationConfig

_DEFAULT_CONFIG = SimulationConfig()
_DEFAULT_FORCES = ForceParams()


def _int_field(data: dict[str, Any], key: str, default: int | None) -> int | None:
    """Read an integer field. Floats, strings and booleans are rejected, not coerced."""
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def load_config_raw(path: str) -> dict[str, Any]:
    """Load the raw JSON data of a config file without validation."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(data: dict[str, Any]) -> SimulationConfig:
    """
    Build a validated SimulationConfig from a dictionary.

    Raises:
        ValueError: On wrongly typed values, an unknown initial_mode or any
                    value SimulationConfig rejects.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

    forces_data = data.get("forces", {})
    if not isinstance(forces_data, dict):
        raise ValueError("'forces' must be a JSON object")

    try:
        forces = ForceParams(
            gravity=float(forces_data.get("gravity", _DEFAULT_FORCES.gravity)),
            attractor_strength=float(forces_data.get(
                "attractor_strength", _DEFAULT_FORCES.attractor_strength)),
            r2_floor=float(forces_data.get("r2_floor", _DEFAULT_FORCES.r2_floor)),
        )
        return SimulationConfig(
            capacity=_int_field(data, "capacity", _DEFAULT_CONFIG.capacity),
            forces=forces,
            age_decrement=float(data.get("age_decrement", _DEFAULT_CONFIG.age_decrement)),
            initial_mode=data.get("initial_mode"),
            screen_size=_int_field(data, "screen_size", _DEFAULT_CONFIG.screen_size),
            tick_interval_ms=_int_field(data, "tick_interval_ms", _DEFAULT_CONFIG.tick_interval_ms),
            seed=_int_field(data, "seed", None),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid config: {e}") from e


def load_config(path: str) -> SimulationConfig:
    """Load and validate a SimulationConfig from a JSON file."""
    return config_from_json(load_config_raw(path))


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """
    Serialize a SimulationConfig to a dictionary (round-trip compatible).

    Fields equal to their defaults are left out to keep files short.
    """
    result: dict[str, Any] = {"capacity": config.capacity}

    if config.age_decrement != _DEFAULT_CONFIG.age_decrement:
        result["age_decrement"] = config.age_decrement
    if config.initial_mode is not None:
        result["initial_mode"] = config.initial_mode
    if config.screen_size != _DEFAULT_CONFIG.screen_size:
        result["screen_size"] = config.screen_size
    if config.tick_interval_ms != _DEFAULT_CONFIG.tick_interval_ms:
        result["tick_interval_ms"] = config.tick_interval_ms
    if config.seed is not None:
        result["seed"] = config.seed

    if config.forces != _DEFAULT_FORCES:
        result["forces"] = {
            "gravity": config.forces.gravity,
            "attractor_strength": config.forces.attractor_strength,
            "r2_floor": config.forces.r2_floor,
        }

    return result


def save_config(config: SimulationConfig, path: str, indent: int = 2) -> None:
    """
    Write a SimulationConfig to a JSON file.

    The document is fully encoded before the file is opened, so an
    unserializable config leaves an existing file untouched.
    """
    text = json.dumps(config_to_json(config), indent=indent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
