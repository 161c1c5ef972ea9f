# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides JSON load/save of SimulationConfig. Particle state
is transient and has no file format.

Typical usage:
    from particle_sim.io import load_config, save_config

    config = load_config("session.json")
    save_config(config, "copy.json")
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_from_json",
    "config_to_json",
]
