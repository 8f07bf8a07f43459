# MIT License (see LICENSE)
"""
Input/Output utilities for spring simulations.

This subpackage provides:
    - JSON serialization: Save and load simulation setups to/from JSON files.
    - Round-trip support: Serialized simulations load back with the same
      parameters, regime and tolerance.

Typical usage:
    from spring_sim.io import load_simulation, save_simulation

    sim = load_simulation("bounce.json")
    save_simulation(sim, "bounce_copy.json")
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_to_json,
    simulation_from_json,
    spring_to_json,
    spring_from_json,
    tolerance_to_json,
    tolerance_from_json,
    trajectory_to_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_simulation_raw",
    # Saving
    "save_simulation",
    # Serialization
    "simulation_to_json",
    "simulation_from_json",
    "spring_to_json",
    "spring_from_json",
    "tolerance_to_json",
    "tolerance_from_json",
    "trajectory_to_json",
]
