# MIT License (see LICENSE)
"""
JSON serialization and deserialization for spring simulations.

This module provides functions to save and load simulation setups so that
animation curves can be kept in config files and shared between tools.

JSON Schema Overview:
---------------------
{
  "spring": {                      # Required
    "mass": float,                 # Required
    "stiffness": float,            # Required
    "damping": float,              # Either damping ...
    "ratio": float                 # ... or damping ratio (default: 1.0)
  },
  "start": float,                  # Required
  "end": float,                    # Required
  "velocity": float,               # Default: 0.0
  "scroll": bool,                  # ScrollSpringSimulation if true, default: false
  "tolerance": {                   # Optional, default: default_tolerance()
    "distance": float,
    "time": float,
    "velocity": float
  }
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..constants import EPSILON_DEFAULT
from ..sampling import Trajectory
from ..simulation import ScrollSpringSimulation, SpringSimulation
from ..types import SpringDescription, Tolerance

logger = logging.getLogger(__name__)


def _require(d: dict[str, Any], key: str, what: str) -> Any:
    if key not in d:
        raise ValueError(f"{what} definition missing required '{key}' field.")
    return d[key]


# =============================================================================
# Springs and tolerances
# =============================================================================

def spring_from_json(d: dict[str, Any]) -> SpringDescription:
    """
    Parse a spring description from a dictionary.

    Accepts either an explicit "damping" coefficient or a "ratio"; with
    neither, the spring is critically damped.

    Raises:
        ValueError: If mass/stiffness are missing or both damping and
                    ratio are given.
    """
    mass = float(_require(d, "mass", "Spring"))
    stiffness = float(_require(d, "stiffness", "Spring"))

    if "damping" in d and "ratio" in d:
        raise ValueError("Spring definition must not give both 'damping' and 'ratio'.")
    if "damping" in d:
        return SpringDescription(mass=mass, stiffness=stiffness, damping=float(d["damping"]))
    return SpringDescription.with_damping_ratio(
        mass, stiffness, ratio=float(d.get("ratio", 1.0))
    )


def spring_to_json(spring: SpringDescription) -> dict[str, Any]:
    """Serialize a spring description (always with an explicit damping)."""
    return {
        "mass": spring.mass,
        "stiffness": spring.stiffness,
        "damping": spring.damping,
    }


def tolerance_from_json(d: dict[str, Any]) -> Tolerance:
    """Parse a tolerance; missing fields fall back to EPSILON_DEFAULT."""
    return Tolerance(
        distance=float(d.get("distance", EPSILON_DEFAULT)),
        time=float(d.get("time", EPSILON_DEFAULT)),
        velocity=float(d.get("velocity", EPSILON_DEFAULT)),
    )


def tolerance_to_json(tolerance: Tolerance) -> dict[str, Any]:
    return {
        "distance": tolerance.distance,
        "time": tolerance.time,
        "velocity": tolerance.velocity,
    }


# =============================================================================
# Simulations
# =============================================================================

def simulation_from_json(d: dict[str, Any]) -> SpringSimulation:
    """
    Build a spring simulation from a dictionary.

    Returns:
        ScrollSpringSimulation if "scroll" is true, else SpringSimulation.

    Raises:
        ValueError: If required fields (spring, start, end) are missing or
                    "scroll" is not a JSON boolean.
    """
    spring = spring_from_json(_require(d, "spring", "Simulation"))
    start = float(_require(d, "start", "Simulation"))
    end = float(_require(d, "end", "Simulation"))
    velocity = float(d.get("velocity", 0.0))
    tolerance = tolerance_from_json(d["tolerance"]) if "tolerance" in d else None

    scroll = d.get("scroll", False)
    if not isinstance(scroll, bool):
        raise ValueError(f"Simulation 'scroll' must be true or false, got {scroll!r}")

    cls = ScrollSpringSimulation if scroll else SpringSimulation
    return cls(spring, start, end, velocity, tolerance=tolerance)


def simulation_to_json(simulation: SpringSimulation) -> dict[str, Any]:
    """
    Serialize a spring simulation to a dictionary (round-trip compatible).

    "velocity" and "scroll" are omitted when they hold their defaults.
    The tolerance is always written so a reload does not depend on the
    environment it is loaded in.
    """
    result: dict[str, Any] = {
        "spring": spring_to_json(simulation.spring),
        "start": simulation.start,
        "end": simulation.end,
    }
    if simulation.velocity != 0.0:
        result["velocity"] = simulation.velocity
    if isinstance(simulation, ScrollSpringSimulation):
        result["scroll"] = True
    result["tolerance"] = tolerance_to_json(simulation.tolerance)
    return result


def load_simulation_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a simulation file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> SpringSimulation:
    """
    Load and construct a spring simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing.
    """
    simulation = simulation_from_json(load_simulation_raw(path))
    logger.info("Loaded %r from %s", simulation, path)
    return simulation


def save_simulation(simulation: SpringSimulation, path: str, indent: int = 2) -> None:
    """Save a spring simulation to a JSON file on disk."""
    data = simulation_to_json(simulation)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved %r to %s", simulation, path)


# =============================================================================
# Trajectories
# =============================================================================

def trajectory_to_json(trajectory: Trajectory) -> dict[str, Any]:
    """Serialize sampled frames, e.g. for plotting in an external viewer."""
    return {
        "times": trajectory.times.tolist(),
        "positions": trajectory.positions.tolist(),
        "velocities": trajectory.velocities.tolist(),
        "done": trajectory.done,
    }
