# MIT License (see LICENSE)
"""
Utility functions for tolerance comparisons and configuration.

Provides the near-equality tests used for settle detection and the
environment-driven default tolerance.
"""
from __future__ import annotations
import os

from .constants import (
    EPSILON_DEFAULT,
    ENV_DISTANCE_TOL,
    ENV_TIME_TOL,
    ENV_VELOCITY_TOL,
)
from .types import Tolerance


def near_equal(a: float, b: float, epsilon: float) -> bool:
    """
    Whether a and b differ by at most epsilon.

    Exactly equal values always compare equal, so two identical
    infinities are near-equal while inf and a finite number are not.
    """
    return bool(a == b or abs(a - b) <= epsilon)


def near_zero(a: float, epsilon: float) -> bool:
    """Whether |a| <= epsilon."""
    return near_equal(a, 0.0, epsilon)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def default_tolerance() -> Tolerance:
    """
    Tolerance used when a simulation is built without one.

    Each threshold defaults to EPSILON_DEFAULT and can be overridden with
    the SPRING_SIM_DISTANCE_TOL, SPRING_SIM_TIME_TOL and
    SPRING_SIM_VELOCITY_TOL environment variables.
    """
    return Tolerance(
        distance=_env_float(ENV_DISTANCE_TOL, EPSILON_DEFAULT),
        time=_env_float(ENV_TIME_TOL, EPSILON_DEFAULT),
        velocity=_env_float(ENV_VELOCITY_TOL, EPSILON_DEFAULT),
    )
