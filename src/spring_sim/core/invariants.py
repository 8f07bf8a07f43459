# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants of a spring.

Used for verifying solution correctness. A damped spring only loses
energy: along any trajectory dE/dt = −c·v², so total mechanical energy
is non-increasing and stays constant when c == 0.
"""
from __future__ import annotations
import numpy as np

from ..types import SpringDescription


def discriminant(spring: SpringDescription) -> float:
    """
    Discriminant of the characteristic equation m·r² + c·r + k = 0.

    c² − 4·m·k; its sign selects the damping regime.
    """
    return spring.damping * spring.damping - 4 * spring.mass * spring.stiffness


def spring_energy(spring: SpringDescription, displacement, velocity):
    """
    Total mechanical energy of the oscillator.

    E = 0.5·k·x² + 0.5·m·v²

    Args:
        spring: Physical parameters.
        displacement: Distance from rest (scalar or array).
        velocity: Velocity (scalar or array).

    Returns:
        Energy with the same shape as the inputs.
    """
    x = np.asarray(displacement, dtype=np.float64)
    v = np.asarray(velocity, dtype=np.float64)
    return 0.5 * spring.stiffness * x * x + 0.5 * spring.mass * v * v
