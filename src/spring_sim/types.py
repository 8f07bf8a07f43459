# MIT License (see LICENSE)
"""
Core type definitions for spring simulations.

Defines the fundamental data structures:
- SpringDescription: physical parameters of a damped harmonic oscillator
- SpringType: the damping regime a description falls into
- Tolerance: thresholds used to decide when a simulation is at rest

The oscillator follows the homogeneous second-order ODE
    m·x'' + c·x' + k·x = 0
where x is the displacement from the rest (end) position, m the mass,
c the damping coefficient and k the stiffness.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .constants import EPSILON_DEFAULT


# =============================================================================
# Spring Description
# =============================================================================

@dataclass(frozen=True)
class SpringDescription:
    """
    Physical parameters of a damped spring.

    Attributes:
        mass: Mass attached to the spring. Should be > 0.
        stiffness: Spring constant k. Should be > 0.
        damping: Damping coefficient c. Should be >= 0.

    Note:
        Values are not validated. Non-positive mass or stiffness, or
        non-finite values, produce NaN/Inf trajectories downstream.
    """
    mass: float
    stiffness: float
    damping: float

    @classmethod
    def with_damping_ratio(
        cls,
        mass: float,
        stiffness: float,
        ratio: float = 1.0,
    ) -> "SpringDescription":
        """
        Build a description from a damping ratio instead of a coefficient.

        The coefficient is c = ratio · 2·sqrt(m·k). A ratio of 1.0 is
        critical damping, < 1 underdamped, > 1 overdamped.

        Args:
            mass: Mass attached to the spring.
            stiffness: Spring constant.
            ratio: Damping ratio ζ (default: 1.0, critical).
        """
        damping = ratio * 2.0 * float(np.sqrt(mass * stiffness))
        return cls(mass=mass, stiffness=stiffness, damping=damping)

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(mass {self.mass:.1f}, "
            f"stiffness: {self.stiffness:.1f}, damping: {self.damping:.1f})"
        )


class SpringType(Enum):
    """Damping regime, classified from the sign of c² − 4·m·k."""
    CRITICALLY_DAMPED = "critically_damped"
    UNDER_DAMPED = "under_damped"
    OVER_DAMPED = "over_damped"


# =============================================================================
# Tolerance
# =============================================================================

@dataclass(frozen=True)
class Tolerance:
    """
    Thresholds below which a simulation is considered at rest.

    Attributes:
        distance: Max |displacement| from the end position.
        time: Max difference between two times considered equal.
        velocity: Max |velocity|.
    """
    distance: float = EPSILON_DEFAULT
    time: float = EPSILON_DEFAULT
    velocity: float = EPSILON_DEFAULT
