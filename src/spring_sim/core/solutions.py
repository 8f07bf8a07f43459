# MIT License (see LICENSE)
"""
Closed-form solutions of the damped harmonic oscillator.

Each solution describes the displacement from rest of
    m·x'' + c·x' + k·x = 0,    x(0) = distance,  x'(0) = velocity
for one damping regime. The regime is picked from the characteristic
equation m·r² + c·r + k = 0, whose discriminant is c² − 4·m·k:

    disc == 0  →  one repeated real root     (critically damped)
    disc  > 0  →  two distinct real roots    (overdamped)
    disc  < 0  →  complex conjugate roots    (underdamped)

Coefficients are derived once in each variant's ``create`` and stored as
plain floats; x(t) and dx(t) are pure functions of t and accept either a
scalar or a numpy array of times.

Reference:
    https://en.wikipedia.org/wiki/Harmonic_oscillator#Damped_harmonic_oscillator
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..types import SpringDescription, SpringType
from .invariants import discriminant


# Parameter validation is the caller's job; bad inputs give NaN/Inf
# rather than ZeroDivisionError or RuntimeWarning noise.
_IEEE = dict(divide="ignore", invalid="ignore", over="ignore")


# =============================================================================
# Solution Variants
# =============================================================================

@dataclass(frozen=True)
class CriticalSolution:
    """
    Repeated root r = −c / (2m).

    x(t) = (c1 + c2·t)·e^(r·t)
    """
    r: float
    c1: float
    c2: float

    @classmethod
    def create(
        cls,
        spring: SpringDescription,
        distance: float,
        velocity: float,
    ) -> "CriticalSolution":
        """
        Fit c1, c2 to the initial conditions.

        x(0) = c1 gives c1 = distance; x'(0) = r·c1 + c2 gives
        c2 = velocity − r·distance. Starting exactly at rest is fine:
        the trajectory is then velocity·t·e^(r·t).
        """
        with np.errstate(**_IEEE):
            r = -np.float64(spring.damping) / (2.0 * np.float64(spring.mass))
            c1 = np.float64(distance)
            c2 = velocity - r * c1
        return cls(r=float(r), c1=float(c1), c2=float(c2))

    @property
    def type(self) -> SpringType:
        return SpringType.CRITICALLY_DAMPED

    def x(self, time):
        return (self.c1 + self.c2 * time) * np.exp(self.r * time)

    def dx(self, time):
        power = np.exp(self.r * time)
        return self.r * (self.c1 + self.c2 * time) * power + self.c2 * power


@dataclass(frozen=True)
class OverdampedSolution:
    """
    Two real roots r1 < r2 < 0.

    x(t) = c1·e^(r1·t) + c2·e^(r2·t)
    """
    r1: float
    r2: float
    c1: float
    c2: float

    @classmethod
    def create(
        cls,
        spring: SpringDescription,
        distance: float,
        velocity: float,
    ) -> "OverdampedSolution":
        """
        Solve the 2x2 initial-condition system

            c1 + c2          = distance
            c1·r1 + c2·r2    = velocity

        r2 comes from r1·r2 = k/m rather than (−c + sqrt(disc)) / (2m),
        which cancels to 0 when c² ≫ 4mk.
        """
        with np.errstate(**_IEEE):
            m = np.float64(spring.mass)
            c = np.float64(spring.damping)
            k = np.float64(spring.stiffness)
            cmk = c * c - 4.0 * m * k
            r1 = (-c - np.sqrt(cmk)) / (2.0 * m)
            r2 = (2.0 * k) / (-c - np.sqrt(cmk))
            c2 = (velocity - r1 * distance) / (r2 - r1)
            c1 = distance - c2
        return cls(r1=float(r1), r2=float(r2), c1=float(c1), c2=float(c2))

    @property
    def type(self) -> SpringType:
        return SpringType.OVER_DAMPED

    def x(self, time):
        return self.c1 * np.exp(self.r1 * time) + self.c2 * np.exp(self.r2 * time)

    def dx(self, time):
        return (
            self.c1 * self.r1 * np.exp(self.r1 * time) +
            self.c2 * self.r2 * np.exp(self.r2 * time)
        )


@dataclass(frozen=True)
class UnderdampedSolution:
    """
    Complex roots r ± i·w with decay rate r = −c / (2m) and damped
    angular frequency w = sqrt(4mk − c²) / (2m).

    x(t) = e^(r·t)·(c1·cos(w·t) + c2·sin(w·t))
    """
    w: float
    r: float
    c1: float
    c2: float

    @classmethod
    def create(
        cls,
        spring: SpringDescription,
        distance: float,
        velocity: float,
    ) -> "UnderdampedSolution":
        """
        Fit c1, c2 to the initial conditions.

        x(0) = c1 and x'(0) = r·c1 + w·c2, so c2 = (velocity − r·distance) / w.
        """
        with np.errstate(**_IEEE):
            m = np.float64(spring.mass)
            c = np.float64(spring.damping)
            w = np.sqrt(4.0 * m * np.float64(spring.stiffness) - c * c) / (2.0 * m)
            r = -c / (2.0 * m)
            c1 = np.float64(distance)
            c2 = (velocity - r * c1) / w
        return cls(w=float(w), r=float(r), c1=float(c1), c2=float(c2))

    @property
    def type(self) -> SpringType:
        return SpringType.UNDER_DAMPED

    def x(self, time):
        return np.exp(self.r * time) * (
            self.c1 * np.cos(self.w * time) + self.c2 * np.sin(self.w * time)
        )

    def dx(self, time):
        power = np.exp(self.r * time)
        cosine = np.cos(self.w * time)
        sine = np.sin(self.w * time)
        return (
            power * (self.c2 * self.w * cosine - self.c1 * self.w * sine) +
            self.r * power * (self.c2 * sine + self.c1 * cosine)
        )


# Union type for regime dispatch
SpringSolution = CriticalSolution | OverdampedSolution | UnderdampedSolution


# =============================================================================
# Factory
# =============================================================================

def create_solution(
    spring: SpringDescription,
    distance: float,
    velocity: float,
) -> SpringSolution:
    """
    Classify the damping regime and build the matching solution.

    The comparison against zero is exact. A description built to be
    critically damped can land on either side of the boundary through
    rounding, in which case the neighbouring regime's solution is used;
    near the boundary both give practically the same trajectory.

    Args:
        spring: Physical parameters.
        distance: Initial displacement from rest (start − end).
        velocity: Initial velocity.

    Raises:
        TypeError: If spring is not a SpringDescription.
    """
    if not isinstance(spring, SpringDescription):
        raise TypeError(
            f"spring must be a SpringDescription, got {type(spring).__name__}"
        )
    cmk = discriminant(spring)

    if cmk == 0.0:
        return CriticalSolution.create(spring, distance, velocity)
    if cmk > 0.0:
        return OverdampedSolution.create(spring, distance, velocity)
    return UnderdampedSolution.create(spring, distance, velocity)
