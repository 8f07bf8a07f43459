# MIT License (see LICENSE)
"""
spring_sim - Closed-form damped spring simulations for animation.

This package solves the damped harmonic oscillator m·x'' + c·x' + k·x = 0
analytically and exposes the result as a time-parameterized trajectory:
position x(t), velocity dx(t), and a settle test is_done(t).

Main entry points:
    - SpringDescription: mass, stiffness and damping of a spring.
    - SpringSimulation: a spring moving a value from start to end.
    - ScrollSpringSimulation: same, snapping exactly to end once settled.
    - Tolerance: thresholds for settle detection.

Submodules:
    - core: Closed-form solutions per damping regime, invariants.
    - io: JSON serialization/deserialization.
    - sampling: Frame-by-frame sampling of simulations.

Example:
    from spring_sim import SpringDescription, SpringSimulation

    spring = SpringDescription.with_damping_ratio(mass=1.0, stiffness=100.0)
    sim = SpringSimulation(spring, start=0.0, end=1.0, velocity=0.0)
    sim.x(0.2), sim.dx(0.2), sim.is_done(0.2)
"""
import logging

from .types import SpringDescription, SpringType, Tolerance
from .simulation import Simulation, SpringSimulation, ScrollSpringSimulation
from .sampling import Trajectory, sample_trajectory, settle_time
from .util import default_tolerance, near_equal, near_zero

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Descriptions
    "SpringDescription",
    "SpringType",
    "Tolerance",
    # Simulations
    "Simulation",
    "SpringSimulation",
    "ScrollSpringSimulation",
    # Sampling
    "Trajectory",
    "sample_trajectory",
    "settle_time",
    # Comparisons
    "default_tolerance",
    "near_equal",
    "near_zero",
]
