# MIT License (see LICENSE)
"""
Closed-form spring solutions.

This subpackage provides:
    - Solution variants: critically damped, overdamped, underdamped.
    - create_solution: regime classification and dispatch.
    - Invariants: discriminant and mechanical energy.

Typical usage:
    from spring_sim.core import create_solution

    solution = create_solution(spring, distance=-1.0, velocity=0.0)
    solution.x(0.25), solution.dx(0.25)
"""
from .solutions import (
    CriticalSolution,
    OverdampedSolution,
    UnderdampedSolution,
    SpringSolution,
    create_solution,
)
from .invariants import discriminant, spring_energy

__all__ = [
    # Solutions
    "CriticalSolution",
    "OverdampedSolution",
    "UnderdampedSolution",
    "SpringSolution",
    "create_solution",
    # Invariants
    "discriminant",
    "spring_energy",
]
