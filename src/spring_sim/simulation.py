# MIT License (see LICENSE)
"""
Time-parameterized simulations driven by a spring.

A Simulation maps elapsed time to a position and velocity and reports
when it has come to rest. It holds no clock: the caller (an animation
driver, a test, a sampler) chooses which times to query, in any order.

Structure:
    - Simulation: abstract contract (x, dx, is_done, tolerance).
    - SpringSimulation: a spring settling from `start` towards `end`.
    - ScrollSpringSimulation: same, but snaps exactly to `end` once done.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod

from .core.solutions import SpringSolution, create_solution
from .types import SpringDescription, SpringType, Tolerance
from .util import default_tolerance, near_zero

logger = logging.getLogger(__name__)


class Simulation(ABC):
    """
    Abstract base class for one-dimensional simulations.

    Attributes:
        tolerance: Thresholds used by is_done(). Defaults to
                   default_tolerance() when not supplied.
    """

    def __init__(self, tolerance: Tolerance | None = None) -> None:
        self.tolerance = tolerance if tolerance is not None else default_tolerance()

    @abstractmethod
    def x(self, time: float) -> float:
        """Position at the given time."""
        ...

    @abstractmethod
    def dx(self, time: float) -> float:
        """Velocity at the given time."""
        ...

    @abstractmethod
    def is_done(self, time: float) -> bool:
        """Whether the simulation has settled at the given time."""
        ...


class SpringSimulation(Simulation):
    """
    A spring moving a value from `start` to `end`.

    The spring is solved relative to its rest point: the solution starts
    at displacement start − end with the given velocity and decays to
    zero. Positions are that displacement offset by `end`.

    Example:
        spring = SpringDescription.with_damping_ratio(mass=1.0, stiffness=100.0)
        sim = SpringSimulation(spring, start=0.0, end=1.0, velocity=0.0)
        sim.x(0.1), sim.dx(0.1), sim.is_done(0.1)
    """

    def __init__(
        self,
        spring: SpringDescription,
        start: float,
        end: float,
        velocity: float,
        tolerance: Tolerance | None = None,
    ) -> None:
        """
        Args:
            spring: Physical parameters.
            start: Initial position.
            end: Rest position the spring settles at.
            velocity: Initial velocity.
            tolerance: Settle thresholds (default: default_tolerance()).

        Raises:
            TypeError: If spring is not a SpringDescription.
        """
        super().__init__(tolerance=tolerance)
        self._spring = spring
        self._start = start
        self._end_position = end
        self._velocity = velocity
        self._solution: SpringSolution = create_solution(spring, start - end, velocity)
        logger.debug(
            "%s: %s start=%r end=%r velocity=%r -> %s",
            type(self).__name__, spring, start, end, velocity, self.type.name,
        )

    @property
    def spring(self) -> SpringDescription:
        return self._spring

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end_position

    @property
    def velocity(self) -> float:
        """Initial velocity (use dx() for the velocity at a given time)."""
        return self._velocity

    @property
    def type(self) -> SpringType:
        """Damping regime selected at construction."""
        return self._solution.type

    def x(self, time: float) -> float:
        return self._end_position + self._solution.x(time)

    def dx(self, time: float) -> float:
        return self._solution.dx(time)

    def is_done(self, time: float) -> bool:
        """True once displacement and velocity are both within tolerance of zero."""
        return (
            near_zero(self._solution.x(time), self.tolerance.distance) and
            near_zero(self._solution.dx(time), self.tolerance.velocity)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(end: {self._end_position}, {self.type})"


class ScrollSpringSimulation(SpringSimulation):
    """
    SpringSimulation that reports exactly `end` once settled.

    The computed position only approaches `end`; consumers that compare
    positions for equality (e.g. scroll offsets at an edge) need the
    exact value once the spring is done.
    """

    def x(self, time: float) -> float:
        return self._end_position if self.is_done(time) else super().x(time)
