# MIT License (see LICENSE)
"""
Frame-by-frame sampling of simulations.

Plays the part of an animation driver: queries a simulation once per
frame at t = 0, dt, 2·dt, ... and stops as soon as it reports done.
Nothing is integrated; each sample is an independent evaluation of the
simulation's closed form.

Example:
    traj = sample_trajectory(sim, frame_dt=1/60)
    print(traj.times[-1], traj.positions[-1], traj.done)
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_FRAME_DT, DEFAULT_MAX_TIME
from .simulation import Simulation


@dataclass
class Trajectory:
    """
    Sampled frames of a simulation.

    Attributes:
        times: Sample times in seconds, shape (N,).
        positions: x(t) at each sample, shape (N,).
        velocities: dx(t) at each sample, shape (N,).
        done: Whether the simulation reported done at the last sample.
    """
    times: np.ndarray
    positions: np.ndarray
    velocities: np.ndarray
    done: bool

    def __len__(self) -> int:
        return len(self.times)

    @property
    def duration(self) -> float:
        """Time of the last sample (0 for an empty trajectory)."""
        return float(self.times[-1]) if len(self.times) else 0.0


def _check_frame_args(frame_dt: float, max_time: float) -> None:
    if not frame_dt > 0:
        raise ValueError(f"frame_dt must be > 0, got {frame_dt}")
    if not max_time >= 0:
        raise ValueError(f"max_time must be >= 0, got {max_time}")


def sample_trajectory(
    simulation: Simulation,
    frame_dt: float = DEFAULT_FRAME_DT,
    max_time: float = DEFAULT_MAX_TIME,
) -> Trajectory:
    """
    Sample a simulation once per frame until it settles.

    The frame at which is_done() first returns True is included. Frame
    times are computed as i·frame_dt to avoid accumulating rounding.

    Args:
        simulation: Simulation to sample.
        frame_dt: Time between frames in seconds (must be > 0).
        max_time: Stop after this time even if not done.

    Returns:
        Trajectory with at least one sample (t = 0).

    Raises:
        ValueError: If frame_dt <= 0 or max_time < 0.
    """
    _check_frame_args(frame_dt, max_time)

    times: list[float] = []
    positions: list[float] = []
    velocities: list[float] = []
    done = False
    i = 0
    while True:
        t = i * frame_dt
        if t > max_time:
            break
        times.append(t)
        positions.append(float(simulation.x(t)))
        velocities.append(float(simulation.dx(t)))
        if simulation.is_done(t):
            done = True
            break
        i += 1

    return Trajectory(
        times=np.array(times, dtype=np.float64),
        positions=np.array(positions, dtype=np.float64),
        velocities=np.array(velocities, dtype=np.float64),
        done=done,
    )


def settle_time(
    simulation: Simulation,
    frame_dt: float = DEFAULT_FRAME_DT,
    max_time: float = DEFAULT_MAX_TIME,
) -> float | None:
    """
    First sampled time at which the simulation is done.

    Returns:
        Settle time in seconds, or None if not settled by max_time.
    """
    _check_frame_args(frame_dt, max_time)
    i = 0
    while True:
        t = i * frame_dt
        if t > max_time:
            return None
        if simulation.is_done(t):
            return t
        i += 1
