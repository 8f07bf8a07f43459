# MIT License (see LICENSE)
"""
Default values shared across the spring simulation package.

Tolerances are expressed in the units of the trajectory itself: distance
in whatever unit start/end positions use, velocity in units per second,
time in seconds.
"""
from __future__ import annotations

# Default epsilon for position, velocity and time comparisons.
# Matches the precision a 60 Hz animation can meaningfully display.
EPSILON_DEFAULT: float = 1e-3

# Default sampling step for frame drivers (one frame at 60 Hz).
DEFAULT_FRAME_DT: float = 1 / 60

# Upper bound on sampled time when waiting for a simulation to settle.
DEFAULT_MAX_TIME: float = 10.0

# Environment variables that override the default tolerance.
ENV_DISTANCE_TOL: str = "SPRING_SIM_DISTANCE_TOL"
ENV_TIME_TOL: str = "SPRING_SIM_TIME_TOL"
ENV_VELOCITY_TOL: str = "SPRING_SIM_VELOCITY_TOL"
