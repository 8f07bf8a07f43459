import numpy as np
import pytest

from spring_sim.core.solutions import (
    CriticalSolution,
    OverdampedSolution,
    UnderdampedSolution,
    create_solution,
)
from spring_sim.core.invariants import discriminant
from spring_sim.types import SpringDescription, SpringType


CRITICAL = SpringDescription.with_damping_ratio(1.0, 100.0, 1.0)
UNDER = SpringDescription(mass=1.0, stiffness=100.0, damping=5.0)
OVER = SpringDescription(mass=1.0, stiffness=100.0, damping=50.0)

# mass != 1 exercises the 1/(2m) scaling of every root
CRITICAL_HEAVY = SpringDescription.with_damping_ratio(2.0, 50.0, 1.0)
UNDER_HEAVY = SpringDescription(mass=2.0, stiffness=100.0, damping=5.0)
OVER_HEAVY = SpringDescription(mass=2.0, stiffness=100.0, damping=80.0)

ALL_SPRINGS = [CRITICAL, UNDER, OVER, CRITICAL_HEAVY, UNDER_HEAVY, OVER_HEAVY]


def test_regime_dispatch():
    assert isinstance(create_solution(CRITICAL, -1.0, 0.0), CriticalSolution)
    assert isinstance(create_solution(UNDER, -1.0, 0.0), UnderdampedSolution)
    assert isinstance(create_solution(OVER, -1.0, 0.0), OverdampedSolution)

    assert create_solution(CRITICAL_HEAVY, -1.0, 0.0).type is SpringType.CRITICALLY_DAMPED
    assert create_solution(UNDER_HEAVY, -1.0, 0.0).type is SpringType.UNDER_DAMPED
    assert create_solution(OVER_HEAVY, -1.0, 0.0).type is SpringType.OVER_DAMPED


@pytest.mark.parametrize("mass", [0.5, 1.0, 3.0])
@pytest.mark.parametrize("stiffness", [1.0, 100.0, 500.0])
@pytest.mark.parametrize("damping", [0.0, 0.1, 5.0, 20.0, 80.0, 200.0])
def test_regime_partition(mass, stiffness, damping):
    """Exactly one regime, chosen by the sign of c² − 4mk."""
    spring = SpringDescription(mass, stiffness, damping)
    disc = damping * damping - 4 * mass * stiffness
    expected = (
        SpringType.CRITICALLY_DAMPED if disc == 0
        else SpringType.OVER_DAMPED if disc > 0
        else SpringType.UNDER_DAMPED
    )
    assert create_solution(spring, 1.0, 0.0).type is expected
    assert discriminant(spring) == disc


@pytest.mark.parametrize("spring", ALL_SPRINGS)
@pytest.mark.parametrize("distance, velocity", [
    (-1.0, 0.0),
    (2.5, -3.0),
    (-0.2, 12.0),
    (0.0, 4.0),
])
def test_initial_conditions(spring, distance, velocity):
    """x(0) is the initial displacement and dx(0) the initial velocity."""
    sol = create_solution(spring, distance, velocity)
    assert np.isclose(sol.x(0.0), distance, atol=1e-12)
    assert np.isclose(sol.dx(0.0), velocity, atol=1e-9)


def test_critical_from_rest_position_is_finite():
    """Starting at the rest position with a kick gives x(t) = v·t·e^(r·t)."""
    sol = create_solution(CRITICAL, 0.0, 4.0)
    t = 0.3
    assert np.isfinite(sol.x(t))
    assert np.isclose(sol.x(t), 4.0 * t * np.exp(-10.0 * t))


@pytest.mark.parametrize("spring", ALL_SPRINGS)
def test_satisfies_equation_of_motion(spring):
    """
    m·x'' + c·x' + k·x = 0, with x'' taken by central differences of dx
    and dx checked against central differences of x.
    """
    sol = create_solution(spring, -1.0, 3.0)
    h = 1e-5
    for t in np.linspace(0.05, 2.0, 25):
        x = sol.x(t)
        v = sol.dx(t)
        v_fd = (sol.x(t + h) - sol.x(t - h)) / (2 * h)
        a_fd = (sol.dx(t + h) - sol.dx(t - h)) / (2 * h)
        residual = spring.mass * a_fd + spring.damping * v + spring.stiffness * x
        assert abs(v - v_fd) <= 1e-5
        assert abs(residual) <= 1e-3


def test_underdamped_decay_rate_scales_with_mass():
    """
    Decay rate is −c/(2m). Cross-check against the textbook form
      x(t) = e^(−ζω0·t)·[x0·cos(ωd·t) + (v0 + ζω0·x0)/ωd·sin(ωd·t)]
    """
    m, k, c = UNDER_HEAVY.mass, UNDER_HEAVY.stiffness, UNDER_HEAVY.damping
    x0, v0 = -1.0, 2.0
    w0 = np.sqrt(k / m)
    zeta = c / (2 * np.sqrt(k * m))
    wd = w0 * np.sqrt(1 - zeta ** 2)

    sol = create_solution(UNDER_HEAVY, x0, v0)
    assert np.isclose(sol.r, -c / (2 * m))
    assert np.isclose(sol.w, wd)

    t = np.linspace(0.0, 3.0, 50)
    expected = np.exp(-zeta * w0 * t) * (
        x0 * np.cos(wd * t) + (v0 + zeta * w0 * x0) / wd * np.sin(wd * t)
    )
    assert np.allclose(sol.x(t), expected, atol=1e-12)


@pytest.mark.parametrize("spring", ALL_SPRINGS)
def test_converges_to_rest(spring):
    sol = create_solution(spring, 5.0, -20.0)
    assert abs(sol.x(30.0)) < 1e-6
    assert abs(sol.dx(30.0)) < 1e-6


def test_evaluation_is_pure():
    sol = create_solution(UNDER, -1.0, 0.0)
    times = [0.7, 0.1, 0.7, 2.0, 0.1]
    first = [(sol.x(t), sol.dx(t)) for t in times]
    second = [(sol.x(t), sol.dx(t)) for t in reversed(times)][::-1]
    assert first == second


def test_accepts_array_of_times():
    sol = create_solution(OVER, -1.0, 0.0)
    t = np.linspace(0.0, 1.0, 11)
    xs = sol.x(t)
    assert xs.shape == (11,)
    assert np.allclose(xs, [sol.x(float(ti)) for ti in t])


def test_invalid_parameters_give_nan_not_errors():
    """Zero mass is not rejected; the trajectory is NaN."""
    spring = SpringDescription(mass=0.0, stiffness=100.0, damping=0.0)
    sol = create_solution(spring, -1.0, 0.0)
    assert np.isnan(sol.x(0.5))


def test_missing_description_fails_fast():
    with pytest.raises(TypeError):
        create_solution(None, 1.0, 0.0)


def test_strongly_overdamped_slow_root_survives_cancellation():
    """
    With c² ≫ 4mk the slow root is ≈ −k/c; (−c + sqrt(disc))/(2m) would
    round to 0 and the spring would never return to rest.
    """
    spring = SpringDescription(mass=1.0, stiffness=1.0, damping=1e8)
    sol = create_solution(spring, 1.0, 0.0)
    assert sol.type is SpringType.OVER_DAMPED
    assert sol.r2 < 0.0
    assert np.isclose(sol.r2, -1e-8, rtol=1e-6)
    assert np.isclose(sol.r1 * sol.r2, spring.stiffness / spring.mass)

    assert np.isclose(sol.x(0.0), 1.0)
    assert abs(sol.x(1e9)) < 1e-3
    assert abs(sol.x(3e9)) < abs(sol.x(1e9))
