import cmath

import pytest

from bezier_timing.config import reset_config
from bezier_timing.timing.coefficients import CubicCoefficients
from bezier_timing.timing.curve import Axis, ControlPoint, CubicBezierCurve
from bezier_timing.timing.solver import (
    RootResult,
    RootStatus,
    _pick_root,
    root_for_curve,
    root_of_unity,
    solve_coefficients,
    solve_root,
)


@pytest.mark.parametrize("i", [0, 1, 2])
def test_roots_of_unity_cube_to_one(i):
    assert cmath.isclose(root_of_unity(i) ** 3, 1.0, abs_tol=1e-12)


def test_roots_of_unity_are_conjugates():
    assert root_of_unity(1) == root_of_unity(2).conjugate()
    assert root_of_unity(0) == 1


def test_one_real_root():
    # (t - 0.5)(t^2 + 1)
    result = solve_coefficients(CubicCoefficients(1.0, -0.5, 1.0, -0.5))
    assert result.status is RootStatus.FOUND
    assert result.root == pytest.approx(0.5, abs=1e-12)


def test_three_real_roots_last_candidate_wins():
    # (t - 0.2)(t - 0.5)(t - 0.9); the trigonometric branch yields 0.9, 0.2, 0.5 in that order
    result = solve_coefficients(CubicCoefficients(1.0, -1.6, 0.73, -0.09))
    assert result.found
    assert result.root == pytest.approx(0.5, abs=1e-9)


def test_repeated_root():
    # (t - 1)^2 (t + 2): discriminant is exactly zero
    result = solve_coefficients(CubicCoefficients(1.0, 0.0, -3.0, 2.0))
    assert result == RootResult(RootStatus.FOUND, 1.0)


def test_p_zero_branch():
    # t^3 - 1/8
    result = solve_coefficients(CubicCoefficients(1.0, 0.0, 0.0, -0.125))
    assert result.found
    assert result.root == pytest.approx(0.5, abs=1e-12)


def test_q_zero_branch_prefers_later_root():
    # t (t - 0.5)(t + 0.5): candidates 0, -0.5, 0.5
    result = solve_coefficients(CubicCoefficients(1.0, 0.0, -0.25, 0.0))
    assert result.found
    assert result.root == pytest.approx(0.5, abs=1e-12)


def test_q_zero_with_complex_pair_keeps_real_root():
    # t (t^2 + 0.25)
    result = solve_coefficients(CubicCoefficients(1.0, 0.0, 0.25, 0.0))
    assert result == RootResult(RootStatus.FOUND, 0.0)


def test_root_outside_unit_interval():
    # (t - 2)(t^2 + 1)
    result = solve_coefficients(CubicCoefficients(1.0, -2.0, 1.0, -2.0))
    assert result.status is RootStatus.NO_ROOT
    assert result.root == 0.0


def test_quadratic_fallback():
    result = solve_coefficients(CubicCoefficients(0.0, 1.0, 0.0, -0.25))
    assert result.found
    assert result.root == pytest.approx(0.5)


def test_quadratic_without_real_roots():
    result = solve_coefficients(CubicCoefficients(0.0, 1.0, 0.0, 0.25))
    assert result.status is RootStatus.NO_ROOT


def test_linear_fallback():
    result = solve_coefficients(CubicCoefficients(0.0, 0.0, 2.0, -1.0))
    assert result == RootResult(RootStatus.FOUND, 0.5)


def test_constant_polynomial_is_degenerate():
    result = solve_coefficients(CubicCoefficients(0.0, 0.0, 0.0, 0.3))
    assert result.status is RootStatus.DEGENERATE
    assert result.root == 0.0


def test_degenerate_epsilon_is_configurable():
    coeffs = CubicCoefficients(1e-6, 0.0, 2.0, -1.0)
    # With a loose epsilon the cubic term is ignored entirely
    assert solve_coefficients(coeffs, degenerate_epsilon=1e-3) == RootResult(RootStatus.FOUND, 0.5)
    assert solve_coefficients(coeffs).root == pytest.approx(0.5, abs=1e-6)


def test_imaginary_epsilon_controls_acceptance():
    candidates = [complex(0.3, 1e-14)]
    assert _pick_root(candidates, 0.0).status is RootStatus.NO_ROOT
    assert _pick_root(candidates, 1e-12) == RootResult(RootStatus.FOUND, 0.3)


def test_imaginary_epsilon_from_environment(monkeypatch):
    # t^2 - t + (0.25 + 1e-8): a near-double root whose pair carries an imaginary part of 1e-4
    coeffs = CubicCoefficients(0.0, 1.0, -1.0, 0.25 + 1e-8)
    assert solve_coefficients(coeffs).status is RootStatus.NO_ROOT

    monkeypatch.setenv("BEZIER_IMAG_EPSILON", "1e-3")
    reset_config()
    result = solve_coefficients(coeffs)
    assert result.found
    assert result.root == pytest.approx(0.5, abs=1e-9)


def test_solve_root_reads_requested_axis():
    curve = CubicBezierCurve(
        ControlPoint(-0.5, 1.0), ControlPoint(0.0, 1.0), ControlPoint(0.5, 1.0), ControlPoint(1.0, 1.0)
    )
    # x(t) = 1.5t - 0.5 crosses zero at t = 1/3; y is constant
    assert solve_root(curve, Axis.X).root == pytest.approx(1.0 / 3.0)
    assert solve_root(curve, Axis.Y).status is RootStatus.DEGENERATE


@pytest.mark.parametrize("p", [(0.25, 0.1, 0.25, 1.0), (0.42, 0.0, 1.0, 1.0), (0.0, 0.0, 0.58, 1.0)])
@pytest.mark.parametrize("t", [0.05, 0.3, 0.6, 0.95])
def test_root_stays_in_unit_interval_for_easing_curves(p, t):
    curve = CubicBezierCurve.easing(*p).transformed(dx=-t, degrees=90.0)
    root = root_for_curve(curve)
    assert 0.0 <= root <= 1.0
