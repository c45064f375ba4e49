from __future__ import annotations

import logging
from dataclasses import dataclass

from .curve import Axis, CubicBezierCurve, CurvePoint
from .evaluator import clamp_unit, evaluate_at
from .solver import RootResult, RootStatus, solve_root

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class InverseSolution:
    point: CurvePoint
    result: RootResult


def solve_inverse(curve: CubicBezierCurve, t: float) -> InverseSolution:
    """Find the point on the curve whose x coordinate equals t.

    Picture t as a vertical line at x = t. Shifting the curve by -t moves
    that line onto the y axis, and rotating everything 90 degrees lays it
    flat on the x axis. The parameter where the rotated curve's y
    polynomial crosses zero is then the parameter where the original
    curve's x equals t, and Cardano's formula solves for it directly.
    """
    if t <= 0.0 or t >= 1.0:
        value = clamp_unit(t)
        return InverseSolution(evaluate_at(curve, value), RootResult(RootStatus.FOUND, value))

    aligned = curve.transformed(dx=-t, degrees=90.0)
    result = solve_root(aligned, Axis.Y)
    if not result.found:
        log.debug(f"Inverse lookup at x={t} fell back to t=0 ({result.status.value})")
    return InverseSolution(evaluate_at(curve, result.root), result)


def evaluate_inverse_at(curve: CubicBezierCurve, t: float) -> CurvePoint:
    """Point on the curve at time (x) t; relative_value is the eased progress."""
    return solve_inverse(curve, t).point
