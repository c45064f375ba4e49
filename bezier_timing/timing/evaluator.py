from __future__ import annotations

from .coefficients import coefficients
from .curve import Axis, CubicBezierCurve, CurvePoint


def clamp_unit(t: float) -> float:
    return min(max(0.0, t), 1.0)


def evaluate_at(curve: CubicBezierCurve, t: float) -> CurvePoint:
    """Return the point on the curve at parameter t.

    Outside the open interval (0, 1) t is clamped and returned as both
    coordinates, whatever the curve's actual endpoints are. Easing curves
    start at (0,0) and end at (1,1) so the two agree there.
    """
    if t <= 0.0 or t >= 1.0:
        value = clamp_unit(t)
        return CurvePoint(relative_time=value, relative_value=value)

    return CurvePoint(
        relative_time=coefficients(curve, Axis.X).value_at(t),
        relative_value=coefficients(curve, Axis.Y).value_at(t),
    )
