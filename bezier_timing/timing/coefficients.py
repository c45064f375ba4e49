from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .curve import Axis, CubicBezierCurve


@dataclass(frozen=True)
class CubicCoefficients:
    """a*t^3 + b*t^2 + c*t + d for one axis of a curve."""

    a: float
    b: float
    c: float
    d: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    def value_at(self, t: float) -> float:
        total = 0.0
        # Highest degree first
        for power, coeff in zip((3, 2, 1, 0), self.as_tuple()):
            total += coeff * t ** power
        return total


def coefficients(curve: CubicBezierCurve, axis: Axis) -> CubicCoefficients:
    # Expansion of (1-t)^3*c0 + 3t(1-t)^2*c1 + 3t^2(1-t)*c2 + t^3*c3
    c0, c1, c2, c3 = (p.coord(axis) for p in curve.control_points)
    return CubicCoefficients(
        a=c3 - 3 * c2 + 3 * c1 - c0,
        b=3 * c2 - 6 * c1 + 3 * c0,
        c=3 * c1 - 3 * c0,
        d=c0,
    )
