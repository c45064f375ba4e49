from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class CurveError(ValueError):
    pass


class Axis(Enum):
    X = "x"
    Y = "y"


def _without_slop(value: float) -> float:
    # cos(90°) comes back as 6e-17; snap such values to the exact number
    return round(value, 12)


@dataclass(frozen=True)
class ControlPoint:
    x: float
    y: float

    @classmethod
    def zero(cls) -> ControlPoint:
        return cls(0.0, 0.0)

    @classmethod
    def unit(cls) -> ControlPoint:
        return cls(1.0, 1.0)

    def coord(self, axis: Axis) -> float:
        return self.x if axis is Axis.X else self.y

    def translated(self, dx: float, dy: float = 0.0) -> ControlPoint:
        return ControlPoint(self.x + dx, self.y + dy)

    def rotated(self, degrees: float = 90.0) -> ControlPoint:
        """Rotate around the origin, counter-clockwise."""
        radians = math.radians(degrees)
        cos_t = _without_slop(math.cos(radians))
        sin_t = _without_slop(math.sin(radians))
        return ControlPoint(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )


@dataclass(frozen=True)
class CurvePoint:
    relative_time: float
    relative_value: float

    @classmethod
    def start(cls) -> CurvePoint:
        return cls(0.0, 0.0)

    @classmethod
    def end(cls) -> CurvePoint:
        return cls(1.0, 1.0)


@dataclass(frozen=True)
class CubicBezierCurve:
    c0: ControlPoint
    c1: ControlPoint
    c2: ControlPoint
    c3: ControlPoint

    def __post_init__(self):
        for p in self.control_points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise CurveError(f"Control point {p} is not finite")

    @classmethod
    def easing(cls, x1: float, y1: float, x2: float, y2: float) -> CubicBezierCurve:
        """Curve from (0,0) to (1,1) with the two inner points given CSS-style."""
        return cls(ControlPoint.zero(), ControlPoint(x1, y1), ControlPoint(x2, y2), ControlPoint.unit())

    @classmethod
    def from_points(cls, points: Iterable) -> CubicBezierCurve:
        pts = [p if isinstance(p, ControlPoint) else ControlPoint(*p) for p in points]
        if len(pts) != 4:
            raise CurveError(f"A cubic bezier needs exactly 4 control points, got {len(pts)}")
        return cls(*pts)

    @property
    def control_points(self) -> Tuple[ControlPoint, ControlPoint, ControlPoint, ControlPoint]:
        return (self.c0, self.c1, self.c2, self.c3)

    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the control polygon."""
        xs = [p.x for p in self.control_points]
        ys = [p.y for p in self.control_points]
        return min(xs), min(ys), max(xs), max(ys)

    @property
    def is_monotonic_x(self) -> bool:
        xs = [p.x for p in self.control_points]
        return all(b >= a for a, b in zip(xs, xs[1:]))

    def transformed(self, dx: float, degrees: float) -> CubicBezierCurve:
        return CubicBezierCurve(*(p.translated(dx).rotated(degrees) for p in self.control_points))
