from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .curve import CubicBezierCurve
from .inverse import evaluate_inverse_at


class UnknownPreset(KeyError):
    pass


def linear(u: float) -> float:
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    return u


@dataclass(frozen=True)
class CubicBezierEasing:
    # Control points (x1, y1, x2, y2); start is (0,0) end is (1,1)
    p1x: float
    p1y: float
    p2x: float
    p2y: float

    @property
    def curve(self) -> CubicBezierCurve:
        return CubicBezierCurve.easing(self.p1x, self.p1y, self.p2x, self.p2y)

    def sample(self, u: float) -> float:
        """Return y for a given u in [0,1], solving x(t) = u in closed form."""
        return evaluate_inverse_at(self.curve, u).relative_value


# CSS / Core Animation timing functions, plus a few overshooting ones
PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    "linear": (0.0, 0.0, 1.0, 1.0),
    "ease": (0.25, 0.1, 0.25, 1.0),
    "default": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    "ease-out-expo": (0.175, 0.885, 0.320, 1.275),
    "ease-out-back": (0.230, 1.000, 0.470, 1.75),
    "ease-out-back-drastic": (0.190, 1.000, 0.220, 1.00),
}


def get_preset(name: str) -> CubicBezierEasing:
    try:
        return CubicBezierEasing(*PRESETS[name])
    except KeyError:
        raise UnknownPreset(name) from None
