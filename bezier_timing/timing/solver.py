from __future__ import annotations

import cmath
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from ..config import get_config
from .coefficients import CubicCoefficients, coefficients
from .curve import Axis, CubicBezierCurve

log = logging.getLogger(__name__)


class RootStatus(Enum):
    FOUND = "found"
    NO_ROOT = "no_root"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class RootResult:
    status: RootStatus
    # 0.0 unless status is FOUND
    root: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is RootStatus.FOUND


def root_of_unity(i: int) -> complex:
    """i-th cube root of unity: 1, (-1 - i*sqrt3)/2, (-1 + i*sqrt3)/2."""
    if i > 0:
        return complex(-1.0, math.sqrt(3) * (-1) ** i) / 2
    return complex(1.0, 0.0)


def _is_uniform(value: float) -> bool:
    return 0.0 <= value <= 1.0


def _pick_root(candidates: Iterable[complex], imaginary_epsilon: float) -> RootResult:
    result = RootResult(RootStatus.NO_ROOT)
    # Later candidates overwrite earlier ones
    for candidate in candidates:
        if abs(candidate.imag) <= imaginary_epsilon and _is_uniform(candidate.real):
            result = RootResult(RootStatus.FOUND, candidate.real)
    return result


def _cardano_candidates(coeffs: CubicCoefficients):
    # Reduce to t^3 + a*t^2 + b*t + c
    a = coeffs.b / coeffs.a
    b = coeffs.c / coeffs.a
    c = coeffs.d / coeffs.a

    # Shift back from the depressed cubic
    simple_root = -a / 3

    p = (3 * b - a * a) / 9
    q = (2 * a ** 3 - 9 * a * b + 27 * c) / 54
    discriminant = p ** 3 + q ** 2

    for i in range(3):
        if 3 * p == 0 or 2 * q == 0:
            if p == 0:
                candidate = math.cbrt(-2 * q) * root_of_unity(i)
            else:
                candidate = (-1) ** i * cmath.sqrt(-3 * p) * min(i, 1)
        elif discriminant == 0:
            # Repeated real roots
            power = 1 if i == 0 else 2
            candidate = complex(2 ** (2 - power) * math.cbrt(q * (-1) ** power))
        elif discriminant > 0:
            # One real root, two complex conjugates
            sqrt_d = math.sqrt(discriminant)
            u = math.cbrt(sqrt_d - q) * root_of_unity(i)
            v = math.cbrt(sqrt_d + q) * root_of_unity(i).conjugate()
            candidate = u - v
        else:
            # Three distinct real roots, trigonometric form
            r = math.sqrt(abs(p) ** 3)
            phi = math.acos(min(1.0, max(-1.0, -q / r))) + 2 * i * math.pi
            candidate = complex(2 * math.cbrt(r) * math.cos(phi / 3))

        yield candidate + simple_root


def _quadratic_candidates(b: float, c: float, d: float):
    disc = complex(c * c - 4 * b * d)
    sqrt_disc = cmath.sqrt(disc)
    yield (-c - sqrt_disc) / (2 * b)
    yield (-c + sqrt_disc) / (2 * b)


def solve_coefficients(
    coeffs: CubicCoefficients,
    imaginary_epsilon: Optional[float] = None,
    degenerate_epsilon: Optional[float] = None,
) -> RootResult:
    """Find the real root of a*t^3 + b*t^2 + c*t + d in [0, 1].

    Cardano's method on the depressed cubic, with one candidate per cube
    root of unity. When several candidates land in [0, 1] the last one
    wins. A vanishing leading coefficient drops to the quadratic or linear
    equation instead of dividing by it.
    """
    cfg = get_config()
    if imaginary_epsilon is None:
        imaginary_epsilon = cfg.imaginary_epsilon
    if degenerate_epsilon is None:
        degenerate_epsilon = cfg.degenerate_epsilon

    if abs(coeffs.a) > degenerate_epsilon:
        result = _pick_root(_cardano_candidates(coeffs), imaginary_epsilon)
    elif abs(coeffs.b) > degenerate_epsilon:
        log.debug(f"Leading coefficient {coeffs.a!r} vanishes; solving as quadratic")
        result = _pick_root(_quadratic_candidates(coeffs.b, coeffs.c, coeffs.d), imaginary_epsilon)
    elif abs(coeffs.c) > degenerate_epsilon:
        log.debug("Cubic and quadratic terms vanish; solving as linear")
        result = _pick_root([complex(-coeffs.d / coeffs.c)], imaginary_epsilon)
    else:
        log.debug(f"Constant polynomial {coeffs.d!r}; no unique root")
        return RootResult(RootStatus.DEGENERATE)

    if not result.found:
        log.debug(f"No root in [0, 1] for {coeffs}")
    return result


def solve_root(
    curve: CubicBezierCurve,
    axis: Axis = Axis.Y,
    imaginary_epsilon: Optional[float] = None,
    degenerate_epsilon: Optional[float] = None,
) -> RootResult:
    return solve_coefficients(coefficients(curve, axis), imaginary_epsilon, degenerate_epsilon)


def root_for_curve(curve: CubicBezierCurve) -> float:
    """Root of the curve's y polynomial in [0, 1], or 0.0 when there is none."""
    return solve_root(curve).root
