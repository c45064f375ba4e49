import pytest

from bezier_timing.config import reset_config
from bezier_timing.timing.curve import ControlPoint, CubicBezierCurve


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def identity_curve() -> CubicBezierCurve:
    return CubicBezierCurve(
        ControlPoint(0.0, 0.0),
        ControlPoint(1.0 / 3.0, 1.0 / 3.0),
        ControlPoint(2.0 / 3.0, 2.0 / 3.0),
        ControlPoint(1.0, 1.0),
    )


@pytest.fixture
def ease_curve() -> CubicBezierCurve:
    return CubicBezierCurve.easing(0.25, 0.1, 0.25, 1.0)


def bernstein(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    omt = 1.0 - t
    return (omt ** 3) * p0 + 3 * (omt ** 2) * t * p1 + 3 * omt * (t ** 2) * p2 + (t ** 3) * p3
