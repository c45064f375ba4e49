from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..config import get_config
from .curve import CubicBezierCurve, CurvePoint
from .easing import linear
from .inverse import evaluate_inverse_at
from .models import Keyframe, KeyframeTrack


class FrameLimitExceeded(ValueError):
    pass


def _frame_count(frames: float) -> int:
    limit = get_config().max_frames
    # inf on overflow also fails this
    if not frames <= limit:
        raise FrameLimitExceeded(f"{frames} frames requested, limit is {limit}")
    return max(1, math.floor(frames))


def progressions(curve: CubicBezierCurve, duration_s: float, max_fps: Optional[int] = None) -> List[CurvePoint]:
    """Curve progress for every frame of an animation lasting duration_s.

    Frames are spaced evenly in relative time over [0, 1); the end point
    is always appended.
    """
    if duration_s <= 0:
        return [CurvePoint.start(), CurvePoint.end()]

    fps = max_fps or get_config().max_fps
    frames = _frame_count(fps * duration_s)
    step = 1.0 / frames
    points = [evaluate_inverse_at(curve, i * step) for i in range(frames)]
    points.append(CurvePoint.end())
    return points


def delay_for_value(
    curve: CubicBezierCurve,
    relative_value: float,
    duration_s: float,
    max_fps: Optional[int] = None,
) -> float:
    """Relative time at which the curve first reaches relative_value (1.0 if never)."""
    for point in progressions(curve, duration_s, max_fps):
        if relative_value <= point.relative_value:
            return point.relative_time
    return 1.0


@dataclass
class KeyframeTiming:
    curve: CubicBezierCurve
    relative_start: float = 0.0
    relative_duration: float = 1.0

    @property
    def range(self) -> Tuple[float, float]:
        # Half-open [start, end)
        return (self.relative_start, self.relative_start + self.relative_duration)

    def overlaps(self, other: KeyframeTiming) -> bool:
        start, end = self.range
        other_start, other_end = other.range
        if start == end or other_start == other_end:
            return False
        return start < other_end and other_start < end

    def progress_at(self, t: float) -> CurvePoint:
        return evaluate_inverse_at(self.curve, t)


def _ease_fn(kf: Keyframe) -> Callable[[float], float]:
    easing = kf.ease.easing()
    if easing is None:
        return linear
    return easing.sample


def sample_timeline(track: KeyframeTrack, dt: float = 0.01) -> Tuple[List[float], List[float]]:
    """Sample a keyframe track into time and value arrays.

    - dt: sampling interval in seconds (default 10ms)
    Returns (times, values)
    """
    kfs = track.keyframes
    times: List[float] = []
    values: List[float] = []
    start_t = kfs[0].t
    total_t = kfs[-1].t
    _frame_count((total_t - start_t) / dt + 1)

    seg_start_idx = 0
    t = start_t
    while t <= total_t + 1e-9:
        # Find current segment
        while seg_start_idx < len(kfs) - 2 and t > kfs[seg_start_idx + 1].t:
            seg_start_idx += 1
        k0 = kfs[seg_start_idx]
        k1 = kfs[seg_start_idx + 1]
        u = (t - k0.t) / (k1.t - k0.t)
        u = 0.0 if u < 0.0 else (1.0 if u > 1.0 else u)
        f = _ease_fn(k1)  # easing stored on arrival keyframe
        times.append(t)
        values.append(k0.value + (k1.value - k0.value) * f(u))
        t += dt

    # Ensure last sample is exactly last keyframe
    if times[-1] < total_t:
        times.append(total_t)
        values.append(kfs[-1].value)

    return times, values
