from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, FiniteFloat, model_validator

from .curve import CubicBezierCurve, ControlPoint
from .easing import PRESETS, CubicBezierEasing, get_preset


class PointModel(BaseModel):
    x: FiniteFloat
    y: FiniteFloat


class CurveModel(BaseModel):
    """A curve given as 4 points, as CSS-style [x1,y1,x2,y2], or by preset name."""

    points: Optional[List[PointModel]] = None
    p: Optional[List[FiniteFloat]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")
    preset: Optional[str] = None

    @model_validator(mode="after")
    def validate_source(self):
        given = [v is not None for v in (self.points, self.p, self.preset)]
        if sum(given) != 1:
            raise ValueError("exactly one of points, p or preset is required")
        if self.points is not None and len(self.points) != 4:
            raise ValueError("points requires exactly 4 control points")
        if self.p is not None and len(self.p) != 4:
            raise ValueError("p requires [x1,y1,x2,y2]")
        return self

    def to_curve(self) -> CubicBezierCurve:
        if self.points is not None:
            return CubicBezierCurve(*(ControlPoint(pt.x, pt.y) for pt in self.points))
        if self.p is not None:
            return CubicBezierCurve.easing(*self.p)
        return get_preset(self.preset).curve  # type: ignore[arg-type]


class EvaluateRequest(BaseModel):
    curve: CurveModel
    t: FiniteFloat


class SampleRequest(BaseModel):
    curve: CurveModel
    duration_s: FiniteFloat = Field(..., gt=0)
    max_fps: Optional[int] = Field(default=None, gt=0, le=1000)


class Ease(BaseModel):
    type: Literal["linear", "cubic-bezier", "preset"] = "linear"
    p: Optional[List[FiniteFloat]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")
    name: Optional[str] = None

    @model_validator(mode="after")
    def validate_bezier(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
        if self.type == "preset":
            if self.name not in PRESETS:
                raise ValueError(f"unknown preset {self.name!r}")
        return self

    def easing(self) -> Optional[CubicBezierEasing]:
        if self.type == "cubic-bezier":
            return CubicBezierEasing(*self.p)  # type: ignore[misc]
        if self.type == "preset":
            return get_preset(self.name)  # type: ignore[arg-type]
        return None


class Keyframe(BaseModel):
    t: FiniteFloat = Field(..., ge=0.0, description="Time in seconds")
    value: FiniteFloat = Field(..., description="Animated value at this keyframe")
    ease: Ease = Field(default_factory=Ease)


class KeyframeTrack(BaseModel):
    keyframes: List[Keyframe]

    @model_validator(mode="after")
    def validate_keyframes(self):
        if not self.keyframes or len(self.keyframes) < 2:
            raise ValueError("At least two keyframes required")
        # sort and ensure increasing time
        self.keyframes.sort(key=lambda k: k.t)
        last_t = -1.0
        for k in self.keyframes:
            if k.t <= last_t:
                raise ValueError("Keyframe times must be strictly increasing")
            last_t = k.t
        return self


class TrackSampleRequest(BaseModel):
    track: KeyframeTrack
    dt: FiniteFloat = Field(0.01, gt=0)
