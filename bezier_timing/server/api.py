from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..timing.curve import CubicBezierCurve, CurveError
from ..timing.easing import PRESETS, UnknownPreset
from ..timing.evaluator import evaluate_at
from ..timing.inverse import solve_inverse
from ..timing.models import CurveModel, EvaluateRequest, SampleRequest, TrackSampleRequest
from ..timing.planner import FrameLimitExceeded, progressions, sample_timeline

log = logging.getLogger(__name__)


app = FastAPI(title="Bezier Timing API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # Rejected input may hold NaN or inf, which cannot be written back as JSON
    errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


def _curve(model: CurveModel) -> CubicBezierCurve:
    try:
        return model.to_curve()
    except UnknownPreset as e:
        raise HTTPException(404, detail=f"Preset not found: {e.args[0]}")
    except CurveError as e:
        raise HTTPException(422, detail=str(e))


@app.get("/api/presets")
def api_presets_list():
    return {name: list(p) for name, p in PRESETS.items()}


@app.post("/api/evaluate")
def api_evaluate(req: EvaluateRequest):
    point = evaluate_at(_curve(req.curve), req.t)
    return {"relative_time": point.relative_time, "relative_value": point.relative_value}


@app.post("/api/evaluate_inverse")
def api_evaluate_inverse(req: EvaluateRequest):
    solution = solve_inverse(_curve(req.curve), req.t)
    log.info(f"Inverse lookup t={req.t} -> {solution.result.status.value}")
    return {
        "relative_time": solution.point.relative_time,
        "relative_value": solution.point.relative_value,
        "status": solution.result.status.value,
    }


@app.post("/api/progressions")
def api_progressions(req: SampleRequest):
    try:
        points = progressions(_curve(req.curve), req.duration_s, req.max_fps)
    except FrameLimitExceeded as e:
        raise HTTPException(422, detail=str(e))
    log.info(f"Sampled {len(points)} frames over {req.duration_s}s")
    return [{"relative_time": p.relative_time, "relative_value": p.relative_value} for p in points]


@app.post("/api/sample")
def api_sample(req: TrackSampleRequest):
    try:
        times, values = sample_timeline(req.track, dt=req.dt)
    except FrameLimitExceeded as e:
        raise HTTPException(422, detail=str(e))
    return {"times": times, "values": values}
