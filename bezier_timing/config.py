from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    # Root acceptance: |imag| <= imaginary_epsilon. 0.0 keeps exact comparison.
    imaginary_epsilon: float = 0.0
    # Leading coefficients at or below this magnitude drop the cubic to a lower degree
    degenerate_epsilon: float = 1e-12

    # Frame sampling
    max_fps: int = 60
    max_frames: int = 100_000          # per progressions / sample_timeline call


def load_config() -> SolverConfig:
    cfg = SolverConfig()
    # Allow simple env overrides
    cfg.imaginary_epsilon = float(os.getenv("BEZIER_IMAG_EPSILON", cfg.imaginary_epsilon))
    cfg.degenerate_epsilon = float(os.getenv("BEZIER_DEGENERATE_EPSILON", cfg.degenerate_epsilon))
    cfg.max_fps = int(os.getenv("BEZIER_MAX_FPS", cfg.max_fps))
    cfg.max_frames = int(os.getenv("BEZIER_MAX_FRAMES", cfg.max_frames))
    if cfg.imaginary_epsilon < 0 or cfg.degenerate_epsilon < 0:
        raise ValueError("Solver tolerances must be non-negative")
    if cfg.max_fps <= 0:
        raise ValueError("BEZIER_MAX_FPS must be positive")
    if cfg.max_frames <= 0:
        raise ValueError("BEZIER_MAX_FRAMES must be positive")
    return cfg


_config: Optional[SolverConfig] = None


def get_config() -> SolverConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
