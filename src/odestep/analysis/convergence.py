from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence
import numpy as np

from odestep.numerics.time_integrators import Derivative
from odestep.numerics.trajectory import StepFn, integrate

@dataclass
class ConvergenceConfig:
    y0: float = 1.0
    t0: float = 0.0
    t_final: float = 1.0
    hs: tuple[float, ...] = (0.1, 0.05, 0.025, 0.0125)

def one_step_errors(
    step: StepFn,
    hs: Sequence[float],
    f: Derivative,
    exact: Callable[[float], float],
    y0: float = 1.0,
    t0: float = 0.0,
) -> np.ndarray:
    """Local error |step(y0, t0, h) - y(t0 + h)| for each h."""
    errs = np.zeros((len(hs),), dtype=np.float64)
    for i, h in enumerate(hs):
        errs[i] = abs(step(y0, t0, h, f) - exact(t0 + h))
    return errs

def global_errors(
    step: StepFn,
    hs: Sequence[float],
    f: Derivative,
    exact: Callable[[float], float],
    y0: float = 1.0,
    t0: float = 0.0,
    t_final: float = 1.0,
) -> np.ndarray:
    """
    Error after round((t_final - t0)/h) steps of each fixed h, measured against
    exact() at the time actually reached. That is t_final only when h divides
    (t_final - t0).
    """
    errs = np.zeros((len(hs),), dtype=np.float64)
    for i, h in enumerate(hs):
        n_steps = int(round((t_final - t0) / h))
        traj = integrate(step, y0, t0, h, n_steps, f)
        errs[i] = abs(traj.y[-1] - exact(traj.t[-1]))
    return errs

def observed_order(hs: Sequence[float], errors: Sequence[float]) -> float:
    """Least-squares slope of log(error) vs log(h)."""
    hs = np.asarray(hs, dtype=np.float64)
    errors = np.asarray(errors, dtype=np.float64)
    if hs.shape != errors.shape or hs.size < 2:
        raise ValueError("need at least two (h, error) pairs of matching length")
    if np.any(hs <= 0) or np.any(errors <= 0):
        raise ValueError("step sizes and errors must be positive to fit a log-log slope")
    slope, _ = np.polyfit(np.log(hs), np.log(errors), 1)
    return float(slope)
