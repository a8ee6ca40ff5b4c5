from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from typing import Callable, Union
import numpy as np

from odestep.numerics.time_integrators import (
    RK4GENERAL_ORDERS, Derivative, euler, rk4, rk4general,
)

# step(y, t, h, f) -> y_next
StepFn = Callable[[float, float, float, Derivative], float]

METHODS = ("euler", "rk4", "rk4general")

@dataclass
class Trajectory:
    t: np.ndarray  # (n_steps+1,)
    y: np.ndarray  # (n_steps+1,)

def _rk4general_step(y: float, t: float, h: float, f: Derivative, lambda_order: int) -> float:
    return rk4general(y, t, h, lambda_order, f)

def resolve_method(name: str, lambda_order: int | None = None) -> StepFn:
    """
    Map a method name to a step(y, t, h, f) callable.
    Unlike the raw rk4general, the order is checked here.
    """
    if name == "euler":
        return euler
    if name == "rk4":
        return rk4
    if name == "rk4general":
        if lambda_order not in RK4GENERAL_ORDERS:
            raise ValueError(
                f"rk4general needs lambda_order in {RK4GENERAL_ORDERS}, got {lambda_order!r}"
            )
        return partial(_rk4general_step, lambda_order=lambda_order)
    raise ValueError(f"Unknown method {name!r}, expected one of {METHODS}")

def integrate(
    step: Union[StepFn, str],
    y0: float,
    t0: float,
    h: float,
    n_steps: int,
    f: Derivative,
    lambda_order: int | None = None,
) -> Trajectory:
    """
    Fixed-step integration: apply `step` n_steps times starting from (t0, y0).
    t_k = t0 + k*h is recomputed each step so time does not drift.
    lambda_order is only used when step is the name "rk4general".
    """
    if n_steps < 0:
        raise ValueError(f"n_steps must be >= 0, got {n_steps}")
    if isinstance(step, str):
        step = resolve_method(step, lambda_order)

    t_hist = np.zeros((n_steps + 1,), dtype=np.float64)
    y_hist = np.zeros((n_steps + 1,), dtype=np.float64)
    t_hist[0] = t0
    y_hist[0] = y0

    y = float(y0)
    for k in range(n_steps):
        t = t0 + k * h
        y = step(y, t, h, f)
        t_hist[k + 1] = t0 + (k + 1) * h
        y_hist[k + 1] = y

    return Trajectory(t=t_hist, y=y_hist)
