from __future__ import annotations
from typing import Callable
import numpy as np

# dy/dt = f(t, y)
Derivative = Callable[[float, float], float]

# Members of the generalized RK4 family. 2 is the classical scheme (see rk4).
RK4GENERAL_ORDERS = (1, 3, 4, 5)

# lambda=0 must give inf/nan, not an exception
_IEEE_QUIET = dict(divide="ignore", invalid="ignore", over="ignore")

def euler(y0: float, t0: float, h: float, f: Derivative) -> float:
    """Forward Euler: y_{n+1} = y_n + h f(t_n, y_n)."""
    y0 = float(y0)
    t0 = float(t0)
    h = float(h)
    return y0 + h * float(f(t0, y0))

def rk4(y0: float, t0: float, h: float, f: Derivative) -> float:
    """
    Classic RK4, a weighted average of four samples of f.
    The stages are evaluated strictly in order; each depends on the previous one.
    """
    y0 = float(y0)
    t0 = float(t0)
    h = float(h)

    k1 = float(f(t0, y0))
    k2 = float(f(t0 + h/2.0, y0 + h/2.0*k1))
    k3 = float(f(t0 + h/2.0, y0 + h/2.0*k2))
    k4 = float(f(t0 + h, y0 + h*k3))
    return y0 + h/6.0*(k1 + 2.0*k2 + 2.0*k3 + k4)

def rk4general(y0: float, t0: float, h: float, lambda_order: int, f: Derivative) -> float:
    """
    One-parameter family of fourth-order Runge-Kutta schemes.

    lambda_order selects the member and should be one of RK4GENERAL_ORDERS.
    It is truncated to an int and NOT validated: other values give whatever the
    arithmetic gives, and lambda_order=0 yields inf/nan instead of raising.
    """
    y0 = float(y0)
    t0 = float(t0)
    h = float(h)
    lam = np.float64(int(lambda_order))

    # Only the lambda arithmetic runs quiet; f is called under the caller's own numpy error state.
    with np.errstate(**_IEEE_QUIET):
        inv = 1.0/lam

    k1 = float(f(t0, y0))
    k2 = float(f(t0 + h/2.0, y0 + h/2.0*k1))
    with np.errstate(**_IEEE_QUIET):
        y3 = float(y0 + (0.5 - inv)*k1*h + inv*k2*h)
    k3 = float(f(t0 + h/2.0, y3))
    with np.errstate(**_IEEE_QUIET):
        y4 = float(y0 + (1.0 - lam/2.0)*k2*h + lam/2.0*k3*h)
    k4 = float(f(t0 + h, y4))
    with np.errstate(**_IEEE_QUIET):
        yh = y0 + h/6.0*(k1 + (4.0 - lam)*k2 + lam*k3 + k4)
    return float(yh)
