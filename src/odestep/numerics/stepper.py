from __future__ import annotations
from dataclasses import dataclass
from odestep.numerics.time_integrators import Derivative, euler, rk4, rk4general

@dataclass(frozen=True)
class Stepper:
    """
    The three steppers curried over a fixed derivative function f(t, y).
    Holds no state besides f; use the raw functions to swap f between steps.
    """
    f: Derivative

    def euler(self, y0: float, t0: float, h: float) -> float:
        return euler(y0, t0, h, self.f)

    def rk4(self, y0: float, t0: float, h: float) -> float:
        return rk4(y0, t0, h, self.f)

    def rk4general(self, y0: float, t0: float, h: float, lambda_order: int) -> float:
        return rk4general(y0, t0, h, lambda_order, self.f)

def make_stepper(f: Derivative) -> Stepper:
    return Stepper(f)
