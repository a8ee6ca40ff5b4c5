import math

import numpy as np
import pytest

from odestep.numerics.time_integrators import RK4GENERAL_ORDERS, euler, rk4, rk4general


def growth(t, y):
    return y


class CallRecorder:
    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, t, y):
        self.calls.append((t, y))
        return self.fn(t, y)


def test_euler_example():
    assert euler(1.0, 0.0, 1.0, growth) == 2.0


def test_rk4_example():
    assert rk4(1.0, 0.0, 1.0, growth) == pytest.approx(2.708333333333333, rel=1e-12)


def test_constant_derivative_is_exact():
    # dyadic values so every intermediate product is exact
    const = lambda t, y: 2.0
    y0, t0, h = 1.0, 0.5, 0.375
    assert euler(y0, t0, h, const) == y0 + h * 2.0
    assert rk4(y0, t0, h, const) == y0 + h * 2.0
    for lam in RK4GENERAL_ORDERS:
        assert rk4general(y0, t0, h, lam, const) == y0 + h * 2.0


@pytest.mark.parametrize("h", [0.3, -0.7, 1e-3, 12.0])
def test_constant_derivative_close_for_any_h(h):
    const = lambda t, y: -1.3
    expected = 4.2 + h * -1.3
    assert euler(4.2, 1.0, h, const) == pytest.approx(expected, rel=1e-14)
    assert rk4(4.2, 1.0, h, const) == pytest.approx(expected, rel=1e-14)
    for lam in RK4GENERAL_ORDERS:
        assert rk4general(4.2, 1.0, h, lam, const) == pytest.approx(expected, rel=1e-14)


def test_euler_calls_f_once():
    f = CallRecorder(growth)
    euler(1.0, 0.0, 0.5, f)
    assert f.calls == [(0.0, 1.0)]


def test_rk4_stage_order():
    f = CallRecorder(growth)
    rk4(1.0, 0.0, 1.0, f)
    assert f.calls == [(0.0, 1.0), (0.5, 1.5), (0.5, 1.75), (1.0, 2.75)]


def test_rk4general_stage_order():
    f = CallRecorder(growth)
    y1 = rk4general(1.0, 0.0, 1.0, 4, f)
    assert f.calls == [(0.0, 1.0), (0.5, 1.5), (0.5, 1.625), (1.0, 2.75)]
    assert y1 == pytest.approx(rk4(1.0, 0.0, 1.0, growth))


@pytest.mark.parametrize("lam", [3, 4, 5])
def test_rk4general_matches_classical(lam):
    classic = rk4(1.0, 0.0, 0.1, growth)
    assert abs(rk4general(1.0, 0.0, 0.1, lam, growth) - classic) < 1e-6
    assert abs(classic - math.exp(0.1)) < 1e-6


def test_rk4general_time_dependent():
    # dy/dt = cos(t): every member is exact up to O(h^5) for this quadrature
    f = lambda t, y: math.cos(t)
    for lam in RK4GENERAL_ORDERS:
        y1 = rk4general(0.0, 0.0, 0.1, lam, f)
        assert y1 == pytest.approx(math.sin(0.1), abs=1e-8)


def test_negative_step_integrates_backward():
    y_back = rk4(1.0, 0.0, -0.1, growth)
    assert y_back == pytest.approx(math.exp(-0.1), abs=1e-6)
    assert euler(1.0, 0.0, -0.1, growth) == pytest.approx(0.9)


def test_deterministic():
    f = lambda t, y: math.sin(t) * y - 0.3 * y * y
    a = [euler(0.7, 0.2, 0.13, f), rk4(0.7, 0.2, 0.13, f), rk4general(0.7, 0.2, 0.13, 3, f)]
    b = [euler(0.7, 0.2, 0.13, f), rk4(0.7, 0.2, 0.13, f), rk4general(0.7, 0.2, 0.13, 3, f)]
    assert a == b


def test_nan_and_inf_propagate():
    assert math.isnan(euler(1.0, 0.0, 0.1, lambda t, y: float("nan")))
    assert math.isnan(rk4(1.0, 0.0, 0.1, lambda t, y: float("nan")))
    assert math.isinf(euler(1.0, 0.0, 0.1, lambda t, y: float("inf")))
    assert math.isnan(rk4(float("nan"), 0.0, 0.1, growth))


def test_rk4general_zero_order_does_not_raise():
    y1 = rk4general(1.0, 0.0, 1.0, 0, growth)
    assert math.isnan(y1)


def test_rk4general_truncates_order():
    assert rk4general(1.0, 0.0, 0.2, 3.9, growth) == rk4general(1.0, 0.0, 0.2, 3, growth)


def test_returns_python_float():
    assert type(rk4general(1.0, 0.0, 0.1, 3, growth)) is float
    assert type(rk4(np.float32(1.0), 0, 0.1, growth)) is float


def test_derivative_errors_propagate():
    def broken(t, y):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        rk4(1.0, 0.0, 0.1, broken)


def test_rk4general_keeps_caller_error_state_inside_f():
    calls = []

    def f(t, y):
        calls.append(t)
        if len(calls) == 3:
            return np.float64(1.0) / np.float64(0.0)
        return y

    with np.errstate(all="raise"):
        with pytest.raises(FloatingPointError):
            rk4general(1.0, 0.0, 0.1, 3, f)
    assert len(calls) == 3


def test_rk4general_zero_order_under_raising_error_state():
    with np.errstate(all="raise"):
        assert math.isnan(rk4general(1.0, 0.0, 1.0, 0, growth))


@pytest.mark.parametrize("step", [
    lambda f: rk4(1.0, 0.0, 0.1, f),
    lambda f: rk4general(1.0, 0.0, 0.1, 5, f),
])
def test_stages_receive_python_floats(step):
    f = CallRecorder(growth)
    step(f)
    assert [(type(t), type(y)) for t, y in f.calls] == [(float, float)] * 4
