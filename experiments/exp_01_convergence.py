from __future__ import annotations
import os
import numpy as np

from odestep.analysis.convergence import ConvergenceConfig, one_step_errors, global_errors, observed_order
from odestep.numerics.time_integrators import RK4GENERAL_ORDERS
from odestep.numerics.trajectory import resolve_method
from odestep.viz.plots import ensure_dir, plot_convergence

def growth(t: float, y: float) -> float:
    # dy/dt = y, y(0) = 1  ->  y = e^t
    return y

def main():
    cfg = ConvergenceConfig()
    outdir = "assets"
    ensure_dir(outdir)

    methods = {"euler": resolve_method("euler"), "rk4": resolve_method("rk4")}
    for lam in RK4GENERAL_ORDERS:
        methods[f"rk4general(l={lam})"] = resolve_method("rk4general", lambda_order=lam)

    exact = lambda t: cfg.y0 * np.exp(t - cfg.t0)

    local = {}
    glob = {}
    for name, step in methods.items():
        local[name] = one_step_errors(step, cfg.hs, growth, exact, cfg.y0, cfg.t0)
        glob[name] = global_errors(step, cfg.hs, growth, exact, cfg.y0, cfg.t0, cfg.t_final)

    print(f"{'method':<20} {'local order':>12} {'global order':>13}")
    for name in methods:
        p_loc = observed_order(cfg.hs, local[name])
        p_glob = observed_order(cfg.hs, glob[name])
        print(f"{name:<20} {p_loc:>12.3f} {p_glob:>13.3f}")

    print("\nGlobal error at t =", cfg.t_final)
    for i, h in enumerate(cfg.hs):
        row = "  ".join(f"{glob[name][i]:.3e}" for name in methods)
        print(f"h={h:<8g} {row}")

    plot_convergence(cfg.hs, local, os.path.join(outdir, "convergence_local.png"), title="One-step error, dy/dt = y")
    plot_convergence(cfg.hs, glob, os.path.join(outdir, "convergence_global.png"), title=f"Error at t={cfg.t_final}, dy/dt = y")
    print("Saved outputs to assets/")

if __name__ == "__main__":
    main()
