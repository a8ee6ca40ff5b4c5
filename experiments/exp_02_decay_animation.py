from __future__ import annotations
import os
import shutil
import numpy as np

from odestep.numerics.stepper import make_stepper
from odestep.numerics.trajectory import integrate, resolve_method
from odestep.viz.animate import save_frame, make_gif
from odestep.viz.plots import ensure_dir, plot_solution

# dy/dt = -k y + A sin(w t)
K = 0.8
A = 1.5
W = 2.0

def forced_decay(t: float, y: float) -> float:
    return -K * y + A * np.sin(W * t)

def exact_solution(t: np.ndarray, y0: float) -> np.ndarray:
    denom = K * K + W * W
    particular = A * (K * np.sin(W * t) - W * np.cos(W * t)) / denom
    c = y0 + A * W / denom
    return c * np.exp(-K * t) + particular

def main():
    outdir = "assets"
    ensure_dir(outdir)

    frames_dir = os.path.join(outdir, "frames_decay")
    if os.path.exists(frames_dir):
        shutil.rmtree(frames_dir)
    os.makedirs(frames_dir, exist_ok=True)

    y0, t0 = 2.0, 0.0
    T = 10.0
    h = 0.25
    steps = int(T / h)

    stepper = make_stepper(forced_decay)
    print(f"First rk4 step: y({h}) = {stepper.rk4(y0, t0, h):.6f}")

    trajs = {
        "euler": integrate("euler", y0, t0, h, steps, forced_decay),
        "rk4": integrate("rk4", y0, t0, h, steps, forced_decay),
        "rk4general(l=3)": integrate(resolve_method("rk4general", 3), y0, t0, h, steps, forced_decay),
    }

    t_fine = np.linspace(t0, T, 400)
    y_fine = exact_solution(t_fine, y0)
    for name, traj in trajs.items():
        err = np.max(np.abs(traj.y - exact_solution(traj.t, y0)))
        print(f"{name:<16} max error {err:.3e}")

    t_grid = trajs["rk4"].t
    plot_solution(
        t_grid,
        {name: traj.y for name, traj in trajs.items()},
        os.path.join(outdir, "forced_decay.png"),
        exact=(t_fine, y_fine),
    )

    rk = trajs["rk4"]
    for k in range(len(rk.t)):
        save_frame(
            rk.t, rk.y, k,
            outpath=os.path.join(frames_dir, f"frame_{k:06d}.png"),
            exact=(t_fine, y_fine),
            title=f"rk4, t = {rk.t[k]:.2f}",
        )

    gif_path = os.path.join(outdir, "forced_decay_rk4.gif")
    make_gif(frames_dir, gif_path, fps=10)

    print("Saved outputs to assets/")
    print("GIF:", gif_path)

if __name__ == "__main__":
    main()
