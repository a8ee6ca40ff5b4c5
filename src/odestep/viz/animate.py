from __future__ import annotations
import os
from typing import Optional
import numpy as np
import matplotlib.pyplot as plt

def save_frame(
    t: np.ndarray,             # (N,)
    y: np.ndarray,             # (N,)
    k: int,
    outpath: str,
    exact: Optional[tuple[np.ndarray, np.ndarray]] = None,
    title: str = "",
) -> None:
    """
    Save a single PNG frame showing the trajectory up to step k.
    Axis limits come from the full trajectory so frames line up in a GIF.
    """
    assert t.shape == y.shape, "t and y must have the same shape"

    plt.figure()
    if exact is not None:
        plt.plot(exact[0], exact[1], "k--", linewidth=1)
    plt.plot(t[:k + 1], y[:k + 1])
    plt.scatter([t[k]], [y[k]], marker="o", s=40)

    y_lo, y_hi = float(np.nanmin(y)), float(np.nanmax(y))
    pad = 0.05 * max(y_hi - y_lo, 1e-9)
    plt.xlim(float(t[0]), float(t[-1]))
    plt.ylim(y_lo - pad, y_hi + pad)
    plt.xlabel("t")
    plt.ylabel("y")

    plt.title(title)
    plt.tight_layout()
    plt.savefig(outpath, dpi=140)
    plt.close()

def make_gif(frames_dir: str, gif_path: str, fps: int = 20) -> None:
    """
    Build a GIF from PNG frames named frame_000000.png, frame_000001.png, ...
    duration is given in ms per frame, which is what imageio v2 expects.
    """
    import imageio.v2 as imageio

    files = sorted(f for f in os.listdir(frames_dir) if f.startswith("frame_") and f.endswith(".png"))
    if not files:
        raise RuntimeError(f"No frames found in {frames_dir}")

    images = [imageio.imread(os.path.join(frames_dir, f)) for f in files]
    imageio.mimsave(gif_path, images, duration=int(1000 / fps))
