from __future__ import annotations
import os
from typing import Mapping, Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def plot_convergence(
    hs: Sequence[float],
    errors_by_method: Mapping[str, np.ndarray],
    outpath: str,
    title: str = "Error vs step size",
) -> None:
    plt.figure()
    for name, errs in errors_by_method.items():
        plt.loglog(hs, errs, "o-", label=name)
    plt.xlabel("h")
    plt.ylabel("|y - y_exact|")
    plt.legend()
    plt.title(title)
    plt.tight_layout()
    plt.savefig(outpath, dpi=150)
    plt.close()

def plot_solution(
    t: np.ndarray,
    y_by_method: Mapping[str, np.ndarray],
    outpath: str,
    exact: Optional[tuple[np.ndarray, np.ndarray]] = None,
) -> None:
    """
    t: (N,) shared time grid
    exact: optional (t_exact, y_exact) drawn dashed underneath
    """
    plt.figure()
    if exact is not None:
        plt.plot(exact[0], exact[1], "k--", linewidth=1, label="exact")
    for name, y in y_by_method.items():
        plt.plot(t, y, label=name)
    plt.xlabel("t")
    plt.ylabel("y")
    plt.legend()
    plt.title("Solution")
    plt.tight_layout()
    plt.savefig(outpath, dpi=150)
    plt.close()
