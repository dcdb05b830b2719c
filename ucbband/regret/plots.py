from __future__ import annotations

from typing import Mapping

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402


def plot_regret_band(
    band: Mapping[str, np.ndarray],
    out_png: str,
    *,
    seeds: int = 1,
    logx: bool = False,
    show_ref_sqrt: bool = True,
) -> None:
    """Mean regret with its confidence band, optionally against a C*sqrt(t) guide through the endpoint."""
    t = np.asarray(band["t"], dtype=float)
    mean = np.asarray(band["mean"], dtype=float)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(t, mean, color="tab:blue", label=f"UCB1 (mean of {seeds} seed{'s' if seeds != 1 else ''})")
    ax.fill_between(t, band["lo"], band["hi"], color="tab:blue", alpha=0.2, linewidth=0)
    if show_ref_sqrt:
        guide = np.sqrt(t) * (mean[-1] / np.sqrt(t[-1]))
        ax.plot(t, guide, ls=":", color="0.3", label=r"$C\sqrt{t}$")

    if logx:
        ax.set_xscale("log")
    ax.set_xlim(t[0], t[-1])
    ax.set_ylim(0.0, max(float(np.max(band["hi"])), 1e-9) * 1.05)
    ax.set_xlabel("pull t")
    ax.set_ylabel("pseudo-regret R(t)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(out_png, dpi=150)
    plt.close(fig)
