from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np


class SqrtFit(NamedTuple):
    slope: float
    intercept: float
    correlation: float


def pseudo_regret(actions: Sequence[int], means: Sequence[float]) -> np.ndarray:
    """Cumulative ``sum_t [max_a mu(a) - mu(a_t)]`` after each pull."""
    mu = np.asarray(means, dtype=float)
    picked = np.asarray(actions, dtype=np.intp)
    if picked.size == 0:
        return np.zeros(0, dtype=float)
    return np.cumsum(mu.max() - mu[picked])


def sqrt_t_fit(regret: np.ndarray, burn_in: float = 0.1) -> SqrtFit:
    """Least-squares ``R(t) ~ slope * sqrt(t) + intercept``, skipping the first ``burn_in`` share of pulls.

    A flat tail has no defined correlation and reports NaN.
    """
    if regret.size < 2:
        return SqrtFit(0.0, float(regret[0]) if regret.size else 0.0, float("nan"))
    t0 = int(burn_in * regret.size)
    y = regret[t0:]
    x = np.sqrt(np.arange(t0 + 1, regret.size + 1, dtype=float))
    slope, intercept = np.polyfit(x, y, deg=1)
    corr = float("nan") if np.ptp(y) == 0 else float(np.corrcoef(x, y)[0, 1])
    return SqrtFit(float(slope), float(intercept), corr)
